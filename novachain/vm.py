"""Execution engines that run transactions and return receipts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .data_model import Transaction


@dataclass(frozen=True)
class Receipt:
    """Outcome of executing a transaction."""

    success: bool
    output: bytes


class VM(ABC):
    """A virtual machine able to execute transactions."""

    @abstractmethod
    def execute(self, tx: Transaction) -> Receipt:
        """Execute ``tx`` and return its receipt."""


class EvmCompat(VM):
    """Minimal EVM-compatible shim that echoes the payload."""

    def execute(self, tx: Transaction) -> Receipt:
        return Receipt(success=True, output=bytes(tx.payload))


class WasmRuntime(VM):
    """Minimal WASM runtime shim that echoes the payload."""

    def execute(self, tx: Transaction) -> Receipt:
        return Receipt(success=True, output=bytes(tx.payload))


def execute_evm_tx(tx: Transaction) -> Receipt:
    """Run ``tx`` on the EVM shim."""
    return EvmCompat().execute(tx)


def execute_wasm_tx(tx: Transaction) -> Receipt:
    """Run ``tx`` on the WASM shim."""
    return WasmRuntime().execute(tx)