"""Blocks, headers and transactions with JSON-compatible serialization."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

_U64_LIMIT = 1 << 64


class TxType(Enum):
    """Kinds of transaction carried in a block."""

    CABIN_UPLOAD = "CabinUpload"
    CROSS_BRIDGE = "CrossBridge"
    TRANSFER = "Transfer"


def _require(data: Any, key: str) -> Any:
    if not isinstance(data, dict):
        raise ValueError("expected a mapping")
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None


def _to_bytes(value: Any, name: str) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if not isinstance(value, list):
        raise ValueError(f"field `{name}` must be a list of bytes")
    if any(isinstance(item, bool) or not isinstance(item, int) for item in value):
        raise ValueError(f"field `{name}` must hold integers")
    try:
        return bytes(value)
    except ValueError:
        raise ValueError(f"field `{name}` holds a value outside 0..255") from None


def _to_u64(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field `{name}` must be an integer")
    if not 0 <= value < _U64_LIMIT:
        raise ValueError(f"field `{name}` is out of range for u64")
    return value


@dataclass
class Transaction:
    """A typed transaction with an opaque payload."""

    tx_type: TxType
    payload: bytes = b""

    def to_dict(self) -> dict[str, Any]:
        return {"tx_type": self.tx_type.value, "payload": list(self.payload)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Transaction":
        raw_type = _require(data, "tx_type")
        try:
            tx_type = TxType(raw_type)
        except ValueError:
            raise ValueError(f"unknown variant `{raw_type}`") from None
        return cls(tx_type=tx_type, payload=_to_bytes(_require(data, "payload"), "payload"))


@dataclass
class BlockHeader:
    """Header of a block, linking it to its parent and PoH digest."""

    parent_hash: bytes
    merkle_root: bytes
    poh_digest: bytes
    number: int
    timestamp: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "parent_hash": list(self.parent_hash),
            "merkle_root": list(self.merkle_root),
            "poh_digest": list(self.poh_digest),
            "number": self.number,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BlockHeader":
        return cls(
            parent_hash=_to_bytes(_require(data, "parent_hash"), "parent_hash"),
            merkle_root=_to_bytes(_require(data, "merkle_root"), "merkle_root"),
            poh_digest=_to_bytes(_require(data, "poh_digest"), "poh_digest"),
            number=_to_u64(_require(data, "number"), "number"),
            timestamp=_to_u64(_require(data, "timestamp"), "timestamp"),
        )


@dataclass
class Block:
    """A header together with its transactions."""

    header: BlockHeader
    transactions: list[Transaction] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "header": self.header.to_dict(),
            "transactions": [tx.to_dict() for tx in self.transactions],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Block":
        raw_txs = _require(data, "transactions")
        if not isinstance(raw_txs, list):
            raise ValueError("field `transactions` must be a list")
        return cls(
            header=BlockHeader.from_dict(_require(data, "header")),
            transactions=[Transaction.from_dict(tx) for tx in raw_txs],
        )

    def to_json(self) -> bytes:
        """Serialize to compact JSON bytes."""
        return json.dumps(self.to_dict(), separators=(",", ":")).encode("utf-8")

    @classmethod
    def from_json(cls, data: bytes | str) -> "Block":
        """Parse a block from JSON text or bytes; raises ValueError on bad input."""
        return cls.from_dict(json.loads(data))