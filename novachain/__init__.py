"""Proof-of-history digests, block data model, in-memory storage, VM shims and a block simulator."""

__version__ = "0.1.0"

__all__ = ["cli", "data_model", "demo", "poh", "simulate", "storage", "vm"]