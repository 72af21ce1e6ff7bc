"""Proof-of-history style digest chain helpers."""

from __future__ import annotations

import hashlib
import secrets

_U64_LIMIT = 1 << 64
DIGEST_SIZE = 32


def generate_poh(previous: bytes, counter: int) -> bytes:
    """Return the SHA-256 digest of ``previous`` followed by ``counter`` as little-endian u64.

    This is a small, non-cryptographic PoH-like generator meant for tests and demos.
    """
    if isinstance(counter, bool) or not isinstance(counter, int):
        raise TypeError("counter must be an integer")
    if not 0 <= counter < _U64_LIMIT:
        raise ValueError("counter must fit in an unsigned 64-bit integer")
    hasher = hashlib.sha256()
    hasher.update(bytes(previous))
    hasher.update(counter.to_bytes(8, "little"))
    return hasher.digest()


def random_seed() -> bytes:
    """Return 32 random bytes to start a digest chain."""
    return secrets.token_bytes(DIGEST_SIZE)