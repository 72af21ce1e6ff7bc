"""Key/value storage backends."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod


class Storage(ABC):
    """Byte-keyed key/value store; implementations handle their own locking."""

    @abstractmethod
    def put(self, key: bytes, value: bytes) -> None:
        """Store ``value`` under ``key``."""

    @abstractmethod
    def get(self, key: bytes) -> bytes | None:
        """Return the value for ``key``, or None if it is absent."""

    @abstractmethod
    def delete(self, key: bytes) -> None:
        """Remove ``key`` if present."""

    @abstractmethod
    def contains_key(self, key: bytes) -> bool:
        """Return whether ``key`` is present."""


class MemDb(Storage):
    """Thread-safe in-memory store."""

    def __init__(self) -> None:
        self._data: dict[bytes, bytes] = {}
        self._lock = threading.Lock()

    def put(self, key: bytes, value: bytes) -> None:
        with self._lock:
            self._data[bytes(key)] = bytes(value)

    def get(self, key: bytes) -> bytes | None:
        with self._lock:
            return self._data.get(bytes(key))

    def delete(self, key: bytes) -> None:
        with self._lock:
            self._data.pop(bytes(key), None)

    def contains_key(self, key: bytes) -> bool:
        with self._lock:
            return bytes(key) in self._data


class RocksDbStub(Storage):
    """Stand-in for a RocksDB backend, kept in memory."""

    def __init__(self) -> None:
        self._inner = MemDb()

    def put(self, key: bytes, value: bytes) -> None:
        self._inner.put(key, value)

    def get(self, key: bytes) -> bytes | None:
        return self._inner.get(key)

    def delete(self, key: bytes) -> None:
        self._inner.delete(key)

    def contains_key(self, key: bytes) -> bool:
        return self._inner.contains_key(key)


class SledDbStub(Storage):
    """Stand-in for a sled backend, kept in memory."""

    def __init__(self) -> None:
        self._inner = MemDb()

    def put(self, key: bytes, value: bytes) -> None:
        self._inner.put(key, value)

    def get(self, key: bytes) -> bytes | None:
        return self._inner.get(key)

    def delete(self, key: bytes) -> None:
        self._inner.delete(key)

    def contains_key(self, key: bytes) -> bool:
        return self._inner.contains_key(key)


def open_backend(name: str) -> Storage:
    """Open a backend by name; unknown names fall back to an in-memory store."""
    backends = {"mem": MemDb, "rocks": RocksDbStub, "sled": SledDbStub}
    return backends.get(name, MemDb)()