"""Key-value storage backends."""

from __future__ import annotations

from abc import ABC, abstractmethod


class StorageBackend(ABC):
    """Interface of a key-value store over bytes."""

    @abstractmethod
    def put(self, key: bytes, value: bytes) -> None:
        """Store ``value`` under ``key``."""

    @abstractmethod
    def get(self, key: bytes) -> bytes | None:
        """The value under ``key``, or None if absent."""

    @abstractmethod
    def delete(self, key: bytes) -> None:
        """Remove ``key`` if present."""

    @abstractmethod
    def contains(self, key: bytes) -> bool:
        """Whether ``key`` is stored."""


class MemoryStorage(StorageBackend):
    """In-memory store, mainly for tests."""

    def __init__(self) -> None:
        self._data: dict[bytes, bytes] = {}

    def put(self, key: bytes, value: bytes) -> None:
        self._data[bytes(key)] = bytes(value)

    def get(self, key: bytes) -> bytes | None:
        return self._data.get(bytes(key))

    def delete(self, key: bytes) -> None:
        self._data.pop(bytes(key), None)

    def contains(self, key: bytes) -> bool:
        return bytes(key) in self._data