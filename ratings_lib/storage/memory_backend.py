"""Memory-backed storage backend.

Keeps the serialized document in process memory. Used by the development
runner and by tests that do not care about the file on disk.
"""
from threading import RLock
from typing import Optional

from .base import StorageBackend


class MemoryStorage(StorageBackend):
    def __init__(self, initial: Optional[bytes] = None):
        self._lock = RLock()
        self._data: Optional[bytes] = initial

    def save(self, data: bytes) -> None:
        with self._lock:
            self._data = bytes(data)

    def load(self) -> bytes:
        with self._lock:
            if self._data is None:
                raise KeyError("document")
            return self._data

    def exists(self) -> bool:
        with self._lock:
            return self._data is not None
