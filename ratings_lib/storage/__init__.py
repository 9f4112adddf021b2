"""Storage abstraction package for the ratings server."""
from __future__ import annotations

from pathlib import Path

from .base import StorageBackend
from .document_store import DocumentStore
from .memory_backend import MemoryStorage
from .serializer import JSONSerializer
from .single_file_backend import SingleFileStorage

__all__ = [
    "StorageBackend",
    "DocumentStore",
    "MemoryStorage",
    "SingleFileStorage",
    "JSONSerializer",
    "create_storage",
]


def create_storage(backend: str = "file", data_dir: str | Path = "data", file_name: str = "db.json") -> DocumentStore:
    """Compose a DocumentStore over the requested backend.

    `backend` is either "file" (the JSON document under `data_dir`) or
    "memory" (nothing touches disk).
    """
    if backend == "file":
        storage: StorageBackend = SingleFileStorage(Path(data_dir) / file_name)
    elif backend == "memory":
        storage = MemoryStorage()
    else:
        raise ValueError(f"Unknown storage backend: {backend!r}")
    return DocumentStore(storage, JSONSerializer())
