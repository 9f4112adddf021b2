"""Storage backend interface definitions.

A backend persists one opaque blob of bytes: the serialized document.
Serialization is handled one layer up by `DocumentStore`.
"""
from __future__ import annotations
from abc import ABC, abstractmethod


class StorageBackend(ABC):
    """Abstract single-document storage backend."""

    @abstractmethod
    def save(self, data: bytes) -> None:
        """Replace the stored blob with `data`."""

    @abstractmethod
    def load(self) -> bytes:
        """Return the stored blob.

        Should raise `KeyError` if nothing has been stored yet.
        """

    @abstractmethod
    def exists(self) -> bool:
        """Return True if a blob has been stored."""
