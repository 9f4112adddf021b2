"""Storage backend that maps all operations to a single specific file.

The document file is written through a temporary sibling and then renamed
over the target, so a reader never sees a half-written document.
"""
from __future__ import annotations
import os
from pathlib import Path
from .base import StorageBackend
import logging

logger = logging.getLogger(__name__)


class SingleFileStorage(StorageBackend):
    """Backend that targets a single on-disk file.

    Parameters
    - file_path: path to the file used for all reads/writes.
      If the file does not exist, `load` will raise `KeyError`.
    """

    def __init__(self, file_path: str | Path) -> None:
        self.file_path = Path(file_path)
        # Ensure parent directory exists so writes succeed.
        if not self.file_path.parent.exists():
            os.makedirs(self.file_path.parent, exist_ok=True)

    def save(self, data: bytes) -> None:
        path = self.file_path
        tmp = path.with_suffix(path.suffix + ".tmp")
        with open(tmp, "wb") as f:
            f.write(bytes(data))
            f.flush()
            os.fsync(f.fileno())
        tmp.replace(path)
        logger.debug("SingleFileStorage wrote %s (%d bytes)", path, len(data))

    def load(self) -> bytes:
        path = self.file_path
        if not path.exists():
            raise KeyError(str(path))
        with open(path, "rb") as f:
            data = f.read()
            logger.debug("SingleFileStorage loaded %s (%d bytes)", path, len(data))
            return data

    def exists(self) -> bool:
        return self.file_path.exists()
