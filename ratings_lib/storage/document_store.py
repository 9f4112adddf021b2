"""DocumentStore: owns the persisted `{persons, ratings, counters}` document.

The whole document is loaded once at construction and rewritten in full on
every mutation. A missing or unreadable file is not fatal: the store logs the
problem and starts again from an empty document.
"""
from __future__ import annotations

import copy
import logging
from contextlib import contextmanager
from threading import RLock
from typing import Any, Dict, Iterator

from ratings_lib.errors import StorageError
from ratings_lib.storage.base import StorageBackend
from ratings_lib.storage.serializer import JSONSerializer, Serializer

logger = logging.getLogger(__name__)

# collection name -> counter name
COLLECTIONS = {"persons": "person", "ratings": "rating"}


def fresh_document() -> Dict[str, Any]:
    return {"persons": [], "ratings": [], "counters": {"person": 1, "rating": 1}}


def normalize_document(raw: Any) -> Dict[str, Any]:
    """Fill missing keys and lift counters above any id already in use.

    Raises StorageError when `raw` does not have the shape of a document.
    """
    if not isinstance(raw, dict):
        raise StorageError(f"document root must be an object, got {type(raw).__name__}")
    doc = dict(raw)
    counters = doc.get("counters")
    if not isinstance(counters, dict):
        counters = {}
    doc["counters"] = dict(counters)
    for collection, counter in COLLECTIONS.items():
        items = doc.get(collection)
        if items is None:
            items = []
        if not isinstance(items, list):
            raise StorageError(f"'{collection}' must be a list")
        doc[collection] = items
        ids = [it.get("id") for it in items if isinstance(it, dict) and isinstance(it.get("id"), int)]
        floor = max(ids) + 1 if ids else 1
        current = doc["counters"].get(counter)
        if not isinstance(current, int) or current < floor:
            if current is not None:
                logger.warning("Counter '%s' was %r; raising it to %d", counter, current, floor)
            doc["counters"][counter] = floor
    return doc


class DocumentStore:
    """In-memory document plus the backend it is flushed to.

    All access goes through a single re-entrant lock: readers get a deep copy
    via `snapshot()`, writers mutate a working copy inside `transaction()`
    that replaces the document only once it has been saved.
    """

    def __init__(self, storage: StorageBackend, serializer: Serializer | None = None) -> None:
        self._storage = storage
        self._serializer = serializer or JSONSerializer()
        self._lock = RLock()
        self._document = self.load()

    def load(self) -> Dict[str, Any]:
        """Read the persisted document, falling back to a fresh one."""
        try:
            raw = self._storage.load()
        except KeyError:
            logger.info("No stored document found; starting with an empty one")
            return fresh_document()
        try:
            try:
                parsed = self._serializer.load(raw)
            except ValueError as e:
                raise StorageError(f"could not parse document: {e}") from e
            doc = normalize_document(parsed)
        except StorageError as e:
            logger.error("Stored document is unreadable, starting over: %s", e)
            return fresh_document()
        logger.debug(
            "Loaded document with %d persons and %d ratings",
            len(doc["persons"]),
            len(doc["ratings"]),
        )
        return doc

    def save(self, document: Dict[str, Any]) -> None:
        """Serialize and overwrite the whole persisted document."""
        with self._lock:
            self._storage.save(self._serializer.dump(document))

    def reload(self) -> None:
        with self._lock:
            self._document = self.load()

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            return copy.deepcopy(self._document)

    @contextmanager
    def transaction(self) -> Iterator[Dict[str, Any]]:
        """Yield a working copy of the document; commit it once it is saved.

        If the block raises, or the save itself fails, the in-memory
        document is left exactly as it was before the transaction.
        """
        with self._lock:
            working = copy.deepcopy(self._document)
            yield working
            self.save(working)
            self._document = working

    def next_id(self, document: Dict[str, Any], kind: str) -> int:
        """Hand out the next id for `kind` ("person" or "rating")."""
        counters = document["counters"]
        value = counters[kind]
        counters[kind] = value + 1
        return value
