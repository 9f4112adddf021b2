"""PersonService: listing and registering people."""
from __future__ import annotations

from typing import Any, Dict, List, Optional
import logging

from ratings_lib.errors import ConflictError, ValidationError
from ratings_lib.persons.interfaces import PersonServiceProtocol
from ratings_lib.storage.interfaces import DocumentStoreProtocol
from ratings_lib.util import collation_key, now_iso

logger = logging.getLogger(__name__)


def find_person(persons: List[Dict[str, Any]], person_id: Any) -> Optional[Dict[str, Any]]:
    """Return the person whose id matches `person_id` as a string."""
    wanted = str(person_id)
    for person in persons:
        if str(person.get("id")) == wanted:
            return person
    return None


class PersonService(PersonServiceProtocol):
    """Service for the persons collection of the document.

    Names are unique case-insensitively and stored trimmed.
    """

    def __init__(self, store: DocumentStoreProtocol):
        self._store = store

    def list_persons(self) -> List[Dict[str, Any]]:
        persons = self._store.snapshot()["persons"]
        persons.sort(key=lambda p: (collation_key(p.get("name", "")), p.get("id", 0)))
        logger.debug("Returning %d persons", len(persons))
        return persons

    def create_person(self, name: Any) -> Dict[str, Any]:
        if name is None:
            name = ""
        if not isinstance(name, str):
            raise ValidationError("Name must be a string")
        name = name.strip()
        if not name:
            raise ValidationError("Name is required")

        with self._store.transaction() as doc:
            folded = name.casefold()
            if any(str(p.get("name", "")).casefold() == folded for p in doc["persons"]):
                raise ConflictError(f"Person '{name}' already exists")
            person_id = self._store.next_id(doc, "person")
            doc["persons"].append({"id": person_id, "name": name, "created_at": now_iso()})

        logger.info("Created person %d (%s)", person_id, name)
        return {"id": person_id, "name": name}

    def get_person(self, person_id: Any) -> Optional[Dict[str, Any]]:
        if person_id is None:
            return None
        return find_person(self._store.snapshot()["persons"], person_id)
