"""Protocol definitions for person service."""
from typing import Protocol, List, Dict, Any, Optional, runtime_checkable


@runtime_checkable
class PersonServiceProtocol(Protocol):
    """Protocol for PersonService public surface."""

    def list_persons(self) -> List[Dict[str, Any]]:
        """Get all persons sorted by name.

        Each entry has:
        - id: int
        - name: str
        - created_at: str (ISO-8601 UTC)
        """
        ...

    def create_person(self, name: Any) -> Dict[str, Any]:
        """Create a person and return `{id, name}`.

        Raises ValidationError for an empty name and ConflictError when the
        name is already taken (case-insensitive).
        """
        ...

    def get_person(self, person_id: Any) -> Optional[Dict[str, Any]]:
        """Look up a person by id (string-compared), or None."""
        ...
