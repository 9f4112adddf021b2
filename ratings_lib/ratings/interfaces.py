"""Protocol definitions for rating service."""
from typing import Protocol, List, Dict, Any, Optional, runtime_checkable


@runtime_checkable
class RatingServiceProtocol(Protocol):
    """Protocol for RatingService public surface."""

    def list_ratings(self, person_id: Optional[Any] = None, order: Optional[str] = None) -> List[Dict[str, Any]]:
        """List ratings joined with their person.

        Args:
            person_id: Optional person id; compared as a string
            order: One of the order keys; unknown or None means newest first

        Returns:
            List of `{id, food, place, score, notes, createdAt, person}` dicts
        """
        ...

    def create_rating(
        self,
        person_id: Any,
        food: Any,
        place: Any,
        score: Any,
        notes: Optional[Any] = None,
    ) -> Dict[str, Any]:
        """Validate and store a rating, returning an acknowledgement."""
        ...
