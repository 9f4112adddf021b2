"""RatingService: listing and recording food ratings."""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Tuple
import logging
import math

from ratings_lib.errors import ValidationError
from ratings_lib.persons.person_service import find_person
from ratings_lib.ratings.interfaces import RatingServiceProtocol
from ratings_lib.storage.interfaces import DocumentStoreProtocol
from ratings_lib.util import collation_key, now_iso

logger = logging.getLogger(__name__)

MIN_SCORE = 1
MAX_SCORE = 10

# order key -> (sort key, descending)
ORDER_KEYS: Dict[str, Tuple[Callable[[Dict[str, Any]], Any], bool]] = {
    "score_desc": (lambda r: r["score"], True),
    "score_asc": (lambda r: r["score"], False),
    "place_asc": (lambda r: collation_key(r["place"]), False),
    "place_desc": (lambda r: collation_key(r["place"]), True),
    "newest": (lambda r: r["createdAt"] or "", True),
    "oldest": (lambda r: r["createdAt"] or "", False),
}
DEFAULT_ORDER = "newest"


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


def parse_score(raw: Any) -> int:
    """Parse a score into an int in [MIN_SCORE, MAX_SCORE].

    Accepts ints, integral floats and numeric strings ("7", " 7.0 ").
    Raises ValidationError for anything else.
    """
    if isinstance(raw, bool):
        raise ValidationError("Score must be an integer from 1 to 10")
    value: Any = raw
    if isinstance(raw, str):
        try:
            value = float(raw.strip())
        except ValueError:
            raise ValidationError("Score must be an integer from 1 to 10") from None
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise ValidationError("Score must be an integer from 1 to 10")
        value = int(value)
    if not isinstance(value, int) or not MIN_SCORE <= value <= MAX_SCORE:
        raise ValidationError("Score must be an integer from 1 to 10")
    return value


class RatingService(RatingServiceProtocol):
    """Service for the ratings collection of the document.

    Ratings whose person no longer resolves are skipped on read.
    """

    def __init__(self, store: DocumentStoreProtocol):
        self._store = store

    def list_ratings(self, person_id: Optional[Any] = None, order: Optional[str] = None) -> List[Dict[str, Any]]:
        doc = self._store.snapshot()
        persons = {str(p.get("id")): p for p in doc["persons"]}

        rows: List[Dict[str, Any]] = []
        for rating in doc["ratings"]:
            person = persons.get(str(rating.get("person_id")))
            if person is None:
                continue
            rows.append({
                "id": rating.get("id"),
                "food": rating.get("food"),
                "place": rating.get("place"),
                "score": rating.get("score"),
                "notes": rating.get("notes", ""),
                "createdAt": rating.get("created_at"),
                "person": person,
            })

        if not _is_missing(person_id):
            wanted = str(person_id)
            rows = [r for r in rows if str(r["person"].get("id")) == wanted]

        key, descending = ORDER_KEYS.get(order or DEFAULT_ORDER, ORDER_KEYS[DEFAULT_ORDER])
        rows.sort(key=key, reverse=descending)
        logger.debug("Returning %d ratings (person=%s, order=%s)", len(rows), person_id, order)
        return rows

    def create_rating(
        self,
        person_id: Any,
        food: Any,
        place: Any,
        score: Any,
        notes: Optional[Any] = None,
    ) -> Dict[str, Any]:
        if _is_missing(person_id) or _is_missing(food) or _is_missing(place) or score is None:
            raise ValidationError("Missing required fields: personId, food, place and score")
        if not isinstance(food, str) or not isinstance(place, str):
            raise ValidationError("Food and place must be strings")
        food = food.strip()
        place = place.strip()
        if not food or not place:
            raise ValidationError("Food and place are required")
        value = parse_score(score)

        with self._store.transaction() as doc:
            person = find_person(doc["persons"], person_id)
            if person is None:
                raise ValidationError(f"Unknown person: {person_id}")
            rating_id = self._store.next_id(doc, "rating")
            doc["ratings"].append({
                "id": rating_id,
                "person_id": person["id"],
                "food": food,
                "place": place,
                "score": value,
                "notes": str(notes) if notes else "",
                "created_at": now_iso(),
            })

        logger.info("Created rating %d for person %s", rating_id, person["id"])
        return {"message": "Saved"}
