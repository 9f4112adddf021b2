"""Ratings module: food ratings joined with the person who gave them."""

from .interfaces import RatingServiceProtocol
from .rating_service import RatingService, parse_score, ORDER_KEYS, DEFAULT_ORDER

__all__ = [
    "RatingServiceProtocol",
    "RatingService",
    "parse_score",
    "ORDER_KEYS",
    "DEFAULT_ORDER",
]
