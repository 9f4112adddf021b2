"""Persons module: the people who submit food ratings."""

from .interfaces import PersonServiceProtocol
from .person_service import PersonService

__all__ = [
    "PersonServiceProtocol",
    "PersonService",
]
