"""Repository exports."""

from .cards_repo import CardsRepository
from .classes_repo import ClassesRepository
from .enemies_repo import EnemiesRepository

__all__ = [
    "CardsRepository",
    "ClassesRepository",
    "EnemiesRepository",
]
