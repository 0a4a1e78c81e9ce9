"""Factory for creating the player fighter from a class definition."""
from __future__ import annotations

from cardduel.data.repositories import ClassesRepository
from cardduel.domain.defs import ClassDef
from cardduel.domain.entities import Fighter
from cardduel.services.errors import FactoryError

PLAYER_ID = "player"


def create_player_fighter(name: str, class_def: ClassDef) -> Fighter:
    """Build a full-health player fighter from the class template."""
    return Fighter(
        id=PLAYER_ID,
        name=name,
        hp=class_def.base_hp,
        hp_max=class_def.base_hp,
        attack=class_def.attack,
        defense=class_def.defense,
        stunned=0,
    )


def get_class_def(class_id: str, classes_repo: ClassesRepository) -> ClassDef:
    """Look up a class, translating a missing id into FactoryError."""
    try:
        return classes_repo.get(class_id)
    except KeyError as exc:
        raise FactoryError(f"Class '{class_id}' not found.") from exc
