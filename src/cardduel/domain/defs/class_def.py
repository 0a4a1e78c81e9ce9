"""Player class definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(slots=True)
class ClassDef:
    """Defines base stats, starting stamina and starting deck for a class."""

    id: str
    name: str
    description: str
    base_hp: int
    attack: int
    defense: int
    stamina_base: int
    starting_deck: Tuple[str, ...]
