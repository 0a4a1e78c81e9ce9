"""Fighter runtime model."""
from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(slots=True)
class Fighter:
    """A combat participant: the player or the enemy."""

    id: str
    name: str
    hp: int
    hp_max: int
    attack: int
    defense: int = 0
    stunned: int = 0  # enemy turns left to skip

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    def copy(self) -> Fighter:
        return replace(self)
