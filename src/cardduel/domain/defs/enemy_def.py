"""Enemy template structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class EnemyDef:
    """Enemy template; numeric fields are already coerced to ints."""

    id: str
    name: str
    hp_max: int
    attack: int
    defense: int = 0
    stunned: int = 0
