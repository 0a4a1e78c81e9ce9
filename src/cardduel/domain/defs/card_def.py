"""Card definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EffectKind(Enum):
    """Closed set of effects a card can resolve to."""

    DAMAGE = "damage"
    HEAL = "heal"
    GRANT_DEFENSE = "grant_defense"
    APPLY_STUN = "apply_stun"
    RESTORE_STAMINA = "restore_stamina"


@dataclass(frozen=True, slots=True)
class CardDef:
    """Immutable catalog entry for an action card."""

    id: str
    title: str
    cost: int
    effect: EffectKind
    value: int
    description: str = ""
    draws: int = 0
    ends_turn: bool = False
