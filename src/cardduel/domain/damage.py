"""Defense-absorption damage rule shared by cards and the enemy attack."""
from __future__ import annotations

from dataclasses import dataclass

from cardduel.domain.coerce import clamp
from cardduel.domain.entities import Fighter


@dataclass(frozen=True, slots=True)
class DamageResult:
    raw: int
    absorbed: int
    hp_damage: int


def apply_damage(target: Fighter, raw_damage: int) -> DamageResult:
    """Apply ``raw_damage`` to ``target``, spending its defense first."""
    raw = max(0, raw_damage)
    absorbed = min(target.defense, raw)
    target.defense -= absorbed
    hp_damage = raw - absorbed
    if hp_damage > 0:
        target.hp = clamp(target.hp - hp_damage, 0, target.hp_max)
    return DamageResult(raw=raw, absorbed=absorbed, hp_damage=hp_damage)
