"""Factories and input normalization for enemy fighters."""
from __future__ import annotations

import logging
from typing import Mapping, Union

from cardduel.core.rng import RNG
from cardduel.data.repositories import EnemiesRepository
from cardduel.domain.coerce import clamp, coerce_int
from cardduel.domain.defs import EnemyDef
from cardduel.domain.entities import Fighter
from cardduel.services.errors import FactoryError

logger = logging.getLogger(__name__)

EnemyData = Union[Fighter, EnemyDef, Mapping[str, object]]

_FIELD_ALIASES = {
    "hp_max": ("hp_max", "hpMax"),
    "attack": ("attack", "atk"),
}


def normalize_enemy_fighter(data: EnemyData) -> Fighter:
    """
    Turn externally supplied enemy data into a valid, independent Fighter.

    Contract:
    - ``hp_max`` is at least 1 (missing or non-numeric falls back to 1)
    - ``attack``, ``defense`` and ``stunned`` default to 0 and are never negative
    - ``hp`` defaults to ``hp_max`` and is clamped into ``[0, hp_max]``
    - numeric strings are parsed, floats are floored
    - the returned object never aliases ``data``
    """
    if isinstance(data, Fighter):
        raw: Mapping[str, object] = {
            "id": data.id,
            "name": data.name,
            "hp": data.hp,
            "hp_max": data.hp_max,
            "attack": data.attack,
            "defense": data.defense,
            "stunned": data.stunned,
        }
    elif isinstance(data, EnemyDef):
        raw = {
            "id": data.id,
            "name": data.name,
            "hp_max": data.hp_max,
            "attack": data.attack,
            "defense": data.defense,
            "stunned": data.stunned,
        }
    else:
        raw = data

    hp_max = max(1, coerce_int(_lookup(raw, "hp_max"), 1))
    hp_value = _lookup(raw, "hp")
    hp = hp_max if hp_value is None else clamp(coerce_int(hp_value, hp_max), 0, hp_max)
    enemy_id = raw.get("id")
    name = raw.get("name")
    fighter = Fighter(
        id=str(enemy_id) if enemy_id is not None else "enemy",
        name=str(name) if name else "Enemy",
        hp=hp,
        hp_max=hp_max,
        attack=max(0, coerce_int(_lookup(raw, "attack"))),
        defense=max(0, coerce_int(_lookup(raw, "defense"))),
        stunned=max(0, coerce_int(_lookup(raw, "stunned"))),
    )
    logger.debug("Normalized enemy %r -> %r", raw, fighter)
    return fighter


def create_enemy_fighter(enemy_id: str, enemies_repo: EnemiesRepository) -> Fighter:
    """Instantiate a fresh enemy from its template."""
    try:
        enemy_def = enemies_repo.get(enemy_id)
    except KeyError as exc:
        raise FactoryError(f"Enemy '{enemy_id}' not found.") from exc
    return normalize_enemy_fighter(enemy_def)


def create_random_enemy(enemies_repo: EnemiesRepository, rng: RNG) -> Fighter:
    """Pick a template uniformly at random and instantiate it."""
    enemy_ids = enemies_repo.ids()
    if not enemy_ids:
        raise FactoryError("No enemy templates available.")
    return create_enemy_fighter(rng.choice(enemy_ids), enemies_repo)


def _lookup(raw: Mapping[str, object], key: str) -> object:
    for alias in _FIELD_ALIASES.get(key, (key,)):
        if alias in raw:
            return raw[alias]
    return None
