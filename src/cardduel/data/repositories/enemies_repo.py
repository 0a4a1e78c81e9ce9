"""Enemy templates repository."""
from __future__ import annotations

from typing import Dict

from cardduel.data.repositories.base import RepositoryBase
from cardduel.domain.coerce import coerce_int
from cardduel.domain.defs import EnemyDef


class EnemiesRepository(RepositoryBase[EnemyDef]):
    """Loads enemy templates.

    Numeric fields may be written as numbers or numeric strings; anything
    unparseable falls back to a safe default instead of failing the load.
    """

    def __init__(self, base_path=None) -> None:
        super().__init__("enemies.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, EnemyDef]:
        enemies: Dict[str, EnemyDef] = {}
        for raw_id, payload in raw.items():
            context = f"enemy '{raw_id}'"
            enemy_data = self._require_mapping(payload, context)
            self._assert_fields(
                enemy_data,
                {"name", "hp_max", "attack"},
                context,
                optional_fields={"defense", "stunned"},
            )
            enemies[raw_id] = EnemyDef(
                id=raw_id,
                name=self._require_str(enemy_data["name"], f"{context} name"),
                hp_max=max(1, coerce_int(enemy_data["hp_max"], 1)),
                attack=max(0, coerce_int(enemy_data["attack"])),
                defense=max(0, coerce_int(enemy_data.get("defense", 0))),
                stunned=max(0, coerce_int(enemy_data.get("stunned", 0))),
            )
        return enemies
