"""Classes repository."""
from __future__ import annotations

from typing import Dict

from cardduel.data.repositories.base import RepositoryBase
from cardduel.domain.defs import ClassDef


class ClassesRepository(RepositoryBase[ClassDef]):
    """Loads playable classes with their base stats and starting decks.

    Deck entries are kept as plain ids; ids missing from the card catalog are
    dropped later, when a combat builds its deck.
    """

    def __init__(self, base_path=None) -> None:
        super().__init__("classes.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ClassDef]:
        classes: Dict[str, ClassDef] = {}
        for raw_id, payload in raw.items():
            context = f"class '{raw_id}'"
            class_data = self._require_mapping(payload, context)
            self._assert_fields(
                class_data,
                {"name", "base_hp", "attack", "defense", "stamina_base", "starting_deck"},
                context,
                optional_fields={"description"},
            )
            classes[raw_id] = ClassDef(
                id=raw_id,
                name=self._require_str(class_data["name"], f"{context} name"),
                description=self._require_str(class_data.get("description", ""), f"{context} description"),
                base_hp=self._require_int(class_data["base_hp"], f"{context} base_hp", minimum=1),
                attack=self._require_int(class_data["attack"], f"{context} attack", minimum=0),
                defense=self._require_int(class_data["defense"], f"{context} defense", minimum=0),
                stamina_base=self._require_int(class_data["stamina_base"], f"{context} stamina_base", minimum=0),
                starting_deck=tuple(
                    self._require_str_list(class_data["starting_deck"], f"{context} starting_deck")
                ),
            )
        return classes
