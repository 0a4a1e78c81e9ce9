"""Card catalog repository."""
from __future__ import annotations

from typing import Dict

from cardduel.data.errors import DataValidationError
from cardduel.data.repositories.base import RepositoryBase
from cardduel.domain.defs import CardDef, EffectKind

VALID_EFFECTS = {kind.value: kind for kind in EffectKind}


class CardsRepository(RepositoryBase[CardDef]):
    """Loads the immutable card catalog."""

    def __init__(self, base_path=None) -> None:
        super().__init__("cards.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, CardDef]:
        cards: Dict[str, CardDef] = {}
        for raw_id, payload in raw.items():
            context = f"card '{raw_id}'"
            card_data = self._require_mapping(payload, context)
            self._assert_fields(
                card_data,
                {"title", "cost", "effect", "value"},
                context,
                optional_fields={"description", "draws", "ends_turn"},
            )
            effect_name = self._require_str(card_data["effect"], f"{context} effect")
            if effect_name not in VALID_EFFECTS:
                raise DataValidationError(f"{context} effect must be one of {sorted(VALID_EFFECTS)}.")

            cards[raw_id] = CardDef(
                id=raw_id,
                title=self._require_str(card_data["title"], f"{context} title"),
                cost=self._require_int(card_data["cost"], f"{context} cost", minimum=0),
                effect=VALID_EFFECTS[effect_name],
                value=self._require_int(card_data["value"], f"{context} value", minimum=0),
                description=self._require_str(card_data.get("description", ""), f"{context} description"),
                draws=self._require_int(card_data.get("draws", 0), f"{context} draws", minimum=0),
                ends_turn=self._require_bool(card_data.get("ends_turn", False), f"{context} ends_turn"),
            )
        return cards
