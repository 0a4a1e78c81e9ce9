"""Factory that assembles a ready-to-play combat."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List

from cardduel.core.rng import RNG
from cardduel.data.repositories import CardsRepository
from cardduel.domain.battle_models import BattleState
from cardduel.domain.deck import DeckState
from cardduel.domain.defs import CardDef, ClassDef
from cardduel.services.controllers import CombatController
from cardduel.services.errors import FactoryError

from .enemy_factory import EnemyData, normalize_enemy_fighter
from .player_factory import create_player_fighter

logger = logging.getLogger(__name__)

DEFAULT_HAND_SIZE = 3


@dataclass(frozen=True, slots=True)
class CombatOptions:
    """Tunable parameters for a single combat."""

    hand_size: int = DEFAULT_HAND_SIZE


def build_starting_deck(card_ids: Iterable[str], cards_repo: CardsRepository) -> List[CardDef]:
    """Resolve card ids through the catalog, dropping ids it does not know."""
    cards: List[CardDef] = []
    for card_id in card_ids:
        card = cards_repo.find(card_id)
        if card is None:
            logger.debug("Dropping unknown card id %r from starting deck", card_id)
            continue
        cards.append(card)
    return cards


def create_combat(
    player_name: str,
    enemy: EnemyData,
    class_def: ClassDef,
    *,
    cards_repo: CardsRepository,
    options: CombatOptions | None = None,
    rng: RNG | None = None,
) -> CombatController:
    """
    Create a combat between a fresh player of ``class_def`` and ``enemy``.

    The enemy input is normalized and always starts at full health. The
    initial hand is drawn before the opening log line is written.
    """
    opts = options or CombatOptions()
    if opts.hand_size < 0:
        raise FactoryError(f"Hand size must be >= 0, got {opts.hand_size}.")
    combat_rng = rng if rng is not None else RNG()

    player = create_player_fighter(player_name, class_def)
    enemy_fighter = normalize_enemy_fighter(enemy)
    enemy_fighter.hp = enemy_fighter.hp_max

    state = BattleState(
        player=player,
        enemy=enemy_fighter,
        stamina=class_def.stamina_base,
        stamina_max=class_def.stamina_base,
    )
    cards = build_starting_deck(class_def.starting_deck, cards_repo)
    deck = DeckState.from_cards(cards, opts.hand_size, combat_rng)
    return CombatController(state, deck, combat_rng)
