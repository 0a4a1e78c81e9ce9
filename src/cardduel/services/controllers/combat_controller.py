"""UI-agnostic combat controller: the single owner of one combat's state."""
from __future__ import annotations

import logging
import math
from typing import Tuple

from cardduel.core.rng import RNG
from cardduel.core.types import Winner
from cardduel.domain.battle_models import BattleState, DeckView, check_game_over
from cardduel.domain.combat_log import CombatLog
from cardduel.domain.damage import apply_damage
from cardduel.domain.deck import DeckState
from cardduel.domain.defs import CardDef
from cardduel.domain.effects import apply_card_effect

logger = logging.getLogger(__name__)

STAMINA_REGEN = 3


class CombatController:
    """
    Drives one player-vs-enemy combat.

    Responsibilities:
    - Own the battle state, the deck zones and the combat log
    - Gate card plays on stamina and resolve them through the effect resolver
    - Run the enemy's fixed counter-attack on end of turn
    - Detect the end of the combat and freeze everything afterwards

    Every command is total: illegal or pointless calls are ignored or
    reported in the log, never raised to the caller.
    """

    def __init__(self, state: BattleState, deck: DeckState, rng: RNG) -> None:
        self._state = state
        self._deck = deck
        self._rng = rng
        self._log = CombatLog()
        self._is_over = False
        self._winner: Winner | None = None

        self.draw(deck.hand_size)
        self._log.push(f"The fight begins: {state.player.name} vs {state.enemy.name}.")

    # -----------------------
    # Queries
    # -----------------------
    @property
    def state(self) -> BattleState:
        """Return a copy of the current battle state."""
        return self._state.copy()

    @property
    def hand(self) -> Tuple[CardDef, ...]:
        return tuple(self._deck.hand)

    @property
    def hand_size(self) -> int:
        return self._deck.hand_size

    @property
    def log(self) -> Tuple[str, ...]:
        return self._log.entries()

    @property
    def is_over(self) -> bool:
        return self._is_over

    @property
    def winner(self) -> Winner | None:
        return self._winner

    def deck_view(self) -> DeckView:
        return self._deck.view()

    def can_play(self, card: CardDef) -> bool:
        if self._is_over:
            return False
        return self._state.stamina >= card.cost

    # -----------------------
    # Commands
    # -----------------------
    def draw(self, count: int | None = None) -> None:
        """Draw ``count`` cards (a full hand by default)."""
        if self._is_over:
            return
        amount = self._deck.hand_size if count is None else count
        result = self._deck.draw(amount, self._rng)
        for _ in range(result.reshuffles):
            self._log.push("You shuffle the discard pile back into your deck.")

    def play_card(self, card_id: str) -> None:
        if self._is_over:
            return
        index = self._deck.index_in_hand(card_id)
        if index is None:
            logger.debug("Ignoring play of %r: not in hand", card_id)
            return

        card = self._deck.hand[index]
        if not self.can_play(card):
            self._log.push(f'Not enough stamina to play "{card.title}".')
            return

        result = apply_card_effect(card, self._state)
        if result.error is not None:
            self._log.push(f'Not enough stamina to play "{card.title}".')
            return
        self._state = result.state
        self._log.extend(result.log)

        # Drawn cards land at the end of the hand, so ``index`` stays valid.
        if result.draw_cards:
            self.draw(result.draw_cards)
        self._deck.discard_from_hand(index)

        if self._update_outcome():
            return
        if result.force_end_turn:
            self.end_turn()

    def end_turn(self) -> None:
        if self._is_over:
            return

        self._run_enemy_turn()
        if self._update_outcome():
            return

        self._state.stamina = min(self._state.stamina + STAMINA_REGEN, self._state.stamina_max)
        self._deck.discard_hand()
        self.draw(self._deck.hand_size)

    # -----------------------
    # Helpers
    # -----------------------
    def _run_enemy_turn(self) -> None:
        enemy = self._state.enemy
        player = self._state.player
        if enemy.stunned > 0:
            enemy.stunned -= 1
            self._log.push(f"{enemy.name} is stunned and skips the turn.")
            return

        raw = max(0, math.floor(enemy.attack))
        if raw == 0:
            self._log.push(f"{enemy.name} watches and does not attack.")
            return

        hit = apply_damage(player, raw)
        self._log.push(
            f"{enemy.name} attacks: {hit.raw} damage "
            f"(absorbed {hit.absorbed}, {hit.hp_damage} to HP) to {player.name}."
        )

    def _update_outcome(self) -> bool:
        outcome = check_game_over(self._state)
        if not outcome.over:
            return False
        self._is_over = True
        self._winner = outcome.winner
        player = self._state.player
        enemy = self._state.enemy
        if outcome.winner == "player":
            self._log.push(f"{player.name} has defeated {enemy.name}!")
        elif outcome.winner == "enemy":
            self._log.push(f"{player.name} has been defeated.")
        else:
            self._log.push("Both fighters have fallen.")
        logger.debug("Combat over, winner=%s", outcome.winner)
        return True
