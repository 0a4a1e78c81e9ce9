"""Draw pile, hand and discard pile for one combat."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from cardduel.core.rng import RNG
from cardduel.domain.battle_models import DeckView
from cardduel.domain.defs import CardDef

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DrawResult:
    """Cards moved into the hand by one draw request."""

    drawn: List[CardDef] = field(default_factory=list)
    reshuffles: int = 0


@dataclass(slots=True)
class DeckState:
    """
    Owns the three card zones.

    Cards only ever move between zones; the multiset across
    draw pile, hand and discard pile never changes during a combat.
    The top of the draw pile is index 0.
    """

    hand_size: int
    draw_pile: List[CardDef] = field(default_factory=list)
    hand: List[CardDef] = field(default_factory=list)
    discard_pile: List[CardDef] = field(default_factory=list)

    @classmethod
    def from_cards(cls, cards: Iterable[CardDef], hand_size: int, rng: RNG) -> DeckState:
        """Shuffle the starting cards once into a fresh draw pile."""
        draw_pile = list(cards)
        rng.shuffle(draw_pile)
        return cls(hand_size=hand_size, draw_pile=draw_pile)

    def draw(self, count: int, rng: RNG) -> DrawResult:
        """Move up to ``count`` cards into the hand, reshuffling discards as needed."""
        result = DrawResult()
        for _ in range(count):
            if not self.draw_pile and self.discard_pile:
                self._reshuffle_discards(rng)
                result.reshuffles += 1
            if not self.draw_pile:
                break
            card = self.draw_pile.pop(0)
            self.hand.append(card)
            result.drawn.append(card)
        return result

    def discard_from_hand(self, index: int) -> CardDef:
        card = self.hand.pop(index)
        self.discard_pile.append(card)
        return card

    def discard_hand(self) -> None:
        self.discard_pile.extend(self.hand)
        self.hand.clear()

    def index_in_hand(self, card_id: str) -> int | None:
        for idx, card in enumerate(self.hand):
            if card.id == card_id:
                return idx
        return None

    def all_cards(self) -> List[CardDef]:
        return [*self.draw_pile, *self.hand, *self.discard_pile]

    def view(self) -> DeckView:
        return DeckView(
            draw_pile=tuple(self.draw_pile),
            hand=tuple(self.hand),
            discard_pile=tuple(self.discard_pile),
        )

    def _reshuffle_discards(self, rng: RNG) -> None:
        logger.debug("Reshuffling %d discarded cards into the draw pile", len(self.discard_pile))
        new_pile = list(self.discard_pile)
        rng.shuffle(new_pile)
        self.draw_pile = new_pile
        self.discard_pile = []
