"""Battle domain models."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from cardduel.core.types import Winner
from cardduel.domain.defs import CardDef
from cardduel.domain.entities import Fighter


@dataclass(slots=True)
class BattleState:
    """Fighters and the player's stamina pool for one combat."""

    player: Fighter
    enemy: Fighter
    stamina: int
    stamina_max: int

    def copy(self) -> BattleState:
        """Return a copy that shares no fighter objects with this state."""
        return BattleState(
            player=self.player.copy(),
            enemy=self.enemy.copy(),
            stamina=self.stamina,
            stamina_max=self.stamina_max,
        )


@dataclass(frozen=True, slots=True)
class Outcome:
    """Result of the terminal check."""

    over: bool
    winner: Winner | None = None


@dataclass(frozen=True, slots=True)
class DeckView:
    """Read-only snapshot of the three card zones."""

    draw_pile: Tuple[CardDef, ...]
    hand: Tuple[CardDef, ...]
    discard_pile: Tuple[CardDef, ...]


def check_game_over(state: BattleState) -> Outcome:
    """Decide whether the battle has ended and who won.

    Both fighters at 0 hp is a mutual defeat: over, with no winner.
    """
    player_down = state.player.hp <= 0
    enemy_down = state.enemy.hp <= 0
    if player_down and enemy_down:
        return Outcome(over=True, winner=None)
    if player_down:
        return Outcome(over=True, winner="enemy")
    if enemy_down:
        return Outcome(over=True, winner="player")
    return Outcome(over=False)
