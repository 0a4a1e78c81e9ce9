"""Pure card-effect resolution."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, assert_never

from cardduel.core.types import EffectError
from cardduel.domain.battle_models import BattleState
from cardduel.domain.damage import apply_damage
from cardduel.domain.defs import CardDef, EffectKind


@dataclass(slots=True)
class EffectResult:
    """Outcome of resolving one card against a battle state."""

    state: BattleState
    log: List[str] = field(default_factory=list)
    draw_cards: int = 0
    force_end_turn: bool = False
    error: EffectError | None = None


def apply_card_effect(card: CardDef, state: BattleState) -> EffectResult:
    """
    Resolve ``card`` and return the resulting state.

    The passed-in state is never mutated: on success the result carries a
    fresh copy with the stamina cost paid and the effect applied. When the
    player cannot afford the card the original state comes back untouched
    together with ``error="insufficient_stamina"``.
    """
    if state.stamina < card.cost:
        return EffectResult(state=state, error="insufficient_stamina")

    new_state = state.copy()
    new_state.stamina -= card.cost
    player = new_state.player
    enemy = new_state.enemy
    log: List[str] = []
    value = card.value

    if card.effect is EffectKind.DAMAGE:
        hit = apply_damage(enemy, value)
        log.append(
            f"{card.title}: deal {hit.raw} damage "
            f"(absorbed {hit.absorbed}, {hit.hp_damage} to HP) to {enemy.name}."
        )
    elif card.effect is EffectKind.HEAL:
        healed = max(0, min(value, player.hp_max - player.hp))
        player.hp += healed
        log.append(f"{card.title}: {player.name} recovers {healed} HP.")
    elif card.effect is EffectKind.GRANT_DEFENSE:
        gained = max(0, value)
        player.defense += gained
        log.append(f"{card.title}: gain {gained} Defense (shield).")
    elif card.effect is EffectKind.APPLY_STUN:
        enemy.stunned += max(0, value)
        log.append(
            f"{card.title}: {enemy.name} is stunned for {value} turn(s) (total {enemy.stunned})."
        )
    elif card.effect is EffectKind.RESTORE_STAMINA:
        gain = max(0, value)
        before = new_state.stamina
        new_state.stamina = min(new_state.stamina + gain, new_state.stamina_max)
        gained = new_state.stamina - before
        suffix = " (cap reached)" if gained < gain else ""
        log.append(f"{card.title}: recover {gained} stamina{suffix}.")
    else:
        assert_never(card.effect)

    return EffectResult(
        state=new_state,
        log=log,
        draw_cards=max(0, card.draws),
        force_end_turn=card.ends_turn,
    )
