from cardduel.domain.battle_models import BattleState, check_game_over
from cardduel.domain.defs import CardDef, EffectKind
from cardduel.domain.effects import apply_card_effect
from cardduel.domain.entities import Fighter


def _state(*, stamina: int = 5, stamina_max: int = 6, player_hp: int = 30, enemy_defense: int = 0) -> BattleState:
    return BattleState(
        player=Fighter(id="player", name="Hero", hp=player_hp, hp_max=30, attack=5, defense=0),
        enemy=Fighter(id="goblin", name="Goblin", hp=10, hp_max=10, attack=3, defense=enemy_defense),
        stamina=stamina,
        stamina_max=stamina_max,
    )


def _card(effect: EffectKind, value: int, *, cost: int = 1, **extra) -> CardDef:
    return CardDef(id=effect.value, title=effect.value.title(), cost=cost, effect=effect, value=value, **extra)


def test_damage_card_reports_absorption_breakdown() -> None:
    state = _state()

    result = apply_card_effect(_card(EffectKind.DAMAGE, 5), state)

    assert result.error is None
    assert result.state.enemy.hp == 5
    assert result.state.enemy.defense == 0
    assert result.state.stamina == 4
    assert result.log == ["Damage: deal 5 damage (absorbed 0, 5 to HP) to Goblin."]


def test_damage_card_spends_enemy_defense_first() -> None:
    result = apply_card_effect(_card(EffectKind.DAMAGE, 5), _state(enemy_defense=2))

    assert result.state.enemy.defense == 0
    assert result.state.enemy.hp == 7
    assert "absorbed 2, 3 to HP" in result.log[0]


def test_resolver_never_mutates_the_input_state() -> None:
    state = _state()

    result = apply_card_effect(_card(EffectKind.DAMAGE, 5), state)

    assert result.state is not state
    assert result.state.enemy is not state.enemy
    assert state.enemy.hp == 10
    assert state.stamina == 5


def test_insufficient_stamina_returns_error_and_untouched_state() -> None:
    state = _state(stamina=1)

    result = apply_card_effect(_card(EffectKind.DAMAGE, 5, cost=2), state)

    assert result.error == "insufficient_stamina"
    assert result.state is state
    assert result.log == []
    assert state.stamina == 1
    assert state.enemy.hp == 10


def test_heal_is_capped_at_max_hp() -> None:
    result = apply_card_effect(_card(EffectKind.HEAL, 10), _state(player_hp=25))

    assert result.state.player.hp == 30
    assert result.log == ["Heal: Hero recovers 5 HP."]


def test_grant_defense_accumulates_without_cap() -> None:
    state = _state()
    first = apply_card_effect(_card(EffectKind.GRANT_DEFENSE, 30), state)
    second = apply_card_effect(_card(EffectKind.GRANT_DEFENSE, 30), first.state)

    assert second.state.player.defense == 60


def test_apply_stun_reports_total() -> None:
    state = _state()
    state.enemy.stunned = 1

    result = apply_card_effect(_card(EffectKind.APPLY_STUN, 2), state)

    assert result.state.enemy.stunned == 3
    assert "(total 3)" in result.log[0]


def test_restore_stamina_is_capped_and_says_so() -> None:
    result = apply_card_effect(_card(EffectKind.RESTORE_STAMINA, 4, cost=0), _state(stamina=4, stamina_max=6))

    assert result.state.stamina == 6
    assert result.log == ["Restore_Stamina: recover 2 stamina (cap reached)."]


def test_restore_stamina_below_cap_has_no_note() -> None:
    result = apply_card_effect(_card(EffectKind.RESTORE_STAMINA, 2, cost=0), _state(stamina=1, stamina_max=6))

    assert result.state.stamina == 3
    assert "cap reached" not in result.log[0]


def test_signals_come_from_the_card() -> None:
    plain = apply_card_effect(_card(EffectKind.HEAL, 1), _state())
    signalled = apply_card_effect(
        _card(EffectKind.RESTORE_STAMINA, 1, cost=0, draws=2, ends_turn=True), _state()
    )

    assert (plain.draw_cards, plain.force_end_turn) == (0, False)
    assert (signalled.draw_cards, signalled.force_end_turn) == (2, True)


def test_check_game_over_covers_every_outcome() -> None:
    state = _state()
    assert check_game_over(state).over is False

    state.enemy.hp = 0
    assert check_game_over(state).winner == "player"

    state.player.hp = 0
    both = check_game_over(state)
    assert both.over is True
    assert both.winner is None

    state.enemy.hp = 4
    assert check_game_over(state).winner == "enemy"
