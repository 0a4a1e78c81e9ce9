"""Console-driven UI loop for a card duel."""
from __future__ import annotations

import logging
import secrets
from typing import List, Literal, Sequence

from cardduel.core.rng import RNG
from cardduel.data.repositories import CardsRepository, ClassesRepository, EnemiesRepository
from cardduel.domain.defs import ClassDef
from cardduel.presentation.cli import render
from cardduel.presentation.cli.config import (
    MAX_HAND_SIZE,
    MIN_HAND_SIZE,
    VALID_LOG_LEVELS,
    Config,
    load_config,
    normalize_config,
    resolve_log_level,
    save_config,
)
from cardduel.services import CombatController, CombatOptions, create_combat
from cardduel.services.factories import create_random_enemy

logger = logging.getLogger(__name__)

AfterBattle = Literal["again", "select", "options", "quit"]
_MAX_RANDOM_SEED = 2**31 - 1


def main() -> None:
    """Start the interactive CLI session."""
    config = load_config()
    logging.basicConfig(level=resolve_log_level(config), format="%(levelname)s %(name)s: %(message)s")

    cards_repo = CardsRepository()
    classes_repo = ClassesRepository()
    enemies_repo = EnemiesRepository()

    print("=== Card Duel ===")
    player_name = _prompt_player_name()
    class_def = _prompt_class(classes_repo.all())
    rng = RNG(_prompt_seed())
    while True:
        enemy = create_random_enemy(enemies_repo, rng)
        logger.info("Starting combat: %s the %s vs %s", player_name, class_def.name, enemy.name)
        combat = create_combat(
            player_name,
            enemy,
            class_def,
            cards_repo=cards_repo,
            options=CombatOptions(hand_size=int(config["hand_size"])),
            rng=rng,
        )
        _run_combat(combat)
        choice = _prompt_after_battle()
        while choice == "options":
            config = _run_options(config)
            choice = _prompt_after_battle()
        if choice == "quit":
            break
        if choice == "select":
            class_def = _prompt_class(classes_repo.all())
    print("Goodbye!")


def _prompt_player_name() -> str:
    name = input("Enter hero name (default Hero): ").strip()
    return name or "Hero"


def _prompt_class(classes: Sequence[ClassDef]) -> ClassDef:
    render.render_class_menu(classes)
    while True:
        raw_value = input("Select a class: ").strip()
        if raw_value.isdigit() and 1 <= int(raw_value) <= len(classes):
            return classes[int(raw_value) - 1]
        print(f"Invalid selection. Please enter 1-{len(classes)}.")


def _prompt_seed() -> int:
    while True:
        raw_value = input("Enter seed (blank for random): ").strip()
        if not raw_value:
            return secrets.randbelow(_MAX_RANDOM_SEED)
        try:
            return int(raw_value)
        except ValueError:
            print("Invalid seed. Please enter a valid integer.")


def _run_combat(combat: CombatController) -> None:
    seen = 0
    while not combat.is_over:
        seen = _render_turn(combat, seen)
        command = input("Play a card number, [e]nd turn: ").strip().lower()
        if command in ("e", "end"):
            combat.end_turn()
            continue
        hand = combat.hand
        if command.isdigit() and 1 <= int(command) <= len(hand):
            combat.play_card(hand[int(command) - 1].id)
            continue
        print("Invalid command.")
    render.render_log(_new_lines(combat, seen))
    render.render_heading("Result")
    print(render.format_outcome(combat.winner))


def _render_turn(combat: CombatController, seen: int) -> int:
    new_lines = _new_lines(combat, seen)
    if new_lines:
        render.render_log(new_lines[-render.LOG_TAIL :])
    state = combat.state
    render.render_heading("Fighters")
    render.render_stat_panels(state.player, state.enemy, state.stamina, state.stamina_max)
    render.render_hand(combat.hand, state.stamina)
    return len(combat.log)


def _new_lines(combat: CombatController, seen: int) -> List[str]:
    return list(combat.log[seen:])


def _prompt_after_battle() -> AfterBattle:
    render.render_menu("Next", ["Fight again", "Back to class selection", "Options", "Quit"])
    while True:
        choice = input("Select an option: ").strip()
        if choice == "1":
            return "again"
        if choice == "2":
            return "select"
        if choice == "3":
            return "options"
        if choice == "4":
            return "quit"
        print("Invalid selection. Please enter 1-4.")


def _run_options(config: Config) -> Config:
    """Edit hand size and log level, then persist them."""
    render.render_heading("Options")
    print(f"Hand size: {config['hand_size']}")
    print(f"Log level: {config['log_level']}")
    updated = dict(config)

    raw_size = input(f"Hand size ({MIN_HAND_SIZE}-{MAX_HAND_SIZE}, blank to keep): ").strip()
    if raw_size:
        if raw_size.isdigit():
            updated["hand_size"] = int(raw_size)
        else:
            print("Invalid hand size. Keeping the current value.")

    raw_level = input(f"Log level ({'/'.join(VALID_LOG_LEVELS)}, blank to keep): ").strip().upper()
    if raw_level:
        if raw_level in VALID_LOG_LEVELS:
            updated["log_level"] = raw_level
        else:
            print("Invalid log level. Keeping the current value.")

    updated = normalize_config(updated)
    save_config(updated)
    logging.getLogger().setLevel(resolve_log_level(updated))
    print("Options saved.")
    return updated
