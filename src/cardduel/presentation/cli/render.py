"""Shared CLI rendering helpers."""
from __future__ import annotations

from typing import Iterable, Sequence

from cardduel.core.types import Winner
from cardduel.domain.defs import CardDef, ClassDef
from cardduel.domain.entities import Fighter

LOG_TAIL = 8


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_menu(title: str, options: Sequence[str]) -> None:
    """Display a menu section with numbered options."""
    render_heading(title)
    for idx, label in enumerate(options, start=1):
        print(f"{idx}. {label}")


def format_stat_panel(fighter: Fighter, extra: str | None = None) -> str:
    line = f"{fighter.name}: HP {fighter.hp}/{fighter.hp_max} | DEF {fighter.defense}"
    if extra:
        line = f"{line} | {extra}"
    return line


def render_stat_panels(player: Fighter, enemy: Fighter, stamina: int, stamina_max: int) -> None:
    print(format_stat_panel(player, f"Stamina {stamina}/{stamina_max}"))
    stun = f"Stunned {enemy.stunned}" if enemy.stunned > 0 else None
    print(format_stat_panel(enemy, stun))


def format_card(index: int, card: CardDef, *, playable: bool) -> str:
    mark = " " if playable else "x"
    return f"{index}. [{mark}] {card.title} (cost {card.cost}) - {card.description}"


def render_hand(hand: Sequence[CardDef], stamina: int) -> None:
    render_heading("Hand")
    if not hand:
        print("(empty)")
        return
    for idx, card in enumerate(hand, start=1):
        print(format_card(idx, card, playable=stamina >= card.cost))


def render_log(lines: Iterable[str]) -> None:
    render_heading("Log")
    for line in lines:
        print(f"- {line}")


def render_class_menu(classes: Sequence[ClassDef]) -> None:
    render_heading("Choose a class")
    for idx, class_def in enumerate(classes, start=1):
        print(f"{idx}. {class_def.name} - {class_def.description}")
        print(
            f"   HP {class_def.base_hp} | ATK {class_def.attack} | DEF {class_def.defense}"
            f" | Stamina {class_def.stamina_base} | {len(class_def.starting_deck)} cards"
        )


def format_outcome(winner: Winner | None) -> str:
    if winner == "player":
        return "Victory!"
    if winner == "enemy":
        return "Defeat..."
    return "Fatal draw: nobody is left standing."
