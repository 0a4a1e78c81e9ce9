"""Factory helpers for runtime entities and combats."""

from .combat_factory import CombatOptions, build_starting_deck, create_combat
from .enemy_factory import create_enemy_fighter, create_random_enemy, normalize_enemy_fighter
from .player_factory import create_player_fighter, get_class_def

__all__ = [
    "CombatOptions",
    "build_starting_deck",
    "create_combat",
    "create_enemy_fighter",
    "create_player_fighter",
    "create_random_enemy",
    "get_class_def",
    "normalize_enemy_fighter",
]
