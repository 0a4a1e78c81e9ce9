"""Service layer exports."""

from .controllers import STAMINA_REGEN, CombatController
from .errors import FactoryError
from .factories import CombatOptions, create_combat

__all__ = [
    "CombatController",
    "CombatOptions",
    "FactoryError",
    "STAMINA_REGEN",
    "create_combat",
]
