"""UI-agnostic controllers for combat flow."""
from __future__ import annotations

from .combat_controller import STAMINA_REGEN, CombatController

__all__ = [
    "CombatController",
    "STAMINA_REGEN",
]
