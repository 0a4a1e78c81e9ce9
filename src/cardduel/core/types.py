"""Shared type aliases for the core and domain layers."""
from typing import Literal

Winner = Literal["player", "enemy"]
EffectError = Literal["insufficient_stamina"]

__all__ = ["EffectError", "Winner"]
