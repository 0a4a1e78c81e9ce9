"""Domain definition exports."""

from .card_def import CardDef, EffectKind
from .class_def import ClassDef
from .enemy_def import EnemyDef

__all__ = [
    "CardDef",
    "ClassDef",
    "EffectKind",
    "EnemyDef",
]
