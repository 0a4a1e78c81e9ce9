"""Turn-based card duel engine."""

__version__ = "0.1.0"
