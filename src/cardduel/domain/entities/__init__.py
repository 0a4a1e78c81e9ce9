"""Runtime entity exports."""

from .fighter import Fighter

__all__ = ["Fighter"]
