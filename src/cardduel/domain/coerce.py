"""Numeric coercion for loosely typed external data."""
from __future__ import annotations

import math


def coerce_int(value: object, fallback: int = 0) -> int:
    """Return ``value`` as an int, or ``fallback`` when it is not numeric.

    Accepts ints, finite floats (floored) and numeric strings such as ``"12"``
    or ``" 3.5 "``. Booleans are not treated as numbers.
    """
    if isinstance(value, bool):
        return fallback
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text, 10)
        except ValueError:
            try:
                value = float(text)
            except ValueError:
                return fallback
    if isinstance(value, float):
        if not math.isfinite(value):
            return fallback
        return math.floor(value)
    return fallback


def clamp(value: int, minimum: int, maximum: int) -> int:
    return max(minimum, min(maximum, value))
