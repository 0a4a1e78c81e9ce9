"""Append-only, player-facing combat log."""
from __future__ import annotations

from typing import Iterable, Tuple


class CombatLog:
    """Chronological list of human-readable event lines."""

    def __init__(self) -> None:
        self._entries: list[str] = []

    def push(self, line: str) -> None:
        self._entries.append(line)

    def extend(self, lines: Iterable[str]) -> None:
        self._entries.extend(lines)

    def entries(self) -> Tuple[str, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
