"""Shared constants for the zoo solver."""

from __future__ import annotations

from typing import FrozenSet

# Standard puzzle boards are 5x5; other sizes are set through BoardConfig.
DEFAULT_BOARD_SIZE: int = 5

FILLED_PATTERN_CHARS: FrozenSet[str] = frozenset({"X", "x", "#"})
PATTERN_ROW_SEPARATOR: str = "/"

MISS_SYMBOL: str = "-"
PRIORITY_MARK: str = "*"
