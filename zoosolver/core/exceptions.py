"""Custom exception hierarchy for the zoo solver."""

from __future__ import annotations

from typing import Iterable, Tuple


class ZooSolverError(Exception):
    """Base exception for solver failures."""


class PatternError(ZooSolverError):
    """Raised when an animal footprint is empty or uses negative offsets."""


class DuplicateAnimalError(ZooSolverError):
    """Raised when two animals with the same name join one roster."""


class UnknownAnimalError(ZooSolverError):
    """Raised when feedback names an animal missing from the roster."""


class OutOfBoundsError(ZooSolverError):
    """Raised when a coordinate falls outside the board."""


class FinalisedCellError(ZooSolverError):
    """Raised in strict mode when an already confirmed cell is confirmed again."""


class NoPlacementsError(ZooSolverError):
    """Raised in strict mode when an animal has no remaining placement."""

    def __init__(self, animals: Iterable[str]) -> None:
        self.animals: Tuple[str, ...] = tuple(sorted(animals))
        super().__init__(
            "No remaining placements for: " + ", ".join(self.animals)
        )
