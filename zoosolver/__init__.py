"""Deduction helper for grid-based hidden animal puzzles.

This package exposes the public API surface via:

- ``zoosolver.engine.board.ZooBoard``: candidate generation, feedback and
  next-probe prioritisation.
- ``zoosolver.core.models``: the ``Block``, ``Pattern`` and ``Animal`` types
  used to describe a puzzle.
- ``zoosolver.engine.consistency``: CP-SAT check that the animals can still
  all be placed at once.
"""

from .core.models import Animal, Block, Candidate, Cell, Pattern
from .engine.board import BoardConfig, ZooBoard

__all__ = [
    "Animal",
    "Block",
    "BoardConfig",
    "Candidate",
    "Cell",
    "Pattern",
    "ZooBoard",
]

__version__ = "0.1.0"
