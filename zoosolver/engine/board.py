"""Board state and constraint propagation for the zoo solver.

The board owns the grid of cells, the roster of animals and the list of live
candidate placements. Every public mutation runs a full propagation pass:

  1. drop candidates contradicted by the new information,
  2. recount cell tallies from scratch,
  3. deduce cells whose occupant is forced,
  4. flag the next most informative cells to probe.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from ..core.constants import DEFAULT_BOARD_SIZE
from ..core.exceptions import (DuplicateAnimalError, FinalisedCellError, NoPlacementsError,
                               OutOfBoundsError, UnknownAnimalError)
from ..core.models import Animal, Block, Candidate, Cell
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class BoardConfig:
    """Configuration values driving the board."""

    size: int = DEFAULT_BOARD_SIZE
    strict: bool = False

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"Board size must be positive, got {self.size}")

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size


class ZooBoard:
    """Constraint engine narrowing down where each animal can hide."""

    def __init__(self, config: Optional[BoardConfig] = None) -> None:
        self.config = config or BoardConfig()
        self.size = self.config.size
        self.location: Optional[str] = None
        self.cells: List[Cell] = [
            Cell(x, y) for y in range(self.size) for x in range(self.size)
        ]
        self._animals: List[Animal] = []
        self._candidates: List[Candidate] = []
        self._exhausted: Tuple[str, ...] = ()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def cell(self, x: int, y: int) -> Cell:
        if not self.config.contains(x, y):
            raise OutOfBoundsError(f"Cell ({x},{y}) outside {self.size}x{self.size} board")
        return self.cells[y * self.size + x]

    def cell_at(self, block: Block) -> Cell:
        return self.cell(block.x, block.y)

    @property
    def animals(self) -> Tuple[Animal, ...]:
        return tuple(self._animals)

    @property
    def candidates(self) -> Tuple[Candidate, ...]:
        return tuple(self._candidates)

    def candidates_for(self, name: str) -> List[Candidate]:
        return [candidate for candidate in self._candidates if candidate.name == name]

    def remaining_placements(self) -> Dict[str, int]:
        counts = {animal.name: 0 for animal in self._animals}
        for candidate in self._candidates:
            counts[candidate.name] += 1
        return counts

    def priority_cells(self) -> List[Cell]:
        return [cell for cell in self.cells if cell.priority]

    def known_cells(self) -> List[Cell]:
        return [cell for cell in self.cells if cell.known]

    def exhausted_animals(self) -> Tuple[str, ...]:
        """Animals left without any placement by the last deduction pass."""
        return self._exhausted

    def is_solved(self) -> bool:
        if not self._animals:
            return False
        return all(count == 1 for count in self.remaining_placements().values())

    # ------------------------------------------------------------------
    # Roster
    # ------------------------------------------------------------------
    def add_animal(self, animal: Animal) -> None:
        if any(existing.name == animal.name for existing in self._animals):
            raise DuplicateAnimalError(f"Animal '{animal.name}' is already on the board")
        self._animals.append(animal)

    def add_animals(self, animals: Iterable[Animal]) -> None:
        for animal in animals:
            self.add_animal(animal)

    # ------------------------------------------------------------------
    # Candidate generation
    # ------------------------------------------------------------------
    def generate(self) -> None:
        """Create every in-bounds placement of every animal and propagate."""

        candidates: List[Candidate] = []
        for animal in self._animals:
            pattern = animal.pattern
            for dy in range(self.size - pattern.height + 1):
                for dx in range(self.size - pattern.width + 1):
                    position = tuple(block.shifted(dx, dy) for block in pattern)
                    candidates.append(Candidate(animal, position))
        self._candidates = candidates
        LOGGER.info(
            "Generated %d candidates for %d animals on a %dx%d board",
            len(candidates),
            len(self._animals),
            self.size,
            self.size,
        )
        self._propagate()

    # ------------------------------------------------------------------
    # Propagation
    # ------------------------------------------------------------------
    def retally(self) -> None:
        """Recount candidate coverage of every cell from the live candidates."""

        for cell in self.cells:
            cell.reset_tally()
        for candidate in self._candidates:
            for block in candidate.position:
                self.cell_at(block).add_candidate(candidate)

    def deduce_known_cells(self) -> None:
        """Mark cells every remaining placement of some animal agrees on."""

        for animal in self._animals:
            options = self.candidates_for(animal.name)
            if not options:
                continue
            if len(options) == 1:
                for block in options[0].position:
                    self._declare_known_block(block, animal.name)
                continue
            first, others = options[0], options[1:]
            for block in first.position:
                if all(option.covers(block) for option in others):
                    self._declare_known_block(block, animal.name)

        # A later animal's known cells can wipe out an earlier animal's placements.
        placements = self.remaining_placements()
        self._exhausted = tuple(name for name, count in placements.items() if count == 0)
        if self._exhausted:
            LOGGER.warning("No remaining placements for: %s", ", ".join(self._exhausted))
        self.retally()
        self.reprioritize()

    def _declare_known_block(self, block: Block, animal: str) -> None:
        cell = self.cell_at(block)
        if cell.finalised:
            return
        self._eliminate(lambda c: c.covers(block) == (c.name == animal))
        if not cell.known:
            LOGGER.debug("Cell (%d,%d) deduced to hold %s", block.x, block.y, animal)
        cell.mark_known(animal)

    def reprioritize(self) -> None:
        """Flag the eligible cells sharing the highest candidate count."""

        max_count = 0
        for cell in self.cells:
            if not cell.is_eligible():
                cell.priority = False
                continue
            if cell.count < max_count:
                cell.priority = False
            elif cell.count > max_count:
                max_count = cell.count
                self._clear_priorities()
                cell.priority = True
            else:
                cell.priority = True

    def _clear_priorities(self) -> None:
        for cell in self.cells:
            cell.priority = False

    def _eliminate(self, keep: Callable[[Candidate], bool]) -> int:
        before = len(self._candidates)
        self._candidates = [candidate for candidate in self._candidates if keep(candidate)]
        return before - len(self._candidates)

    def _propagate(self) -> None:
        self.retally()
        self.deduce_known_cells()
        self.reprioritize()
        if self.config.strict and self._exhausted:
            raise NoPlacementsError(self._exhausted)

    # ------------------------------------------------------------------
    # Player feedback
    # ------------------------------------------------------------------
    def confirm_hit(self, block: Block, animal: str) -> None:
        """Record that ``block`` holds ``animal``."""

        cell = self.cell_at(block)
        if not any(existing.name == animal for existing in self._animals):
            raise UnknownAnimalError(f"Animal '{animal}' is not on the board")
        self._check_reconfirmation(cell)
        removed = self._eliminate(lambda c: c.covers(block) == (c.name == animal))
        LOGGER.info(
            "Hit %s at (%d,%d): %d candidates removed, %d left",
            animal,
            block.x,
            block.y,
            removed,
            len(self._candidates),
        )
        cell.mark_finalised(animal)
        self._propagate()

    def confirm_miss(self, block: Block) -> None:
        """Record that ``block`` is empty."""

        cell = self.cell_at(block)
        self._check_reconfirmation(cell)
        removed = self._eliminate(lambda c: not c.covers(block))
        LOGGER.info(
            "Miss at (%d,%d): %d candidates removed, %d left",
            block.x,
            block.y,
            removed,
            len(self._candidates),
        )
        cell.mark_finalised(None)
        self._propagate()

    def _check_reconfirmation(self, cell: Cell) -> None:
        if not cell.finalised:
            return
        if self.config.strict:
            raise FinalisedCellError(f"Cell ({cell.x},{cell.y}) is already confirmed")
        LOGGER.warning("Cell (%d,%d) confirmed again; deductions may be unsound", cell.x, cell.y)

    # ------------------------------------------------------------------
    # Reset
    # ------------------------------------------------------------------
    def reset(self) -> None:
        for cell in self.cells:
            cell.reset()
        self._candidates = []
        self._animals = []
        self._exhausted = ()
        LOGGER.debug("Board reset")

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_jsonable(self) -> dict:
        return {
            "size": self.size,
            "location": self.location,
            "animals": [
                {
                    "name": animal.name,
                    "pattern": [[block.x, block.y] for block in animal.pattern],
                }
                for animal in self._animals
            ],
            "remaining_placements": self.remaining_placements(),
            "exhausted": list(self._exhausted),
            "candidates": [
                {
                    "name": candidate.name,
                    "position": [[block.x, block.y] for block in candidate.position],
                }
                for candidate in self._candidates
            ],
            "cells": [
                {
                    "x": cell.x,
                    "y": cell.y,
                    "count": cell.count,
                    "animals": sorted(cell.animals),
                    "known": cell.known,
                    "finalised": cell.finalised,
                    "priority": cell.priority,
                    "occupant": cell.occupant,
                }
                for cell in self.cells
            ],
        }
