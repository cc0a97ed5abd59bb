"""Data models supporting the zoo solver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional, Sequence, Set, Tuple

from .constants import FILLED_PATTERN_CHARS, PATTERN_ROW_SEPARATOR
from .exceptions import PatternError


@dataclass(frozen=True, order=True)
class Block:
    """A grid coordinate or a relative shape offset."""

    x: int
    y: int

    def shifted(self, dx: int, dy: int) -> Block:
        return Block(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Pattern:
    """Footprint of an animal as relative offsets from its top-left corner."""

    blocks: Tuple[Block, ...]

    def __post_init__(self) -> None:
        unique: list = []
        for block in self.blocks:
            if block.x < 0 or block.y < 0:
                raise PatternError(f"Negative offset in pattern: {block}")
            if block not in unique:
                unique.append(block)
        if not unique:
            raise PatternError("Pattern must contain at least one block")
        object.__setattr__(self, "blocks", tuple(unique))

    @classmethod
    def from_offsets(cls, offsets: Iterable[Tuple[int, int]]) -> Pattern:
        return cls(tuple(Block(x, y) for x, y in offsets))

    @classmethod
    def from_rows(cls, rows: Sequence[str] | str) -> Pattern:
        """Build a pattern from an ASCII picture.

        ``rows`` is either a list of strings or one string whose rows are
        separated by ``/``. ``X`` or ``#`` marks a filled block; the row index
        is ``y`` and the column index is ``x``.
        """

        if isinstance(rows, str):
            rows = rows.split(PATTERN_ROW_SEPARATOR)
        blocks = [
            Block(x, y)
            for y, row in enumerate(rows)
            for x, char in enumerate(row)
            if char in FILLED_PATTERN_CHARS
        ]
        return cls(tuple(blocks))

    @property
    def width(self) -> int:
        return max(block.x for block in self.blocks) + 1

    @property
    def height(self) -> int:
        return max(block.y for block in self.blocks) + 1

    def __len__(self) -> int:
        return len(self.blocks)

    def __iter__(self):
        return iter(self.blocks)


@dataclass(frozen=True)
class Animal:
    """A named puzzle target with a single footprint."""

    name: str
    pattern: Pattern


@dataclass(frozen=True)
class Candidate:
    """One hypothesised placement of an animal on the board."""

    animal: Animal
    position: Tuple[Block, ...]
    _cells: FrozenSet[Block] = field(default=frozenset(), repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_cells", frozenset(self.position))

    @property
    def name(self) -> str:
        return self.animal.name

    def covers(self, block: Block) -> bool:
        return block in self._cells


@dataclass
class Cell:
    """Deduction state for one board square."""

    x: int
    y: int
    count: int = 0
    animals: Set[str] = field(default_factory=set)
    known: bool = False
    finalised: bool = False
    priority: bool = False
    occupant: Optional[str] = None

    @property
    def block(self) -> Block:
        return Block(self.x, self.y)

    def is_eligible(self) -> bool:
        """Whether the cell still takes part in prioritisation."""
        return not (self.finalised or self.known)

    def reset(self) -> None:
        self.count = 0
        self.animals.clear()
        self.known = False
        self.finalised = False
        self.priority = False
        self.occupant = None

    def reset_tally(self) -> None:
        self.count = 0
        self.animals.clear()

    def add_candidate(self, candidate: Candidate) -> None:
        self.count += 1
        self.animals.add(candidate.name)

    def mark_known(self, animal: str) -> None:
        self.known = True
        self.finalised = False
        self.occupant = animal

    def mark_finalised(self, animal: Optional[str]) -> None:
        self.finalised = True
        self.known = False
        self.priority = False
        self.occupant = animal
