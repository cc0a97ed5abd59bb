"""Pretty-print helpers for inspecting board state."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from ..core.constants import MISS_SYMBOL, PRIORITY_MARK

if TYPE_CHECKING:
    from ..core.models import Cell
    from ..engine.board import ZooBoard


def cell_symbol(cell: Cell) -> str:
    if cell.finalised:
        return cell.occupant[0].upper() if cell.occupant else MISS_SYMBOL
    if cell.known:
        return (cell.occupant or "?")[0].lower()
    symbol = str(cell.count)
    if cell.priority:
        symbol += PRIORITY_MARK
    return symbol


def _format_rows(board: ZooBoard, render) -> str:
    size = board.size
    header_cells = [f"{x:>3}" for x in range(size)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (4 * size - 1))
    for y in range(size):
        row_render = " ".join(f"{render(board.cell(x, y)):>3}" for x in range(size))
        lines.append(f"{y:>2} | {row_render}")
    return "\n".join(lines)


def format_counts(board: ZooBoard) -> str:
    """Render the raw candidate count of every cell."""
    return _format_rows(board, lambda cell: str(cell.count))


def format_board(board: ZooBoard) -> str:
    return _format_rows(board, cell_symbol)


def format_candidates(board: ZooBoard) -> str:
    lines = []
    for candidate in board.candidates:
        cells = " ".join(f"({block.x},{block.y})" for block in candidate.position)
        lines.append(f"{candidate.name}: {cells}")
    return "\n".join(lines)


def print_board(board: ZooBoard, *, label: str | None = None, stream=None) -> None:
    """Print the board in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_board(board), file=stream)

    placements = board.remaining_placements()
    if placements:
        print(file=stream)
        print("--- Placements ---", file=stream)
        for name, count in placements.items():
            print(f"  {name:<12} {count}", file=stream)

    priority = board.priority_cells()
    if priority:
        coords = " ".join(f"({cell.x},{cell.y})" for cell in priority)
        print(file=stream)
        print(f"Next probe: {coords}", file=stream)
