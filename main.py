"""CLI entrypoint replaying a scripted puzzle session through the solver."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Tuple

from zoosolver.core.exceptions import ZooSolverError
from zoosolver.core.models import Animal, Block, Pattern
from zoosolver.engine.board import BoardConfig, ZooBoard
from zoosolver.engine.consistency import find_arrangement
from zoosolver.utils.logger import configure_logging, resolve_level
from zoosolver.utils.pretty import print_board


def parse_block(text: str) -> Block:
    """Parse ``"x,y"`` into a Block."""
    parts = text.split(",")
    if len(parts) != 2:
        raise ValueError(f"Expected 'x,y', got '{text}'")
    return Block(int(parts[0]), int(parts[1]))


def parse_animal(text: str) -> Animal:
    """Parse ``"Name:ROWS"`` where rows are separated by '/' (e.g. ``Goat:XX/X.``)."""
    name, sep, rows = text.partition(":")
    if not sep or not name or not rows:
        raise ValueError(f"Expected 'Name:PATTERN', got '{text}'")
    return Animal(name.strip(), Pattern.from_rows(rows.strip()))


def parse_hit(text: str) -> Tuple[Block, str]:
    """Parse ``"x,y:Name"``."""
    coords, sep, name = text.partition(":")
    if not sep or not name:
        raise ValueError(f"Expected 'x,y:Name', got '{text}'")
    return parse_block(coords), name.strip()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Suggest the next cell to probe in a hidden animal puzzle",
    )
    parser.add_argument("--size", type=int, default=5, help="Board size in cells")
    parser.add_argument(
        "--animal",
        action="append",
        default=[],
        metavar="NAME:PATTERN",
        help="Animal footprint, rows separated by '/', X marks a block (e.g. Goat:XX/X.)",
    )
    parser.add_argument(
        "--miss",
        action="append",
        default=[],
        metavar="X,Y",
        help="Cell confirmed empty (repeatable)",
    )
    parser.add_argument(
        "--hit",
        action="append",
        default=[],
        metavar="X,Y:NAME",
        help="Cell confirmed to hold an animal (repeatable)",
    )
    parser.add_argument("--location", type=str, default=None, help="Name of the puzzle area")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on re-confirmed cells and animals left without placements",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Run the CP-SAT arrangement check after replaying feedback",
    )
    parser.add_argument("--json", action="store_true", help="Print the board snapshot as JSON")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(resolve_level(args.log_level, default=logging.WARNING))

    if not args.animal:
        parser.error("provide at least one --animal")
    try:
        config = BoardConfig(size=args.size, strict=args.strict)
        animals = [parse_animal(entry) for entry in args.animal]
        misses = [parse_block(entry) for entry in args.miss]
        hits: List[Tuple[Block, str]] = [parse_hit(entry) for entry in args.hit]
    except (ValueError, ZooSolverError) as exc:
        parser.error(str(exc))

    board = ZooBoard(config)
    board.location = args.location
    try:
        board.add_animals(animals)
        board.generate()
        for block in misses:
            board.confirm_miss(block)
        for block, name in hits:
            board.confirm_hit(block, name)
    except ZooSolverError as exc:
        print(f"error: {exc}")
        return 1

    print_board(board, label=args.location)

    if args.check:
        arrangement = find_arrangement(board)
        print()
        if arrangement is None:
            print("Arrangement check: no consistent arrangement")
        else:
            print("Arrangement check: consistent")
            for name, candidate in arrangement.items():
                cells = " ".join(f"({block.x},{block.y})" for block in candidate.position)
                print(f"  {name:<12} {cells}")

    if args.json or args.output:
        output_text = json.dumps(board.to_jsonable(), ensure_ascii=False, indent=2)
        if args.output:
            args.output.write_text(output_text, encoding="utf-8")
        else:
            print(output_text)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
