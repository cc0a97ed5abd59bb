"""CP-SAT check that the live candidates still admit a full arrangement."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional

from ortools.sat.python import cp_model

from ..core.models import Block, Candidate
from ..utils.logger import get_logger
from .board import ZooBoard

LOGGER = get_logger(__name__)


@dataclass
class ConsistencyConfig:
    timeout: float = 10.0
    num_workers: int = 4


def find_arrangement(
    board: ZooBoard,
    config: Optional[ConsistencyConfig] = None,
) -> Optional[Dict[str, Candidate]]:
    """Pick one live placement per animal so that no two placements overlap.

    Confirmed hits must be covered by a placement of the confirmed animal.
    Propagation only looks at one animal at a time, so a board it accepts may
    still have no joint solution; this check looks at all of them at once.

    Returns:
        Mapping of animal name to its chosen candidate, or None if the
        animals cannot all be placed.
    """
    config = config or ConsistencyConfig()
    if not board.animals:
        return {}

    by_animal: Dict[str, List[int]] = defaultdict(list)
    for index, candidate in enumerate(board.candidates):
        by_animal[candidate.name].append(index)

    missing = [animal.name for animal in board.animals if not by_animal[animal.name]]
    if missing:
        LOGGER.debug("Skipping CP-SAT: no candidates for %s", ", ".join(missing))
        return None

    model = cp_model.CpModel()
    candidates = board.candidates
    place_vars = [model.new_bool_var(f"P_{index}") for index in range(len(candidates))]

    # ------------------------------------------------------------------
    # Step 1: each animal sits in exactly one place
    # ------------------------------------------------------------------
    for indices in by_animal.values():
        model.add_exactly_one([place_vars[index] for index in indices])

    # ------------------------------------------------------------------
    # Step 2: animals never share a cell
    # ------------------------------------------------------------------
    covering: Dict[Block, List[int]] = defaultdict(list)
    for index, candidate in enumerate(candidates):
        for block in candidate.position:
            covering[block].append(index)
    for indices in covering.values():
        if len(indices) > 1:
            model.add_at_most_one([place_vars[index] for index in indices])

    # ------------------------------------------------------------------
    # Step 3: confirmed hits are covered by the right animal
    # ------------------------------------------------------------------
    for cell in board.cells:
        if not (cell.finalised and cell.occupant):
            continue
        hits = [
            place_vars[index]
            for index in covering.get(cell.block, [])
            if candidates[index].name == cell.occupant
        ]
        if not hits:
            LOGGER.debug("Confirmed hit at (%d,%d) has no covering placement", cell.x, cell.y)
            return None
        model.add_bool_or(hits)

    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = config.timeout
    solver.parameters.num_workers = config.num_workers

    LOGGER.info(
        "CP-SAT: %d animals, %d placements, solving (timeout=%0.1fs)...",
        len(by_animal),
        len(candidates),
        config.timeout,
    )
    status = solver.solve(model)

    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        LOGGER.warning("CP-SAT: no arrangement found (status=%s)", solver.status_name(status))
        return None

    arrangement: Dict[str, Candidate] = {}
    for index, candidate in enumerate(candidates):
        if solver.value(place_vars[index]):
            arrangement[candidate.name] = candidate
    return arrangement


def is_consistent(board: ZooBoard, config: Optional[ConsistencyConfig] = None) -> bool:
    return find_arrangement(board, config) is not None
