"""Logging setup for the zoo solver.

Board operations log one INFO line per generation or feedback call, DEBUG
lines for individual deduced cells, and WARNING for animals left without
placements or re-confirmed cells.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
PACKAGE_LOGGER = "zoosolver"


def resolve_level(level: Union[int, str], default: int = logging.INFO) -> int:
    """Map ``"debug"``/``"WARNING"``/``10`` style values to a logging level."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else default


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Send solver logs to stderr with a compact timestamped format."""

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolve_level(level))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``zoosolver`` namespace."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or PACKAGE_LOGGER)
