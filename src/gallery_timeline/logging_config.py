"""Logging setup for the gallery CLI and HTTP app.

The level and log file come from `Settings` (`LOG_LEVEL`, `LOG_PATH`).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def parse_level(name: str) -> int:
    """Return the numeric logging level for a name such as `debug`.

    Raises:
        ValueError: if `name` is not a standard level name.
    """
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {name!r}")
    return level


def configure_logging(log_path: Path | None = None, level: int | str = logging.INFO) -> None:
    """Replace the root handlers with stdout and, optionally, a log file.

    Calling it again (a second CLI run in one process) swaps in the new
    handlers instead of keeping the first ones.

    Args:
        log_path: Optional path to a file where logs will be written.
        level: Level as a number or a name such as "DEBUG".
    """
    if isinstance(level, str):
        level = parse_level(level)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)
