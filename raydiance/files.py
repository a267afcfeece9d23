"""Naming and opening of rendered image files."""

from __future__ import annotations

import time
from pathlib import Path
from typing import TextIO

TIMESTAMP_FORMAT = "%d-%m-%Y-%H-%M-%S"


def get_timestamp() -> str:
    """The local time as DD-MM-YYYY-HH-MM-SS, or 'unknown' if it cannot be read."""
    try:
        return time.strftime(TIMESTAMP_FORMAT, time.localtime())
    except (OverflowError, OSError, ValueError):
        return "unknown"


def open_out_stream(name: str) -> TextIO:
    """Open a new timestamped '<name>-<time>.ppm' file inside the directory <name>.

    The directory is created if it does not exist; OSError is raised if the
    file cannot be opened.
    """
    directory = Path(name)
    if not directory.exists():
        directory.mkdir()
    return open(directory / f"{name}-{get_timestamp()}.ppm", "w", encoding="ascii")