"""Logging setup shared by the CLI and the terminal UI."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from textual.logging import TextualHandler

# Environment switches:
#   SETGAME_LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
LOG_LEVEL = os.getenv("SETGAME_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def resolve_level(level: str | None) -> int:
    """Map a level name to its numeric value, falling back to ``WARNING``."""

    name = (level or LOG_LEVEL).upper()
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.WARNING


def setup_logging(level: str | None = None, log_file: Path | None = None) -> None:
    """Call once at program start.

    Records go to ``log_file`` when given, otherwise to the Textual devtools
    console so they never draw over the full-screen UI.
    """

    handler: logging.Handler
    if log_file is not None:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = TextualHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logging.basicConfig(level=resolve_level(level), handlers=[handler], force=True)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
