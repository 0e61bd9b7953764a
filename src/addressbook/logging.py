"""Logging setup for the ADDRESSBOOK CLI.

Console records are rendered by Rich on stderr. When a log file is given, a
flight recorder also keeps every record (DEBUG included) in memory and dumps
it to that file as soon as a WARNING or worse is logged, and once more when
the program exits.

Only the CLI calls into this module. The domain logs through plain module
loggers and never configures handlers.
"""

from __future__ import annotations

import logging
import platform
from logging.handlers import MemoryHandler
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

from addressbook import __version__
from addressbook.config import RECORDER_CAPACITY

if TYPE_CHECKING:
    from pathlib import Path

PROJECT_PREFIX = "addressbook"
RECORD_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d %(message)s"


class LibraryTagFilter(logging.Filter):
    """Tag records from other libraries with their top-level package.

    Sets ``record.tag`` to ``"[urllib3] "`` for a ``urllib3.connectionpool``
    record and to ``""`` for project records. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        top = record.name.partition(".")[0]
        record.tag = "" if top == PROJECT_PREFIX else f"[{top}] "
        return True


def console_handler(
    level: int, *, debug: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr handler.

    In debug mode everything down to DEBUG is shown together with the logger
    name and source location; otherwise only `level` and above, with
    third-party records tagged by `LibraryTagFilter`.
    """
    console = Console(stderr=True, color_system="auto" if color else None)
    handler = RichHandler(
        level=logging.DEBUG if debug else level,
        console=console,
        show_time=False,
        show_path=debug,
        rich_tracebacks=debug,
    )
    if debug:
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    else:
        handler.addFilter(LibraryTagFilter())
        handler.setFormatter(logging.Formatter("%(tag)s%(message)s"))
    return handler


def flight_recorder(path: Path, capacity: int = RECORDER_CAPACITY) -> MemoryHandler:
    """Build a memory buffer that writes to `path` on WARNING+ and on close.

    The file is truncated when the handler is created.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setFormatter(logging.Formatter(RECORD_FORMAT))
    return MemoryHandler(
        capacity, flushLevel=logging.WARNING, target=target, flushOnClose=True
    )


def configure(
    level: int,
    *,
    debug: bool = False,
    color: bool = True,
    log_file: Path | None = None,
    logger_levels: dict[str, int] | None = None,
) -> list[logging.Handler]:
    """Replace the root logger's handlers and apply per-logger levels.

    The root logger passes everything through; each handler filters on its own.

    Returns:
        The handlers now attached to the root logger.
    """
    handlers: list[logging.Handler] = [
        console_handler(level, debug=debug, color=color)
    ]
    if log_file is not None:
        handlers.append(flight_recorder(log_file))
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in (logger_levels or {}).items():
        logging.getLogger(name).setLevel(lvl)
    return handlers


def log_startup(logger: logging.Logger, *, level: int, log_file: Path | None) -> None:
    """Log which version runs and where its records go."""
    logger.info(
        "ADDRESSBOOK %s (console %s, log file %s)",
        __version__,
        logging.getLevelName(level),
        log_file if log_file is not None else "off",
    )
    logger.debug("Python %s on %s", platform.python_version(), platform.platform())
