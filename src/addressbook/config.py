"""Configuration constants for ADDRESSBOOK.

Environment variable names and the defaults the CLI falls back to when an
option is not given.
"""

import logging
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "addressbook"  # pragma: no mutate
ENVVAR_PREFIX = "ADDRESSBOOK"  # pragma: no mutate

LOG_FILE_ENVVAR = f"{ENVVAR_PREFIX}_LOG_FILE"
LOGGER_LEVELS_ENVVAR = f"{ENVVAR_PREFIX}_LOGGER_LEVEL"

# Records kept in memory before the flight recorder writes them out anyway
RECORDER_CAPACITY = 500

# Third-party loggers quieted unless overridden with -L NAME=LEVEL
DEFAULT_LIB_LEVELS = {"markdown_it": logging.WARNING, "asyncio": logging.WARNING}


def default_log_path() -> Path:
    """Return ``latest.log`` in the per-user log directory, creating the directory."""
    return Path(user_log_dir(APP_NAME, appauthor=False, ensure_exists=True)) / "latest.log"
