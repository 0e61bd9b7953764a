"""Parsing of ``-L NAME=LEVEL`` logger-level options.

Values may be repeated on the command line or given as one comma/space
separated string (as they arrive from an environment variable).
"""

import logging
import re
from collections.abc import Iterator

import click

from addressbook.config import DEFAULT_LIB_LEVELS

_SEPARATORS = re.compile(r"[,\s]+")


def _pairs(value: str | list[str] | tuple[str, ...]) -> Iterator[str]:
    chunks = [value] if isinstance(value, str) else value
    for chunk in chunks:
        yield from filter(None, _SEPARATORS.split(chunk))


def _level(name: str, text: str) -> int:
    level = logging.getLevelName(text.strip().upper())
    if not isinstance(level, int):
        raise click.BadParameter(f"Unknown log level {text!r} for logger {name!r}")
    return level


def parse_logger_levels(
    ctx: click.Context | None,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback: layer ``NAME=LEVEL`` pairs over `DEFAULT_LIB_LEVELS`.

    Later pairs win over earlier ones for the same logger. Level names are
    case-insensitive.

    Raises:
        click.BadParameter: If a pair has no ``=`` or no name, or names an unknown level.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for pair in _pairs(value):
        name, sep, text = pair.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {pair!r}")
        levels[name.strip()] = _level(name.strip(), text)
    return levels
