"""ADDRESSBOOK CLI entry point.

The top-level ``addressbook`` group sets up logging for every subcommand:
console verbosity from ``-v``/``-q``/``--debug``, an optional log file fed by
the flight recorder, and per-logger levels from ``-L``.

Examples
    $ addressbook --version
    $ addressbook -v affiliations check Acme
    $ addressbook --no-log-file -L addressbook.domain=DEBUG affiliations check Acme
"""

import logging
from pathlib import Path

import click
import click_extra as clickx

from addressbook import __version__, config
from addressbook.logging import configure, log_startup

from .affiliations import affiliations as affiliations_group
from .helpers import parse_logger_levels

logger = logging.getLogger(__name__)


def _console_level(verbose: int, quiet: int) -> int:
    """WARNING, moved one step per -v (down) or -q (up), clamped to DEBUG..CRITICAL."""
    level = logging.WARNING + 10 * (quiet - verbose)
    return min(max(level, logging.DEBUG), logging.CRITICAL)


@clickx.extra_group(
    version=__version__,
    params=[clickx.ColorOption(show_envvar=True), clickx.ExtraVersionOption()],
)
@click.option("-v", "--verbose", count=True, help="Show more on the console (repeatable).")
@click.option("-q", "--quiet", count=True, help="Show less on the console (repeatable).")
@click.option(
    "--debug",
    is_flag=True,
    help="Show every record on the console, with logger names and locations.",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=config.default_log_path,
    envvar=config.LOG_FILE_ENVVAR,
    show_default=True,
    show_envvar=True,
    help=(
        "File the flight recorder writes to. It holds every record at DEBUG "
        "and is written when a warning occurs and again on exit."
    ),
)
@click.option("--no-log-file", is_flag=True, help="Do not record to a log file.")
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_logger_levels,
    envvar=config.LOGGER_LEVELS_ENVVAR,
    show_envvar=True,
    help="Set a logger's own level as NAME=LEVEL (repeatable).",
)
@clickx.pass_context
def addressbook(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose: int,
    quiet: int,
    debug: bool,
    log_file: Path,
    no_log_file: bool,
    logger_levels: dict[str, int],
) -> None:
    """Validate contact affiliations and merge affiliation lists."""
    level = _console_level(verbose, quiet)
    log_file = None if no_log_file else log_file
    configure(
        level,
        debug=debug,
        color=ctx.color is not False,
        log_file=log_file,
        logger_levels=logger_levels,
    )
    log_startup(logger, level=level, log_file=log_file)
    ctx.call_on_close(logging.shutdown)


addressbook.add_command(affiliations_group)
