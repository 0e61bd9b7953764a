"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits log messages on a
project logger and a third-party logger, plus fixtures to register that
command, obtain a CliRunner, and run tests within an isolated filesystem.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from addressbook.entrypoints.cli.main import addressbook

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit one message per level on 'addressbook.demo' and a few on 'some.thirdparty'."""
    logger = logging.getLogger("addressbook.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any Click-Extra sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command on `addressbook` for the duration of a test."""
    addressbook.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(addressbook, "log-demo")


@pytest.fixture
def runner():
    """Return a CliRunner whose default log file is local to the test."""
    return CliRunner(env={"ADDRESSBOOK_LOG_FILE": "latest.log"})


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated filesystem so log files stay local."""
    with runner.isolated_filesystem():
        yield
