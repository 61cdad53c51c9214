"""Fixtures for end-to-end CLI tests.

Provides a test-only ``log-demo`` command that emits log messages, plus
fixtures to register it, obtain a CliRunner, and run inside an isolated
filesystem.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from toolshed.entrypoints.cli.main import toolshed

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit one message per level on a project and a third-party logger."""
    logger = logging.getLogger("toolshed.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any Click-Extra sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command for the duration of a test."""
    toolshed.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(toolshed, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated temporary working directory."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def invoke(runner):
    """Invoke ``toolshed`` with the flight recorder disabled."""

    def _invoke(args, **kwargs):
        return runner.invoke(toolshed, ["--no-flight-recorder", *args], **kwargs)

    return _invoke
