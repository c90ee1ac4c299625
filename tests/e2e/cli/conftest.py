"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits structured log
messages, fixtures to register it and obtain a CliRunner, and a `cli` helper
that runs `casework` against a migrated SQLite database in a temp directory.
"""

import json
import logging
from typing import Any

import click
import pytest
from click.testing import CliRunner, Result

from casework.entrypoints.cli.main import casework

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages for CLI/flight-recorder tests.

    Emits DEBUG/INFO/WARNING/ERROR/CRITICAL messages on the 'casework.demo'
    logger and additional messages on a 'some.thirdparty' logger to exercise
    logger-level filtering and flight-recorder behavior.
    """
    logger = logging.getLogger("casework.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and its internal sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command for the duration of a test."""
    casework.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(casework, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Confine filesystem side-effects of a test to a temp directory."""
    with runner.isolated_filesystem():
        yield


class CliHarness:
    """Runs `casework` with a fixed environment and parses JSON results."""

    def __init__(self, runner: CliRunner, env: dict[str, str]):
        self.runner = runner
        self.env = env

    def __call__(self, *args: str, input: str | None = None) -> Result:  # pylint: disable=redefined-builtin
        return self.runner.invoke(
            casework, ["--no-flight-recorder", *args], env=self.env, input=input
        )

    def json(self, *args: str) -> Any:
        """Run a command that must succeed and return its parsed stdout."""
        result = self(*args)
        assert result.exit_code == 0, result.output
        return json.loads(result.stdout)


@pytest.fixture
def cli(runner, sqlite_url_file) -> CliHarness:
    """`casework` bound to a freshly migrated SQLite file."""
    return CliHarness(runner, {"CASEWORK_DB_URL": sqlite_url_file})


@pytest.fixture
def blank_db_url(tmp_path) -> str:
    """URL of an empty SQLite file with no schema yet."""
    return f"sqlite:///{tmp_path / 'blank.db'}"
