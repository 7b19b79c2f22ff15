"""Default marks, fixtures and a test-only command for `tests/functional/`.

Provides a `log-demo` Click command that emits log messages at every level,
plus fixtures to register it, obtain a CliRunner, and run inside an isolated
filesystem.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from tests.helpers.markers import add_default_marker
from tmx_utils.config import LOG_LEVEL_ENV
from tmx_utils.cli.main import tmx_utils

# pylint: disable=unused-argument

FUNCTIONAL_ROOT = Path(__file__).parent.resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]  # pylint: disable=redefined-outer-name
) -> None:
    """Add default `functional` marks to items in `tests/functional/`."""
    add_default_marker(FUNCTIONAL_ROOT, "functional", items)


@pytest.fixture(autouse=True)
def _cli_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's TMX_UTILS_* settings out of CLI runs.

    Also widens the Rich console so log lines are never wrapped.
    """
    monkeypatch.setenv("COLUMNS", "200")
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)


@click.command()
def log_demo():
    """Emit one message per level on a project logger and a library logger."""
    logger = logging.getLogger("tmx_utils.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    click_extra_logger = logging.getLogger("click_extra.demo")
    click_extra_logger.info("This is an info-level click_extra test message.")
    click_extra_logger.warning("This is a warning-level click_extra test message.")


@pytest.fixture
def registered_log_demo() -> Iterator[None]:
    """Register the test-only 'log-demo' command for the duration of a test."""
    tmx_utils.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        tmx_utils.commands.pop("log-demo", None)
        # cloup-based groups also index commands by section
        for section in getattr(tmx_utils, "_sections", []):
            getattr(section, "commands", {}).pop("log-demo", None)
        if default_section := getattr(tmx_utils, "_default_section", None):
            default_section.commands.pop("log-demo", None)


@pytest.fixture
def runner() -> CliRunner:
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()

