"""Shared pytest fixtures for envshape tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore the envshape logger after each test.

    The CLI root group reconfigures logging on every invocation.
    """
    envshape_logger = logging.getLogger("envshape")
    handlers = envshape_logger.handlers[:]
    level = envshape_logger.level
    propagate = envshape_logger.propagate
    yield
    envshape_logger.handlers = handlers
    envshape_logger.setLevel(level)
    envshape_logger.propagate = propagate


@pytest.fixture
def scenario_env() -> dict[str, str]:
    """Environment snapshot with every AppConfig variable set."""
    return {"APP_PORT": "3000", "APP_HOST": "example.com", "DEBUG": "true"}
