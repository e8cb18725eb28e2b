"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import logging

import pytest

from src.killport import logging_config
from src.killport.config import runtime
from tests.helpers.command_runner_stub import StubCommandRunner


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep developer .env files and KILLPORT_* variables out of tests."""
    monkeypatch.delenv("KILLPORT_AUTO_CONFIRM", raising=False)
    monkeypatch.delenv("KILLPORT_LOG_LEVEL", raising=False)
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", ())
    runtime.reset_default_values()
    yield
    runtime.reset_default_values()
    package_logger = logging.getLogger(logging_config.PACKAGE_LOGGER_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)


@pytest.fixture
def stub_runner() -> StubCommandRunner:
    return StubCommandRunner()
