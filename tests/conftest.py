"""Pytest fixtures for srap tests."""

import logging as std_logging

import pytest

from srap import logging


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep the user's defaults file and log settings out of every test."""
    monkeypatch.delenv("SRAP_CONFIG", raising=False)
    monkeypatch.delenv("SRAP_LOG_FILE", raising=False)


@pytest.fixture
def reset_logger_singleton():
    """Reset the module-level logger and its handlers around a test."""
    original_value = logging._logger
    srap_logger = std_logging.getLogger("srap")
    original_handlers = list(srap_logger.handlers)

    logging._logger = None
    srap_logger.handlers.clear()

    yield

    for handler in srap_logger.handlers:
        handler.close()
    srap_logger.handlers[:] = original_handlers
    logging._logger = original_value


@pytest.fixture
def fake_home(tmp_path, monkeypatch):
    """Point HOME at an empty temporary directory and return it."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home
