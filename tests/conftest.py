"""Shared pytest fixtures and configuration for all tests."""

import logging

import pytest

from tally.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate tests from the caller's TALLY_* environment and the settings cache."""
    monkeypatch.delenv("TALLY_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TALLY_STRICT_SHAPES", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_tally_logger():
    """Drop handlers the CLI attaches so they do not outlive captured streams."""
    logger = logging.getLogger("tally")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)


@pytest.fixture
def declaration_source():
    """A declaration followed by a log of the declared name."""
    return "x : constant, number = 5; log x;"


@pytest.fixture
def source_file(tmp_path, declaration_source):
    """Write the declaration program to a temporary .tly file."""
    path = tmp_path / "program.tly"
    path.write_text(declaration_source, encoding="utf-8")
    return path
