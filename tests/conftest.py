"""Shared pytest fixtures."""

import tempfile
from pathlib import Path

import pytest

from stepwise.utils.config import reload_config


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture
def mock_stepwise_dir(temp_dir):
    """Set up a mock ~/.config/stepwise directory."""
    stepwise_dir = temp_dir / "stepwise"
    stepwise_dir.mkdir()
    return stepwise_dir


@pytest.fixture(autouse=True)
def isolated_config(mock_stepwise_dir, monkeypatch):
    """Point config at the mock directory and disable colour.

    Every test gets default settings and plain output, regardless of
    the developer's own config or environment.
    """
    for key in ("STEPWISE_DEBUG", "STEPWISE_COLOR", "STEPWISE_POINTER"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("STEPWISE_DIR", str(mock_stepwise_dir))
    monkeypatch.setenv("NO_COLOR", "1")
    reload_config()
    yield
    reload_config()
