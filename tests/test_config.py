"""Tests for configuration module."""

import json
from pathlib import Path

import pytest

from stepwise.utils.config import Config, get_config, reload_config
from stepwise.utils.exceptions import ConfigurationError


def test_config_default_values(mock_stepwise_dir):
    """Config should have sensible defaults."""
    config = Config(mock_stepwise_dir)

    assert config.debug is False
    assert config.color is True
    assert config.pointer == ">"
    assert config.env == {}


def test_config_loads_from_file(mock_stepwise_dir):
    """Config should load values from config.json."""
    (mock_stepwise_dir / "config.json").write_text(
        json.dumps({"debug": True, "color": False, "pointer": "❯"})
    )

    config = Config(mock_stepwise_dir)

    assert config.debug is True
    assert config.color is False
    assert config.pointer == "❯"


def test_config_ignores_corrupt_file(mock_stepwise_dir):
    """A corrupt config.json falls back to defaults."""
    (mock_stepwise_dir / "config.json").write_text("{not json")

    config = Config(mock_stepwise_dir)

    assert config.debug is False
    assert config.pointer == ">"


def test_config_save(mock_stepwise_dir):
    """Config should save changes to file."""
    config = Config(mock_stepwise_dir)
    config.pointer = "*"
    config.save()

    data = json.loads((mock_stepwise_dir / "config.json").read_text())
    assert data["pointer"] == "*"


def test_config_get_stepwise_dir_from_env(temp_dir, monkeypatch):
    """Config should use STEPWISE_DIR env var if set."""
    custom_dir = temp_dir / "custom"
    custom_dir.mkdir()
    monkeypatch.setenv("STEPWISE_DIR", str(custom_dir))

    from stepwise.utils.config import get_stepwise_dir

    assert get_stepwise_dir() == custom_dir


def test_config_default_stepwise_dir(monkeypatch):
    """Config should default to ~/.config/stepwise (XDG-compliant)."""
    monkeypatch.delenv("STEPWISE_DIR", raising=False)

    from stepwise.utils.config import get_stepwise_dir

    assert get_stepwise_dir() == Path.home() / ".config" / "stepwise"


def test_env_section_overrides_file_values(mock_stepwise_dir):
    """Overrides stored in the env section apply on load."""
    (mock_stepwise_dir / "config.json").write_text(
        json.dumps({"pointer": ">", "env": {"POINTER": "»", "STEPWISE_DEBUG": "yes"}})
    )

    config = Config(mock_stepwise_dir)

    assert config.pointer == "»"
    assert config.debug is True


def test_shell_env_has_highest_priority(mock_stepwise_dir, monkeypatch):
    """STEPWISE_* shell variables beat the config file."""
    (mock_stepwise_dir / "config.json").write_text(
        json.dumps({"env": {"POINTER": "»"}})
    )
    monkeypatch.setenv("STEPWISE_POINTER", "=>")
    monkeypatch.setenv("STEPWISE_COLOR", "false")

    config = Config(mock_stepwise_dir)

    assert config.pointer == "=>"
    assert config.color is False


def test_unknown_env_keys_are_ignored(mock_stepwise_dir, monkeypatch):
    """Only known settings are overridden."""
    monkeypatch.setenv("STEPWISE_SOMETHING", "value")

    config = Config(mock_stepwise_dir)

    assert not hasattr(config, "something")


def test_set_and_unset_env(mock_stepwise_dir):
    """set_env persists and applies; unset_env removes."""
    config = Config(mock_stepwise_dir)
    config.set_env("pointer", "+")

    assert config.pointer == "+"
    assert Config(mock_stepwise_dir).list_env() == {"pointer": "+"}

    assert config.unset_env("pointer") is True
    assert config.unset_env("pointer") is False
    assert Config(mock_stepwise_dir).list_env() == {}


def test_use_color_honours_no_color(mock_stepwise_dir, monkeypatch):
    """NO_COLOR disables colour even when the config enables it."""
    config = Config(mock_stepwise_dir)
    assert config.use_color is False

    monkeypatch.delenv("NO_COLOR")
    assert config.use_color is True


def test_empty_pointer_is_rejected(mock_stepwise_dir):
    """An empty pointer cannot be drawn."""
    config = Config(mock_stepwise_dir)
    config.pointer = ""

    with pytest.raises(ConfigurationError):
        config.get_pointer()


def test_get_toggles(mock_stepwise_dir):
    """Toggles report attribute, description and state."""
    config = Config(mock_stepwise_dir)
    toggles = {attr: enabled for attr, _, enabled in config.get_toggles()}

    assert toggles == {"debug": False, "color": True}


def test_get_config_is_cached_until_reload(mock_stepwise_dir):
    """get_config returns one instance until reload_config is called."""
    first = get_config()
    assert get_config() is first

    reload_config()
    assert get_config() is not first
