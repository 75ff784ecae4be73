"""Configuration management."""

import json
import os
from pathlib import Path
from typing import Optional

from stepwise.utils.exceptions import ConfigurationError

DEFAULT_POINTER = ">"


def get_stepwise_dir() -> Path:
    """Get the stepwise data directory (XDG-compliant)."""
    if env_dir := os.environ.get("STEPWISE_DIR"):
        return Path(env_dir)
    return Path.home() / ".config" / "stepwise"


class Config:
    """Application configuration."""

    # Toggleable settings with descriptions (attr_name -> description)
    TOGGLES: dict[str, str] = {
        "debug": "Log to ~/.config/stepwise/debug.log",
        "color": "Colorize prompt markers",
    }

    def __init__(self, stepwise_dir: Optional[Path] = None):
        """Load config from directory."""
        self.stepwise_dir = stepwise_dir or get_stepwise_dir()
        self._config_file = self.stepwise_dir / "config.json"
        self._load()

    def _load(self):
        """Load config from file."""
        self.debug = False
        self.color = True
        # Marker drawn in front of the selected choice
        self.pointer = DEFAULT_POINTER
        # Env var overrides
        self.env: dict[str, str] = {}

        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
                self.debug = data.get("debug", False)
                self.color = data.get("color", True)
                self.pointer = data.get("pointer", DEFAULT_POINTER)
                self.env = data.get("env", {})
            except (json.JSONDecodeError, IOError):
                pass

        # Apply env section from config, then shell env vars override
        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Apply env overrides: first from config.env, then from shell STEPWISE_* vars."""
        prefix = "STEPWISE_"

        def apply_env_dict(env_dict: dict[str, str]):
            for key, value in env_dict.items():
                # Support both STEPWISE_FOO and FOO formats in config.env
                if key.startswith(prefix):
                    attr_name = key[len(prefix) :].lower()
                else:
                    attr_name = key.lower()
                if attr_name not in ("debug", "color", "pointer"):
                    continue
                current = getattr(self, attr_name)
                if isinstance(current, bool):
                    setattr(self, attr_name, value.lower() in ("true", "1", "yes"))
                else:
                    setattr(self, attr_name, value)

        apply_env_dict(self.env)

        # Shell env vars have the highest priority
        shell_env = {k: v for k, v in os.environ.items() if k.startswith(prefix)}
        apply_env_dict(shell_env)

    @property
    def use_color(self) -> bool:
        """Whether styled output is allowed (honours NO_COLOR)."""
        return self.color and "NO_COLOR" not in os.environ

    def get_pointer(self) -> str:
        """Get the selection marker, rejecting an empty one."""
        if not self.pointer:
            raise ConfigurationError("pointer must be a non-empty string")
        return self.pointer

    def save(self):
        """Save config to file."""
        self.stepwise_dir.mkdir(parents=True, exist_ok=True)
        data = {
            "debug": self.debug,
            "color": self.color,
            "pointer": self.pointer,
            "env": self.env,
        }
        self._config_file.write_text(json.dumps(data, indent=2))

    def set_env(self, key: str, value: str):
        """Set an env var override in config."""
        self.env[key] = value
        self.save()
        # Re-apply to update attributes
        self._apply_env_overrides()

    def unset_env(self, key: str) -> bool:
        """Remove an env var override. Returns True if key existed."""
        if key in self.env:
            del self.env[key]
            self.save()
            return True
        return False

    def list_env(self) -> dict[str, str]:
        """List all env var overrides."""
        return self.env.copy()

    def get_toggles(self) -> list[tuple[str, str, bool]]:
        """Get all toggleable settings with current values.

        Returns list of (attr_name, description, is_enabled).
        """
        return [
            (attr, desc, bool(getattr(self, attr, False)))
            for attr, desc in self.TOGGLES.items()
        ]

    def set_debug(self, enabled: bool):
        """Enable or disable debug mode."""
        self.debug = enabled
        self.save()


_config: Optional[Config] = None


def get_config() -> Config:
    """Get cached config instance."""
    global _config
    if _config is None:
        _config = Config(get_stepwise_dir())
    return _config


def reload_config():
    """Reload config (call after config changes)."""
    global _config
    _config = None
