"""Utilities for stepwise."""

from stepwise.utils.config import Config, get_config, get_stepwise_dir
from stepwise.utils.debug import debug, log_error

__all__ = ["Config", "get_config", "get_stepwise_dir", "debug", "log_error"]
