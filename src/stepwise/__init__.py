"""stepwise - Declarative CLI commands with interactive terminal prompts."""

from importlib.metadata import version

__version__ = version("stepwise-cli")

from stepwise.core import (
    Banner,
    CLIConfig,
    CommandConfig,
    ConfirmStep,
    HandlerRegistry,
    SelectStep,
    TextStep,
    create_cli,
    run_steps,
)
from stepwise.ui import Choice, prompt_confirm, prompt_select, prompt_text

__all__ = [
    "Banner",
    "CLIConfig",
    "Choice",
    "CommandConfig",
    "ConfirmStep",
    "HandlerRegistry",
    "SelectStep",
    "TextStep",
    "create_cli",
    "prompt_confirm",
    "prompt_select",
    "prompt_text",
    "run_steps",
]
