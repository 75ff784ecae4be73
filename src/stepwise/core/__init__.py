"""Core logic: steps, orchestration, command building and dispatch."""

from stepwise.core.app import CLI, create_cli
from stepwise.core.command import Command
from stepwise.core.orchestrator import process_step, run_steps, seed_steps
from stepwise.core.registry import HandlerRegistry
from stepwise.core.steps import (
    Banner,
    CLIConfig,
    CommandConfig,
    ConfirmStep,
    SelectStep,
    StepConfig,
    TextStep,
)

__all__ = [
    "Banner",
    "CLI",
    "CLIConfig",
    "Command",
    "CommandConfig",
    "ConfirmStep",
    "HandlerRegistry",
    "SelectStep",
    "StepConfig",
    "TextStep",
    "create_cli",
    "process_step",
    "run_steps",
    "seed_steps",
]
