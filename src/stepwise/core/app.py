"""Builds a runnable CLI from a declarative config."""

import asyncio
import inspect
from functools import partial
from typing import Any, Optional

import click
from rich.console import Console

from stepwise.core.command import Command
from stepwise.core.orchestrator import run_steps, seed_steps
from stepwise.core.registry import HandlerRegistry
from stepwise.core.steps import (
    CLIConfig,
    CommandConfig,
    SelectStep,
    TextStep,
    check_unique_names,
)
from stepwise.ui.base import TerminalIO
from stepwise.utils.debug import debug_command, log_error
from stepwise.utils.exceptions import StepwiseError

err_console = Console(stderr=True)


class CLI:
    """A program whose commands ask their steps, then call a handler.

    Text steps become optional positional arguments and select steps
    become ``--name <value>`` options; values given on the command line
    are offered as the steps' defaults.
    """

    def __init__(
        self,
        config: CLIConfig,
        registry: HandlerRegistry,
        terminal: Optional[TerminalIO] = None,
    ):
        self.config = config
        self.registry = registry
        self.terminal = terminal
        self.program = Command().name(config.name).version(config.version)
        for name, command_config in config.commands.items():
            self._add_command(name, command_config)

    def _add_command(self, name: str, command_config: CommandConfig) -> None:
        check_unique_names(command_config.steps)
        command = self.program.command(name).description(command_config.description)

        for step in command_config.steps:
            if isinstance(step, TextStep):
                command.argument(f"[{step.name}]", step.help)
            elif isinstance(step, SelectStep):
                command.option(
                    f"--{step.name} <{step.name}>", step.help, step.option_values()
                )

        command.action(partial(self._run_command, name, command_config))

    def _run_command(
        self,
        name: str,
        command_config: CommandConfig,
        arguments: dict[str, Any],
        options: dict[str, Any],
    ) -> Any:
        try:
            steps = seed_steps(command_config.steps, arguments, options)
            answers = run_steps(steps, command_config.banner, terminal=self.terminal)

            handler = self.registry.resolve(name)
            payload = {
                key: value for key, value in options.items() if value is not None
            }
            payload.update(answers)
            debug_command("Dispatching", command=name, keys=sorted(payload))

            result = handler(payload)
            if inspect.iscoroutine(result):
                return asyncio.run(result)
            return result
        except (StepwiseError, click.ClickException, click.exceptions.Exit):
            raise
        except Exception as exc:
            log_error("command", f"{name} failed", exc)
            raise

    @property
    def click_command(self) -> click.Command:
        return self.program.to_click()

    def run(self, argv: Optional[list[str]] = None, standalone_mode: bool = True):
        """Parse argv and dispatch.

        In standalone mode stepwise errors are reported on stderr and
        exit with status 1; otherwise they propagate.
        """
        try:
            return self.program.parse(argv, standalone_mode=standalone_mode)
        except StepwiseError as exc:
            if not standalone_mode:
                raise
            debug_command("Command failed", error=type(exc).__name__)
            err_console.print(f"[red]Error:[/red] {exc}")
            raise SystemExit(1) from exc


def create_cli(
    config: CLIConfig,
    registry: HandlerRegistry,
    *,
    terminal: Optional[TerminalIO] = None,
) -> CLI:
    """Create a CLI for a config, dispatching to handlers in the registry."""
    return CLI(config, registry, terminal)
