"""Demonstration program built with create_cli."""

from typing import Any

from rich.console import Console
from rich.table import Table

from stepwise.core import (
    Banner,
    CLIConfig,
    CommandConfig,
    ConfirmStep,
    HandlerRegistry,
    SelectStep,
    TextStep,
    create_cli,
)
from stepwise.ui import Choice

console = Console()

registry = HandlerRegistry()


def _validate_name(value: str):
    if not value.strip():
        return "A project name is required"
    return True


DEMO_CONFIG = CLIConfig(
    name="stepwise-demo",
    version="0.1.0",
    commands={
        "create": CommandConfig(
            description="Create a sample project",
            banner=Banner(render=lambda: "stepwise demo", text="Answer a few questions"),
            steps=[
                TextStep(
                    name="name",
                    message="Project name?",
                    initial="my-project",
                    validate=_validate_name,
                    transform=str.strip,
                ),
                SelectStep(
                    name="color",
                    message="Accent color?",
                    choices=[
                        Choice("Red", "red"),
                        Choice("Green", "green"),
                        Choice("Blue", "blue"),
                    ],
                ),
                ConfirmStep(name="git", message="Initialize a git repository?", initial=True),
            ],
        ),
    },
)


@registry.register("create")
def create(answers: dict[str, Any]) -> dict[str, Any]:
    """Print the collected answers."""
    table = Table(title="Answers", show_header=True, header_style="bold cyan")
    table.add_column("Step", style="bold")
    table.add_column("Answer")
    for key, value in answers.items():
        table.add_row(key, str(value))
    console.print(table)
    return answers


def demo_cli(terminal=None):
    """Create the demo CLI, optionally on a custom terminal backend."""
    return create_cli(DEMO_CONFIG, registry, terminal=terminal)
