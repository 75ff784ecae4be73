"""CLI entry point for stepwise.

Uses Typer for command routing with lazy loading, so settings commands
never import the prompt machinery.
"""

from typing import Optional

import typer

__all__ = ["app", "cli_main"]

app = typer.Typer(
    name="stepwise",
    help="Declarative CLI commands with interactive terminal prompts",
    no_args_is_help=True,
)


@app.command()
def status() -> None:
    """Show current settings."""
    from stepwise.cli.commands import cmd_status

    cmd_status()


@app.command()
def demo(
    name: Optional[str] = typer.Argument(None, help="Project name (default for the first question)"),
    color: Optional[str] = typer.Option(None, "--color", help="Accent color: red, green or blue"),
) -> None:
    """Run an interactive demonstration."""
    from stepwise.cli.commands import cmd_demo

    cmd_demo(name, color)


# Debug subcommand group
debug_app = typer.Typer(help="Debug mode commands")
app.add_typer(debug_app, name="debug")


@debug_app.command("on")
def debug_on() -> None:
    """Enable debug logging."""
    from stepwise.cli.commands import cmd_debug_on

    cmd_debug_on()


@debug_app.command("off")
def debug_off() -> None:
    """Disable debug logging."""
    from stepwise.cli.commands import cmd_debug_off

    cmd_debug_off()


# Config subcommand group
config_app = typer.Typer(help="Manage config overrides")
app.add_typer(config_app, name="config")


@config_app.command("list")
def config_list() -> None:
    """List config overrides."""
    from stepwise.cli.commands import cmd_config_list

    cmd_config_list()


@config_app.command("set")
def config_set(key: str, value: str) -> None:
    """Set a config override (e.g. pointer '❯')."""
    from stepwise.cli.commands import cmd_config_set

    cmd_config_set(key, value)


@config_app.command("unset")
def config_unset(key: str) -> None:
    """Remove a config override."""
    from stepwise.cli.commands import cmd_config_unset

    cmd_config_unset(key)


def cli_main() -> None:
    """Entry point for pyproject.toml scripts."""
    app()


if __name__ == "__main__":
    cli_main()
