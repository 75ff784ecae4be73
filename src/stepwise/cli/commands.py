"""Command implementations for the stepwise CLI."""

from typing import Optional

from rich.console import Console

from stepwise.utils.config import Config, get_stepwise_dir, reload_config

console = Console()


def cmd_status() -> None:
    """Show current settings."""
    stepwise_dir = get_stepwise_dir()
    config = Config(stepwise_dir)

    debug_color = "green" if config.debug else "dim"
    console.print(
        f"[bold]Debug:[/bold] [{debug_color}]{'on' if config.debug else 'off'}[/{debug_color}]"
    )
    color_color = "green" if config.use_color else "dim"
    console.print(
        f"[bold]Color:[/bold] [{color_color}]{'on' if config.use_color else 'off'}[/{color_color}]"
    )
    console.print(f"[bold]Pointer:[/bold] {config.pointer}", highlight=False)
    console.print(f"[bold]Config:[/bold] [dim]{stepwise_dir}[/dim]")


def cmd_debug_on() -> None:
    """Enable debug logging."""
    config = Config(get_stepwise_dir())
    config.set_debug(True)
    reload_config()
    print("Debug mode enabled")


def cmd_debug_off() -> None:
    """Disable debug logging."""
    config = Config(get_stepwise_dir())
    config.set_debug(False)
    reload_config()
    print("Debug mode disabled")


def cmd_config_list() -> None:
    """List all config overrides."""
    config = Config(get_stepwise_dir())
    env_vars = config.list_env()

    if not env_vars:
        print("No overrides set.")
        return

    for key, value in sorted(env_vars.items()):
        print(f"{key}={value}")


def cmd_config_set(key: str, value: str) -> None:
    """Set a config override."""
    config = Config(get_stepwise_dir())
    config.set_env(key, value)
    reload_config()
    print(f"Set {key}={value}")


def cmd_config_unset(key: str) -> None:
    """Remove a config override."""
    config = Config(get_stepwise_dir())
    if config.unset_env(key):
        reload_config()
        print(f"Unset {key}")
    else:
        print(f"{key} not found")


def cmd_demo(name: Optional[str], color: Optional[str]) -> None:
    """Run the demonstration flow."""
    from stepwise.cli.demo import demo_cli

    argv = ["create"]
    if name:
        argv.append(name)
    if color:
        argv.extend(["--color", color])
    demo_cli().run(argv)
