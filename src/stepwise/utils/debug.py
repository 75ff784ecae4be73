"""Debug logging utility."""

import sys
from datetime import datetime

from stepwise.utils.config import get_config, get_stepwise_dir


def _log_to_file(line: str):
    """Append line to debug log file."""
    try:
        log_dir = get_stepwise_dir()
        log_dir.mkdir(parents=True, exist_ok=True)
        with open(log_dir / "debug.log", "a") as f:
            f.write(line + "\n")
    except OSError:
        pass


def debug(category: str, message: str, **kwargs):
    """Log debug message if debug mode is enabled.

    Args:
        category: Category like 'prompt', 'select', 'steps', 'command'
        message: Debug message
        **kwargs: Additional key=value pairs to log
    """
    if not get_config().debug:
        return

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    extras = " ".join(f"{k}={v}" for k, v in kwargs.items()) if kwargs else ""
    line = f"[stepwise:{category}] {timestamp} {message}"
    if extras:
        line += f" | {extras}"

    # stdout belongs to the prompts, so only file and stderr
    _log_to_file(line)
    try:
        print(line, file=sys.stderr)
    except BrokenPipeError:
        pass


def debug_prompt(message: str, **kwargs):
    """Log line-prompt debug message."""
    debug("prompt", message, **kwargs)


def debug_select(message: str, **kwargs):
    """Log select-menu debug message."""
    debug("select", message, **kwargs)


def debug_steps(message: str, **kwargs):
    """Log orchestrator debug message."""
    debug("steps", message, **kwargs)


def debug_command(message: str, **kwargs):
    """Log command parsing/dispatch debug message."""
    debug("command", message, **kwargs)


def log_error(category: str, message: str, exc: Exception = None):
    """Log error message ALWAYS (even if debug mode is off).

    Args:
        category: Category like 'command', 'handler'
        message: Error message
        exc: Optional exception to include traceback
    """
    import traceback

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    line = f"[stepwise:{category}] {timestamp} ERROR: {message}"

    if exc:
        tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
        line += "\n" + "".join(tb)

    _log_to_file(line)

    try:
        print(line, file=sys.stderr)
    except BrokenPipeError:
        pass
