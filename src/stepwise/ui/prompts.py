"""Line-oriented prompts: free text and yes/no confirmation."""

from typing import Callable, Optional, Union

from stepwise.ui.base import RenderContext, TerminalIO
from stepwise.ui.style import cyan, dim
from stepwise.utils.debug import debug_prompt
from stepwise.utils.exceptions import ValidationError

Validator = Callable[[str], Union[bool, str]]


def _resolve_terminal(terminal: Optional[TerminalIO]) -> TerminalIO:
    if terminal is not None:
        return terminal
    from stepwise.ui.terminal import Terminal

    return Terminal()


def prompt_text(
    message: str,
    initial: Optional[str] = None,
    validate: Optional[Validator] = None,
    *,
    terminal: Optional[TerminalIO] = None,
    context: Optional[RenderContext] = None,
) -> str:
    """Ask for one line of text.

    Args:
        message: Question shown after the "? " marker
        initial: Value used when the user submits an empty line
        validate: Called with the answer; returning a string rejects it
            with that string as the reason
        terminal: Terminal backend, a real one by default
        context: Row bookkeeping to advance

    Returns:
        The typed line verbatim, or the initial value for an empty line

    Raises:
        ValidationError: If the validator returned a message
    """
    terminal = _resolve_terminal(terminal)

    hint = dim(f" ({initial})") if initial else ""
    terminal.write(cyan("? ") + message + hint + " \n")

    try:
        answer = terminal.read_line() or initial or ""
        debug_prompt("Text answered", question=message, used_initial=answer == initial)

        if validate is not None:
            result = validate(answer)
            if isinstance(result, str):
                debug_prompt("Validation failed", question=message, reason=result)
                raise ValidationError(result)

        return answer
    finally:
        # Prompt line plus the echoed input line
        if context is not None:
            context.advance(2)


def prompt_confirm(
    message: str,
    initial: bool = False,
    *,
    terminal: Optional[TerminalIO] = None,
    context: Optional[RenderContext] = None,
) -> bool:
    """Ask a yes/no question. Any answer starting with "y" is yes."""
    answer = prompt_text(
        f"{message} (y/n)",
        "y" if initial else "n",
        terminal=terminal,
        context=context,
    )
    return answer.strip().lower().startswith("y")
