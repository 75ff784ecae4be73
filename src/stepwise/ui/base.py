"""Base protocol for terminal backends and shared render bookkeeping."""

from dataclasses import dataclass
from typing import ContextManager, Protocol


@dataclass
class RenderContext:
    """Estimate of the terminal row the prompts have reached.

    Only used for banner and full-screen clear bookkeeping, never for
    redrawing.
    """

    current_line: int = 0

    def advance(self, lines: int = 1) -> None:
        self.current_line += lines

    def reset(self) -> None:
        self.current_line = 0


class TerminalIO(Protocol):
    """Protocol for the terminal control channel.

    Allows swapping terminal backends (tests drive prompts with a
    scripted implementation).
    """

    def write(self, text: str) -> None:
        """Write text and flush it to the device."""
        ...

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...

    def move_to_column_start(self) -> None: ...

    def move_up(self, lines: int = 1) -> None: ...

    def clear_line(self) -> None: ...

    def clear_screen(self) -> None: ...

    def read_line(self) -> str:
        """Read one cooked-mode line without its terminator."""
        ...

    def raw_mode(self) -> ContextManager[None]:
        """Scope in which keys are delivered one at a time, unechoed."""
        ...

    def read_key(self) -> str:
        """Read one key: 'up', 'down', 'return' or the literal character."""
        ...
