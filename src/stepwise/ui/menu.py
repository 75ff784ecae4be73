"""Single-select menu driven by raw arrow keys.

The menu paints its question once, then paints one line per choice
below it. Every navigation key erases exactly the lines it painted
(cursor up + clear line, once per choice) and paints them again, so
the screen stays in step with the selection without any framebuffer.

Example:
    color = prompt_select(
        "Pick a color",
        [Choice("Red", "r"), Choice("Blue", "b")],
        initial_index=1,
    )
"""

from contextlib import ExitStack
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, Sequence, TypeVar

from rich.cells import cell_len

from stepwise.ui.base import RenderContext, TerminalIO
from stepwise.ui.style import cyan, green
from stepwise.ui.terminal import KEY_DOWN, KEY_RETURN, KEY_UP, Terminal
from stepwise.utils.config import get_config
from stepwise.utils.debug import debug_select
from stepwise.utils.exceptions import InvalidArgumentError

T = TypeVar("T")


@dataclass(frozen=True)
class Choice(Generic[T]):
    """One selectable entry: the text shown and the value returned."""

    title: str
    value: T


class MenuState(Enum):
    """Lifecycle of a select menu."""

    IDLE = "idle"
    RENDERED = "rendered"
    RESOLVED = "resolved"
    CANCELLED = "cancelled"


class SelectMenu(Generic[T]):
    """State machine behind one select prompt.

    A menu is used for exactly one question and discarded afterwards.
    Raw mode and the hidden cursor are acquired by ``open()`` and
    released by ``close()``, which runs at most once.

    Attributes:
        choices: Choices in display order
        selected_index: Index of the highlighted choice, never out of range
        rendered: Whether the choice lines have been painted
        state: Current MenuState
    """

    def __init__(
        self,
        message: str,
        choices: Sequence[Choice[T]],
        initial_index: int = 0,
        *,
        terminal: Optional[TerminalIO] = None,
        context: Optional[RenderContext] = None,
        pointer: Optional[str] = None,
    ):
        choices = list(choices)
        if not choices:
            raise InvalidArgumentError("select requires at least one choice")
        if not 0 <= initial_index < len(choices):
            raise InvalidArgumentError(
                f"initial index {initial_index} out of range for {len(choices)} choices"
            )

        self.message = message
        self.choices = choices
        self.selected_index = initial_index
        self.rendered = False
        self.state = MenuState.IDLE
        self.terminal = terminal if terminal is not None else Terminal()
        self.context = context
        self.pointer = pointer if pointer is not None else get_config().get_pointer()
        self._stack = ExitStack()
        self._closed = False

    @property
    def selected(self) -> Choice[T]:
        return self.choices[self.selected_index]

    @property
    def finished(self) -> bool:
        return self.state in (MenuState.RESOLVED, MenuState.CANCELLED)

    def _format_line(self, index: int, choice: Choice[T]) -> str:
        # Blank prefix spans the pointer's display cells so titles stay aligned
        if index == self.selected_index:
            prefix = green(self.pointer)
        else:
            prefix = " " * cell_len(self.pointer)
        return f"  {prefix} {choice.title}\n"

    def render(self) -> None:
        """Paint every choice line below the question."""
        self.terminal.move_to_column_start()
        for index, choice in enumerate(self.choices):
            self.terminal.write(self._format_line(index, choice))
        self.rendered = True
        self.state = MenuState.RENDERED

    def erase(self) -> None:
        """Remove the painted choice lines, leaving the cursor at the first."""
        for _ in self.choices:
            self.terminal.move_up(1)
            self.terminal.clear_line()

    def redraw(self) -> None:
        self.erase()
        self.render()

    def open(self) -> None:
        """Hide the cursor, print the question, enter raw mode and paint."""
        debug_select("Opening menu", question=self.message, choices=len(self.choices))
        self.terminal.hide_cursor()
        self.terminal.write(cyan("? ") + self.message + "\n")
        if self.context is not None:
            self.context.advance(1 + len(self.choices))
        self._stack.enter_context(self.terminal.raw_mode())
        self.render()

    def close(self) -> None:
        """Leave raw mode and show the cursor. Safe to call repeatedly."""
        if self._closed:
            return
        self._closed = True
        try:
            self._stack.close()
        finally:
            self.terminal.show_cursor()

    def handle_key(self, key: str) -> bool:
        """Apply one key event.

        Returns:
            True once the menu has finished and no more keys are wanted
        """
        if self.finished:
            return True

        if key == KEY_UP:
            self.selected_index = max(0, self.selected_index - 1)
        elif key == KEY_DOWN:
            self.selected_index = min(len(self.choices) - 1, self.selected_index + 1)
        elif key == KEY_RETURN:
            self._resolve()
            return True
        else:
            return False

        # Repaint even when the index is already at a boundary
        self.redraw()
        return False

    def _resolve(self) -> None:
        self.state = MenuState.RESOLVED
        self.close()
        self.terminal.write("\n")
        if self.context is not None:
            self.context.advance(1)
        debug_select("Resolved", index=self.selected_index, title=self.selected.title)

    def run(self) -> T:
        """Drive the menu from terminal keys until a choice is made.

        Raises:
            KeyboardInterrupt: If interrupted; the terminal is restored first
        """
        try:
            self.open()
            while not self.handle_key(self.terminal.read_key()):
                pass
        finally:
            if self.state is not MenuState.RESOLVED:
                self.state = MenuState.CANCELLED
                debug_select("Cancelled", question=self.message)
            self.close()
        return self.selected.value


def prompt_select(
    message: str,
    choices: Sequence[Choice[T]],
    initial_index: int = 0,
    *,
    terminal: Optional[TerminalIO] = None,
    context: Optional[RenderContext] = None,
) -> T:
    """Ask the user to pick one choice with the arrow keys and Enter.

    Raises:
        InvalidArgumentError: For an empty choice list or a bad initial
            index, before anything is written
    """
    menu = SelectMenu(
        message, choices, initial_index, terminal=terminal, context=context
    )
    return menu.run()
