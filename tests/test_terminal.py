"""Tests for the terminal control channel."""

import io

import pytest
import readchar

from stepwise.ui.terminal import (
    CLEAR_LINE,
    CLEAR_SCREEN,
    COLUMN_START,
    CURSOR_UP,
    HIDE_CURSOR,
    KEY_DOWN,
    KEY_RETURN,
    KEY_UP,
    SHOW_CURSOR,
    Terminal,
    normalize_key,
)


def make_terminal(text: str = "") -> tuple[Terminal, io.StringIO]:
    stdout = io.StringIO()
    return Terminal(stdin=io.StringIO(text), stdout=stdout), stdout


def test_escape_sequences_are_exact():
    """Sequences match what VT100 terminals expect."""
    assert HIDE_CURSOR == "\x1b[?25l"
    assert SHOW_CURSOR == "\x1b[?25h"
    assert COLUMN_START == "\x1b[0G"
    assert CURSOR_UP == "\x1b[1A"
    assert CLEAR_LINE == "\x1b[2K"
    assert CLEAR_SCREEN == "\x1b[2J\x1b[0f"


def test_primitives_write_sequences_in_order():
    """Each primitive writes exactly its sequence."""
    terminal, stdout = make_terminal()

    terminal.hide_cursor()
    terminal.move_to_column_start()
    terminal.move_up(3)
    terminal.clear_line()
    terminal.write("hi")
    terminal.clear_screen()
    terminal.show_cursor()

    assert stdout.getvalue() == (
        HIDE_CURSOR
        + COLUMN_START
        + CURSOR_UP * 3
        + CLEAR_LINE
        + "hi"
        + CLEAR_SCREEN
        + SHOW_CURSOR
    )


def test_read_line_strips_terminator():
    """read_line returns one line without its newline."""
    terminal, _ = make_terminal("first\r\nsecond\n")

    assert terminal.read_line() == "first"
    assert terminal.read_line() == "second"


def test_read_line_at_eof_is_empty():
    """EOF reads as an empty line."""
    terminal, _ = make_terminal("")

    assert terminal.read_line() == ""


def test_raw_mode_is_noop_without_tty():
    """Non-tty streams are left untouched by raw_mode."""
    terminal, stdout = make_terminal()

    with terminal.raw_mode():
        terminal.write("inside")

    assert stdout.getvalue() == "inside"


def test_raw_mode_exits_on_error():
    """Exceptions pass through the raw mode scope."""
    terminal, _ = make_terminal()

    with pytest.raises(RuntimeError):
        with terminal.raw_mode():
            raise RuntimeError("boom")


@pytest.mark.parametrize(
    "raw, expected",
    [
        (readchar.key.UP, KEY_UP),
        (readchar.key.DOWN, KEY_DOWN),
        (readchar.key.ENTER, KEY_RETURN),
        (readchar.key.CR, KEY_RETURN),
        (readchar.key.LF, KEY_RETURN),
        ("x", "x"),
        (readchar.key.LEFT, readchar.key.LEFT),
    ],
)
def test_normalize_key(raw, expected):
    """readchar keys map to symbolic names; others pass through."""
    assert normalize_key(raw) == expected


def test_ctrl_c_interrupts():
    """Ctrl+C in raw input raises KeyboardInterrupt."""
    with pytest.raises(KeyboardInterrupt):
        normalize_key(readchar.key.CTRL_C)


def test_read_key_uses_readchar_for_process_stdin(monkeypatch):
    """The process's own stdin is read through readchar."""
    monkeypatch.setattr(readchar, "readkey", lambda: readchar.key.DOWN)
    terminal = Terminal(stdout=io.StringIO())

    assert terminal.read_key() == KEY_DOWN


def test_read_key_reads_injected_stream(monkeypatch):
    """Keys come from the same stream raw mode applies to."""
    monkeypatch.setattr(readchar, "readkey", lambda: readchar.key.UP)
    terminal, _ = make_terminal(readchar.key.DOWN + "x" + readchar.key.CR)

    assert terminal.read_key() == KEY_DOWN
    assert terminal.read_key() == "x"
    assert terminal.read_key() == KEY_RETURN


def test_read_key_decodes_longer_sequences():
    """Multi-character escape sequences are read whole."""
    terminal, _ = make_terminal(readchar.key.PAGE_UP + readchar.key.UP)

    assert terminal.read_key() == readchar.key.PAGE_UP
    assert terminal.read_key() == KEY_UP


def test_read_key_ctrl_c_on_injected_stream():
    """Ctrl+C from an injected stream interrupts too."""
    terminal, _ = make_terminal(readchar.key.CTRL_C)

    with pytest.raises(KeyboardInterrupt):
        terminal.read_key()


def test_read_key_at_eof_raises():
    """A closed stream cannot yield keys."""
    terminal, _ = make_terminal("")

    with pytest.raises(EOFError):
        terminal.read_key()
