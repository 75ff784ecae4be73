"""Terminal control channel: escape sequences, cooked lines, raw keys."""

import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

import readchar

try:
    import termios
except ImportError:  # Windows: readchar handles console mode per key
    termios = None

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
COLUMN_START = "\x1b[0G"
CURSOR_UP = "\x1b[1A"
CLEAR_LINE = "\x1b[2K"
CLEAR_SCREEN = "\x1b[2J\x1b[0f"

KEY_UP = "up"
KEY_DOWN = "down"
KEY_RETURN = "return"

_KEY_NAMES = {
    readchar.key.UP: KEY_UP,
    readchar.key.DOWN: KEY_DOWN,
    readchar.key.ENTER: KEY_RETURN,
    readchar.key.CR: KEY_RETURN,
    readchar.key.LF: KEY_RETURN,
}


def normalize_key(key: str) -> str:
    """Map a readchar key to its symbolic name.

    Raises:
        KeyboardInterrupt: On Ctrl+C, which raw input delivers as a character.
    """
    if key == readchar.key.CTRL_C:
        raise KeyboardInterrupt
    return _KEY_NAMES.get(key, key)


def _set_cbreak(fd: int) -> None:
    """Apply cbreak settings: no echo, no canonical mode, ISIG kept for Ctrl+C."""
    new = termios.tcgetattr(fd)
    new[3] &= ~(termios.ICANON | termios.ECHO | termios.IEXTEN)
    new[1] &= ~(termios.IXON | termios.ICRNL | termios.INLCR | termios.IGNCR)
    new[6][termios.VMIN] = 1
    new[6][termios.VTIME] = 0
    termios.tcsetattr(fd, termios.TCSANOW, new)


def _read_char(stream: TextIO) -> str:
    char = stream.read(1)
    if not char:
        raise EOFError("input closed while waiting for a key")
    return char


def _read_key_from(stream: TextIO) -> str:
    """Read one key, including a whole ANSI escape sequence, from a stream.

    Follows readchar's POSIX decoding: ESC, then an optional ``[``/``O``
    introducer, then up to three more sequence characters.
    """
    key = _read_char(stream)
    if key != "\x1b":
        return key
    key += _read_char(stream)
    if key[-1] not in "\x4f\x5b":
        return key
    key += _read_char(stream)
    if key[-1] not in "\x31\x32\x33\x35\x36":
        return key
    key += _read_char(stream)
    if key[-1] not in "\x30\x31\x33\x34\x35\x37\x38\x39":
        return key
    return key + _read_char(stream)


class Terminal:
    """Writes escape sequences to a stream and reads lines or keys.

    Every write is flushed immediately so the screen always matches
    what the prompts believe they painted.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def hide_cursor(self) -> None:
        self.write(HIDE_CURSOR)

    def show_cursor(self) -> None:
        self.write(SHOW_CURSOR)

    def move_to_column_start(self) -> None:
        self.write(COLUMN_START)

    def move_up(self, lines: int = 1) -> None:
        self.write(CURSOR_UP * lines)

    def clear_line(self) -> None:
        self.write(CLEAR_LINE)

    def clear_screen(self) -> None:
        self.write(CLEAR_SCREEN)

    def read_line(self) -> str:
        """Read one line in cooked mode. EOF reads as an empty line."""
        return self.stdin.readline().rstrip("\r\n")

    def _tty_fd(self) -> Optional[int]:
        if termios is None:
            return None
        try:
            fd = self.stdin.fileno()
        except (AttributeError, OSError, ValueError):
            return None
        return fd if self.stdin.isatty() else None

    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        """Switch stdin to cbreak mode for the duration of the block.

        The saved terminal attributes are restored on every exit path.
        Streams that are not a POSIX tty are left alone.
        """
        fd = self._tty_fd()
        if fd is None:
            yield
            return

        saved = termios.tcgetattr(fd)
        try:
            _set_cbreak(fd)
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)

    def read_key(self) -> str:
        """Read one key from the input channel and normalize it.

        The process's stdin goes through readchar. An injected stream is
        decoded in place, so raw mode and key reads share one channel.
        """
        if self.stdin is sys.stdin:
            return normalize_key(readchar.readkey())
        return normalize_key(_read_key_from(self.stdin))
