"""Text decoration for prompt markers.

Pure string transforms: each helper wraps text in the ANSI codes of a
rich style, or returns it untouched when colour is disabled.
"""

from functools import lru_cache

from rich.color import ColorSystem
from rich.style import Style

from stepwise.utils.config import get_config


@lru_cache(maxsize=None)
def _style(name: str) -> Style:
    return Style.parse(name)


def decorate(text: str, style: str) -> str:
    """Wrap text in the escape codes for a rich style definition."""
    if not get_config().use_color:
        return text
    return _style(style).render(text, color_system=ColorSystem.STANDARD)


def cyan(text: str) -> str:
    return decorate(text, "cyan")


def green(text: str) -> str:
    return decorate(text, "green")


def dim(text: str) -> str:
    return decorate(text, "dim")
