"""Terminal prompts: channel, line prompts and the select menu."""

from stepwise.ui.base import RenderContext, TerminalIO
from stepwise.ui.menu import Choice, MenuState, SelectMenu, prompt_select
from stepwise.ui.prompts import prompt_confirm, prompt_text
from stepwise.ui.terminal import Terminal

__all__ = [
    "Choice",
    "MenuState",
    "RenderContext",
    "SelectMenu",
    "Terminal",
    "TerminalIO",
    "prompt_confirm",
    "prompt_select",
    "prompt_text",
]
