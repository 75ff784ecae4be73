"""Runs a list of steps in order and collects the answers."""

import dataclasses
from typing import Any, Mapping, Optional

from stepwise.core.steps import (
    Banner,
    ConfirmStep,
    SelectStep,
    StepConfig,
    TextStep,
    check_unique_names,
)
from stepwise.ui.base import RenderContext, TerminalIO
from stepwise.ui.menu import prompt_select
from stepwise.ui.prompts import prompt_confirm, prompt_text
from stepwise.ui.style import dim
from stepwise.utils.debug import debug_steps
from stepwise.utils.exceptions import UnknownStepTypeError


def seed_steps(
    steps: list[StepConfig],
    arguments: Mapping[str, Any],
    options: Mapping[str, Any],
) -> list[StepConfig]:
    """Copy steps with ``initial`` taken from parsed arguments or options.

    A step keeps its declared initial value when neither mapping holds
    a non-None value under its name.
    """
    seeded = []
    for step in steps:
        value = arguments.get(step.name)
        if value is None:
            value = options.get(step.name)
        if value is None:
            seeded.append(step)
        else:
            seeded.append(dataclasses.replace(step, initial=value))
    return seeded


def paint_banner(
    banner: Banner, terminal: TerminalIO, context: RenderContext
) -> None:
    """Clear the screen and paint the banner at the top."""
    terminal.clear_screen()
    context.reset()

    body = banner.render()
    terminal.write(body + "\n")
    context.advance(len(body.split("\n")))

    if banner.text:
        terminal.write(dim(banner.text) + "\n")
        context.advance(1)


def process_step(
    step: StepConfig,
    terminal: TerminalIO,
    context: RenderContext,
) -> Any:
    """Ask a single step's question and return its answer."""
    if isinstance(step, TextStep):
        initial = None if step.initial is None else str(step.initial)
        answer = prompt_text(
            step.message, initial, step.validate, terminal=terminal, context=context
        )
        return step.transform(answer) if step.transform else answer
    if isinstance(step, SelectStep):
        return prompt_select(
            step.message,
            step.choices,
            step.resolve_initial_index(),
            terminal=terminal,
            context=context,
        )
    if isinstance(step, ConfirmStep):
        return prompt_confirm(
            step.message, bool(step.initial), terminal=terminal, context=context
        )
    raise UnknownStepTypeError(step)


def run_steps(
    steps: list[StepConfig],
    banner: Optional[Banner] = None,
    *,
    terminal: Optional[TerminalIO] = None,
    context: Optional[RenderContext] = None,
) -> dict[str, Any]:
    """Run every step in declaration order.

    Args:
        steps: Steps to ask, with their initial values already seeded
        banner: Optional banner painted on a cleared screen first
        terminal: Terminal backend, a real one by default
        context: Row bookkeeping, a fresh one by default

    Returns:
        Answers keyed by step name

    Raises:
        InvalidArgumentError: For duplicate step names or bad select setup
        ValidationError: If a text answer is rejected
        UnknownStepTypeError: For a step of an unknown type
    """
    check_unique_names(steps)

    if terminal is None:
        from stepwise.ui.terminal import Terminal

        terminal = Terminal()
    if context is None:
        context = RenderContext()

    answers: dict[str, Any] = {}
    try:
        if banner is not None:
            paint_banner(banner, terminal, context)

        for step in steps:
            debug_steps("Running step", type=type(step).__name__)
            answers[step.name] = process_step(step, terminal, context)
    finally:
        terminal.show_cursor()

    debug_steps("All steps answered", count=len(answers), line=context.current_line)
    return answers
