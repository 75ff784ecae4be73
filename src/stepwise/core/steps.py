"""Step and command definitions.

A command is a named list of steps. Each step asks one question and
stores its answer under the step's name.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Union

from stepwise.ui.menu import Choice
from stepwise.ui.prompts import Validator
from stepwise.utils.exceptions import InvalidArgumentError


@dataclass
class BaseStep:
    """Fields shared by every step.

    Attributes:
        name: Key of the answer in the answer record
        message: Question shown to the user
        description: Help text for the matching CLI argument/option
        initial: Default answer, usually seeded from the command line
    """

    name: str
    message: str
    description: Optional[str] = None
    initial: Any = None

    @property
    def help(self) -> str:
        return self.description or self.message


@dataclass
class TextStep(BaseStep):
    """Free text answer, optionally validated and transformed."""

    validate: Optional[Validator] = None
    transform: Optional[Callable[[str], Any]] = None


@dataclass
class SelectStep(BaseStep):
    """Single choice from a fixed list."""

    choices: list[Choice] = field(default_factory=list)
    initial_index: int = 0

    def resolve_initial_index(self) -> int:
        """Index to highlight first.

        The choice whose value (or its string form, as typed on the
        command line) equals ``initial`` wins over ``initial_index``.
        """
        if self.initial is None:
            return self.initial_index
        for index, choice in enumerate(self.choices):
            if choice.value == self.initial or str(choice.value) == str(self.initial):
                return index
        raise InvalidArgumentError(
            f"{self.initial!r} is not a valid choice for {self.name!r}"
        )

    def option_values(self) -> list[str]:
        return [str(choice.value) for choice in self.choices]


@dataclass
class ConfirmStep(BaseStep):
    """Yes/no answer."""


StepConfig = Union[TextStep, SelectStep, ConfirmStep]


@dataclass
class Banner:
    """Text painted on a cleared screen before the first step.

    Attributes:
        render: Returns the banner body, possibly several lines
        text: Optional caption printed below the body
        responsive: Accepted for compatibility; has no layout effect
    """

    render: Callable[[], str]
    text: Optional[str] = None
    responsive: bool = False


@dataclass
class CommandConfig:
    """One command: its help text, optional banner and steps."""

    description: str
    steps: list[StepConfig] = field(default_factory=list)
    banner: Optional[Banner] = None


@dataclass
class CLIConfig:
    """A whole program: name, version and commands by name."""

    name: str
    version: str
    commands: dict[str, CommandConfig] = field(default_factory=dict)


def check_unique_names(steps: list[StepConfig]) -> None:
    """Reject step lists in which two steps share a name."""
    seen = set()
    for step in steps:
        name = getattr(step, "name", None)
        if name is None:
            continue
        if name in seen:
            raise InvalidArgumentError(f"duplicate step name: {name!r}")
        seen.add(name)
