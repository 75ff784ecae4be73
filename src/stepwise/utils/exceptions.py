"""Custom exceptions for stepwise.

This module defines a hierarchy of exceptions for different error types:
- StepwiseError: Base exception for all stepwise errors
- InvalidArgumentError: Bad arguments passed to a prompt or the command builder
- ValidationError: User input rejected by a step validator
- UnknownStepTypeError: A step that is not a text, select or confirm step
- HandlerResolutionError: No handler registered for a command
- ConfigurationError: Configuration related errors
"""

from typing import Any, Optional


class StepwiseError(Exception):
    """Base exception for all stepwise errors.

    All stepwise-specific exceptions inherit from this class, allowing
    callers to catch all stepwise errors with a single except clause.
    """

    pass


class InvalidArgumentError(StepwiseError, ValueError):
    """Invalid arguments for a prompt or command definition.

    Raised before anything is written to the terminal, such as:
    - An empty choice list
    - An initial index outside the choice list
    - A malformed option flag
    - Duplicate step names
    """

    pass


class ValidationError(StepwiseError):
    """User input failed a step validator.

    The message is the string the validator returned.
    """

    pass


class UnknownStepTypeError(StepwiseError, AssertionError):
    """A step that is none of the known step types.

    Only reachable with a malformed step list.

    Attributes:
        step: The offending step object
    """

    def __init__(self, step: Any):
        super().__init__(f"Unknown step type: {type(step).__name__}")
        self.step = step


class HandlerResolutionError(StepwiseError):
    """No handler could be resolved for a command.

    Attributes:
        command: Name of the command being resolved
    """

    def __init__(self, message: str, command: Optional[str] = None):
        super().__init__(message)
        self.command = command


class ConfigurationError(StepwiseError):
    """Configuration related errors.

    Raised when configuration is invalid, such as:
    - An empty menu pointer
    - Invalid config format
    """

    pass
