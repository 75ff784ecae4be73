"""Handler registry for command dispatch.

Maps each command name to the function that receives its answers.

Example:
    registry = HandlerRegistry()

    @registry.register("init")
    def init(answers):
        ...

    # Later, resolve the handler:
    handler = registry.resolve("init")
    handler({"name": "demo"})
"""

import importlib
from typing import Any, Callable, Iterable, Optional

from stepwise.utils.exceptions import HandlerResolutionError

Handler = Callable[[dict[str, Any]], Any]


class HandlerRegistry:
    """Registry of command handlers.

    Handlers may be plain functions or coroutine functions; the caller
    decides how to run what they return.
    """

    def __init__(self, handlers: Optional[dict[str, Handler]] = None):
        self._handlers: dict[str, Handler] = dict(handlers or {})

    def register(self, name: str):
        """Decorator to register a handler for a command.

        Args:
            name: The command name

        Returns:
            Decorator function that registers the handler
        """

        def decorator(handler: Handler) -> Handler:
            self.add(name, handler)
            return handler

        return decorator

    def add(self, name: str, handler: Handler) -> None:
        self._handlers[name] = handler

    def get(self, name: str) -> Optional[Handler]:
        return self._handlers.get(name)

    def resolve(self, name: str) -> Handler:
        """Get the handler for a command.

        Raises:
            HandlerResolutionError: If no handler is registered
        """
        handler = self._handlers.get(name)
        if handler is None:
            raise HandlerResolutionError(
                f"No handler registered for command {name!r}", command=name
            )
        return handler

    def names(self) -> list[str]:
        return list(self._handlers.keys())

    def clear(self) -> None:
        """Clear all registered handlers."""
        self._handlers.clear()

    @classmethod
    def from_module(cls, module_name: str, names: Iterable[str]) -> "HandlerRegistry":
        """Build a registry from the functions of a module.

        Each command resolves to the module attribute of the same name.

        Raises:
            HandlerResolutionError: If the module cannot be imported or
                lacks a callable for one of the names
        """
        try:
            module = importlib.import_module(module_name)
        except ImportError as exc:
            raise HandlerResolutionError(
                f"Cannot import handler module {module_name!r}: {exc}"
            ) from exc

        registry = cls()
        for name in names:
            handler = getattr(module, name, None)
            if not callable(handler):
                raise HandlerResolutionError(
                    f"Module {module_name!r} has no handler {name!r}", command=name
                )
            registry.add(name, handler)
        return registry
