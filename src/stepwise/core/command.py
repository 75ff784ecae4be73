"""Fluent command builder on top of click.

Collects a command's name, description, version, positional arguments
and ``--flag value`` options, then turns them into a click command for
parsing and dispatch.

Example:
    program = Command().name("tool").version("1.0.0")
    init = program.command("init").description("Create a project")
    init.argument("[name]", "Project name")
    init.option("--template <template>", "Starter template", ["basic", "full"])
    init.action(lambda arguments, options: ...)
    program.parse(["init", "demo", "--template", "full"])
"""

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import click

from stepwise.utils.debug import debug_command
from stepwise.utils.exceptions import InvalidArgumentError

Action = Callable[[dict[str, Any], dict[str, Any]], Any]

_OPTION_NAME = re.compile(r"--([^<\s]+)")


@dataclass
class ArgumentSpec:
    name: str
    description: str
    required: bool = True


@dataclass
class OptionSpec:
    name: str
    description: str
    choices: Optional[list[str]] = None


@dataclass
class CommandSpec:
    """Everything accumulated by a Command builder."""

    name: str = ""
    description: str = ""
    version: str = ""
    arguments: list[ArgumentSpec] = field(default_factory=list)
    options: list[OptionSpec] = field(default_factory=list)
    action: Optional[Action] = None
    subcommands: list["Command"] = field(default_factory=list)


class Command:
    """Builder for one command and its subcommands.

    Every setter returns the builder so calls can be chained.
    """

    def __init__(self, name: str = ""):
        self.spec = CommandSpec(name=name)

    def name(self, name: str) -> "Command":
        self.spec.name = name
        return self

    def description(self, description: str) -> "Command":
        self.spec.description = description
        return self

    def version(self, version: str) -> "Command":
        self.spec.version = version
        return self

    def argument(self, name: str, description: str = "") -> "Command":
        """Declare a positional argument.

        ``[name]`` is optional, ``<name>`` or a bare ``name`` is required.
        """
        clean = name.strip("[]<>")
        if not clean:
            raise InvalidArgumentError(f"Invalid argument name: {name}")
        self.spec.arguments.append(
            ArgumentSpec(clean, description, required=not name.startswith("["))
        )
        return self

    def option(
        self,
        flag: str,
        description: str = "",
        choices: Optional[list[str]] = None,
    ) -> "Command":
        """Declare a ``--name <value>`` option.

        Raises:
            InvalidArgumentError: If the flag has no ``--name`` part
        """
        match = _OPTION_NAME.search(flag)
        if not match:
            raise InvalidArgumentError(f"Invalid option flag: {flag}")
        self.spec.options.append(OptionSpec(match.group(1), description, choices))
        return self

    def action(self, handler: Action) -> "Command":
        """Set the function called with ``(arguments, options)``."""
        self.spec.action = handler
        return self

    def command(self, name: str) -> "Command":
        """Add and return a subcommand builder."""
        child = Command(name)
        self.spec.subcommands.append(child)
        return child

    def _build_params(self) -> tuple[list[click.Parameter], dict[str, str]]:
        params: list[click.Parameter] = []
        # click parameter name -> declared name
        names: dict[str, str] = {}
        for arg in self.spec.arguments:
            param = click.Argument([arg.name], required=arg.required)
            params.append(param)
            names[param.name] = arg.name
        for opt in self.spec.options:
            decls = [f"--{opt.name}"]
            if opt.name.isidentifier():
                decls.append(opt.name)
            param = click.Option(
                decls,
                help=opt.description,
                metavar=f"<{opt.name}>",
                type=click.Choice(opt.choices) if opt.choices else click.STRING,
            )
            params.append(param)
            names[param.name] = opt.name
        return params, names

    def _make_callback(self, names: dict[str, str]):
        argument_names = {arg.name for arg in self.spec.arguments}

        def callback(**kwargs):
            arguments: dict[str, Any] = {}
            options: dict[str, Any] = {}
            for param_name, value in kwargs.items():
                name = names.get(param_name, param_name)
                if name in argument_names:
                    arguments[name] = value
                else:
                    options[name] = value
            debug_command(
                "Parsed", command=self.spec.name, arguments=arguments, options=options
            )
            if self.spec.action is None:
                return None
            return self.spec.action(arguments, options)

        return callback

    def to_click(self) -> click.Command:
        """Build the click command (a group when there are subcommands)."""
        params, names = self._build_params()
        kwargs = {
            "name": self.spec.name or None,
            "params": params,
            "help": self.spec.description or None,
        }

        if self.spec.subcommands:
            cmd: click.Command = click.Group(
                commands=[child.to_click() for child in self.spec.subcommands],
                callback=self._make_callback(names) if self.spec.action else None,
                **kwargs,
            )
        else:
            cmd = click.Command(callback=self._make_callback(names), **kwargs)

        if self.spec.version:
            cmd = click.version_option(
                self.spec.version, prog_name=self.spec.name or None
            )(cmd)
        return cmd

    def parse(self, argv: Optional[list[str]] = None, standalone_mode: bool = True):
        """Parse argv (``sys.argv[1:]`` by default) and run the matching action."""
        return self.to_click().main(
            args=argv,
            prog_name=self.spec.name or None,
            standalone_mode=standalone_mode,
        )
