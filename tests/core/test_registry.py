"""Tests for the handler registry."""

import pytest

from stepwise.core.registry import HandlerRegistry
from stepwise.utils.exceptions import HandlerResolutionError


def test_register_decorator_returns_handler():
    registry = HandlerRegistry()

    @registry.register("init")
    def init(answers):
        return answers

    assert registry.resolve("init") is init
    assert init({"a": 1}) == {"a": 1}


def test_add_and_names():
    registry = HandlerRegistry()
    registry.add("build", print)
    registry.add("deploy", print)

    assert registry.names() == ["build", "deploy"]


def test_constructor_accepts_mapping():
    registry = HandlerRegistry({"init": len})

    assert registry.get("init") is len
    assert registry.get("missing") is None


def test_resolve_missing_raises_typed_error():
    registry = HandlerRegistry()

    with pytest.raises(HandlerResolutionError) as exc_info:
        registry.resolve("deploy")

    assert exc_info.value.command == "deploy"


def test_clear():
    registry = HandlerRegistry({"init": len})
    registry.clear()

    assert registry.names() == []


def test_from_module_registers_functions():
    registry = HandlerRegistry.from_module("json", ["dumps", "loads"])

    import json

    assert registry.resolve("dumps") is json.dumps
    assert registry.resolve("loads") is json.loads


def test_from_module_missing_attribute():
    with pytest.raises(HandlerResolutionError) as exc_info:
        HandlerRegistry.from_module("json", ["dumps", "deploy"])

    assert exc_info.value.command == "deploy"


def test_from_module_non_callable_attribute():
    with pytest.raises(HandlerResolutionError):
        HandlerRegistry.from_module("json", ["__doc__"])


def test_from_module_import_failure():
    with pytest.raises(HandlerResolutionError, match="Cannot import"):
        HandlerRegistry.from_module("stepwise_no_such_module", ["init"])
