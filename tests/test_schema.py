"""
Tests for the definition schema: discriminated unions and value handling.
"""

import pytest
from pydantic import TypeAdapter, ValidationError

from scriptvar.schema import (
    DynVal,
    FunctionSource,
    ListenScriptVar,
    PollScriptVar,
    ScriptVarDefinition,
    ShellSource,
    Span,
)

DEFINITION = TypeAdapter(ScriptVarDefinition)


def test_dynval_is_string_like():
    assert str(DynVal("hello")) == "hello"
    assert DynVal("a") == DynVal("a")
    assert DynVal("a") != DynVal("b")


def test_dynval_from_output_strips_newlines_only():
    assert str(DynVal.from_output("\n x \n\n")) == " x "


def test_poll_definition_from_dict():
    var = DEFINITION.validate_python({
        "kind": "poll",
        "name": "time",
        "command": {"kind": "shell", "span": {"lo": 0, "hi": 4, "file_id": 0}, "command": "date +%H:%M"},
        "interval": 10,
    })
    assert isinstance(var, PollScriptVar)
    assert isinstance(var.command, ShellSource)
    assert var.initial_value is None
    assert var.interval.total_seconds() == 10


def test_listen_definition_from_dict():
    var = DEFINITION.validate_python({
        "kind": "listen",
        "name": "music",
        "command": "playerctl --follow metadata",
        "initial_value": "",
    })
    assert isinstance(var, ListenScriptVar)
    assert var.initial_value == DynVal("")
    assert var.command_span == Span.dummy()


def test_listen_requires_initial_value():
    with pytest.raises(ValidationError):
        ListenScriptVar(name="music", command="playerctl")


def test_poll_requires_a_source():
    with pytest.raises(ValidationError):
        PollScriptVar(name="time")


def test_function_source_must_be_callable():
    with pytest.raises(ValidationError):
        FunctionSource(function="not callable")


def test_span_is_frozen():
    span = Span(lo=1, hi=2, file_id=0)
    with pytest.raises(ValidationError):
        span.lo = 5
