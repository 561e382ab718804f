"""
Script variable schema.

Strongly typed contract between the configuration parser and this package.
Definitions arrive fully parsed; values and diagnostics flow back out.
"""

from datetime import timedelta
from enum import Enum
from typing import Annotated, Callable, Literal, Optional, Tuple, Union

from pydantic import BaseModel, Field, RootModel


# --- Source locations ---


class Span(BaseModel):
    """Byte range into a configuration file."""

    lo: int
    hi: int
    file_id: int

    model_config = {"frozen": True}

    @classmethod
    def dummy(cls) -> "Span":
        """Placeholder for definitions that were not read from a file."""
        return cls(lo=0, hi=0, file_id=0)


# --- Values ---


class DynVal(RootModel[str]):
    """Opaque value produced by a variable source. Always holds text."""

    model_config = {"frozen": True}

    @classmethod
    def from_output(cls, text: str) -> "DynVal":
        """Build a value from command output, dropping surrounding newlines only."""
        return cls(text.strip("\n"))

    def __str__(self) -> str:
        return self.root


# --- Sources ---


class FunctionSource(BaseModel):
    """In-process source. The callable returns a value or raises."""

    kind: Literal["function"] = "function"
    function: Callable[[], DynVal]


class ShellSource(BaseModel):
    """Shell command source, run through /bin/sh -c."""

    kind: Literal["shell"] = "shell"
    span: Span
    command: str


VarSource = Annotated[Union[FunctionSource, ShellSource], Field(discriminator="kind")]


# --- Definitions ---


class PollScriptVar(BaseModel):
    """Variable re-evaluated every `interval` by the caller's scheduler."""

    kind: Literal["poll"] = "poll"
    name: str
    initial_value: Optional[DynVal] = None
    command: VarSource
    interval: timedelta = timedelta(seconds=1)
    name_span: Span = Field(default_factory=Span.dummy)


class ListenScriptVar(BaseModel):
    """Variable fed by a long-running process; only the declared initial value is used here."""

    kind: Literal["listen"] = "listen"
    name: str
    command: str
    initial_value: DynVal
    command_span: Span = Field(default_factory=Span.dummy)
    name_span: Span = Field(default_factory=Span.dummy)


ScriptVarDefinition = Annotated[Union[PollScriptVar, ListenScriptVar], Field(discriminator="kind")]


# --- Diagnostics ---


class Severity(str, Enum):
    WARNING = "warning"
    NOTE = "note"


class Label(BaseModel):
    span: Span
    message: str

    model_config = {"frozen": True}


class Diagnostic(BaseModel):
    """
    A report about a variable definition. Pure data: any renderer that
    understands severities and span-anchored labels can consume it.
    """

    severity: Severity
    message: str
    label: Label
    notes: Tuple[str, ...] = ()

    model_config = {"frozen": True}

    @property
    def note(self) -> str:
        return self.notes[0] if self.notes else ""
