"""
Initial-value resolution for script variables, and the shell runner behind them.
"""

from .diagnostics import build_failure_diagnostic, build_warning_diagnostic
from .errors import (
    CommandExecutionError,
    DecodingError,
    DiagError,
    ScriptVarError,
    SourceEvaluationError,
    SpawnError,
)
from .executor import Executor, RunResult, make_executor, subprocess_executor
from .resolver import definition_span, resolve_initial_value, stderr_note
from .runner import run_command
from .schema import (
    Diagnostic,
    DynVal,
    FunctionSource,
    Label,
    ListenScriptVar,
    PollScriptVar,
    ScriptVarDefinition,
    Severity,
    ShellSource,
    Span,
)

__all__ = [
    "CommandExecutionError",
    "DecodingError",
    "DiagError",
    "Diagnostic",
    "DynVal",
    "Executor",
    "FunctionSource",
    "Label",
    "ListenScriptVar",
    "PollScriptVar",
    "RunResult",
    "ScriptVarDefinition",
    "ScriptVarError",
    "Severity",
    "ShellSource",
    "SourceEvaluationError",
    "Span",
    "SpawnError",
    "build_failure_diagnostic",
    "build_warning_diagnostic",
    "definition_span",
    "make_executor",
    "resolve_initial_value",
    "run_command",
    "stderr_note",
]
