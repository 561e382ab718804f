"""
Variable source resolver: decide how to obtain the first value of a script variable.

Only the initial value is handled here. Re-polling and listening after that
belong to the caller's scheduler.
"""

from typing import Optional, Tuple

from .diagnostics import build_failure_diagnostic, build_warning_diagnostic
from .errors import CommandExecutionError, DiagError, ScriptVarError, SourceEvaluationError
from .executor import Executor
from .runner import run_command
from .schema import Diagnostic, DynVal, FunctionSource, ListenScriptVar, ScriptVarDefinition, ShellSource, Span


def resolve_initial_value(
    definition: ScriptVarDefinition,
    executor: Optional[Executor] = None,
    encoding: Optional[str] = None,
) -> Tuple[DynVal, Optional[str]]:
    """
    Return (value, stderr) for a PollScriptVar or ListenScriptVar.

    A declared initial value always wins and no source is invoked. Otherwise a
    function source is called, or a shell source is run through the executor.
    """
    if isinstance(definition, ListenScriptVar):
        return definition.initial_value, None

    if definition.initial_value is not None:
        return definition.initial_value, None

    source = definition.command
    if isinstance(source, FunctionSource):
        try:
            return DynVal.model_validate(source.function()), None
        except Exception as exc:
            raise SourceEvaluationError(definition.name, exc) from exc

    try:
        return run_command(source.command, executor=executor, encoding=encoding)
    except CommandExecutionError as exc:
        raise DiagError(build_failure_diagnostic(source.span, definition.name, exc.stderr)) from exc
    except ScriptVarError as exc:
        raise DiagError(build_failure_diagnostic(source.span, definition.name, str(exc))) from exc


def definition_span(definition: ScriptVarDefinition) -> Span:
    """Span that diagnostics about this variable's command should point at."""
    if isinstance(definition, ListenScriptVar):
        return definition.command_span
    if isinstance(definition.command, ShellSource):
        return definition.command.span
    return definition.name_span


def stderr_note(definition: ScriptVarDefinition, stderr: Optional[str]) -> Optional[Diagnostic]:
    """Note-level diagnostic for a successful run that wrote to stderr, or None."""
    if not stderr:
        return None
    return build_warning_diagnostic(definition_span(definition), definition.name, stderr)
