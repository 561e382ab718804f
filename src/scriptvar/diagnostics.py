"""Diagnostics for script variables whose commands failed or wrote to stderr."""

from .schema import Diagnostic, Label, Severity, Span

DEFINED_HERE = "Defined here"


def build_failure_diagnostic(span: Span, var_name: str, error_text: str) -> Diagnostic:
    """The command exited unsuccessfully. Reported as a warning, not an error."""
    return Diagnostic(
        severity=Severity.WARNING,
        message=f"The script for the `{var_name}`-variable exited unsuccessfully",
        label=Label(span=span, message=DEFINED_HERE),
        notes=(error_text,),
    )


def build_warning_diagnostic(span: Span, var_name: str, error_text: str) -> Diagnostic:
    """The command succeeded but wrote to stderr."""
    return Diagnostic(
        severity=Severity.NOTE,
        message=f"The script for the `{var_name}`-variable had err output",
        label=Label(span=span, message=DEFINED_HERE),
        notes=(error_text,),
    )
