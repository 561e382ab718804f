"""
Errors raised while resolving script variables.

Nothing here is handled inside the package; every error reaches the caller
with the variable name or a diagnostic attached.
"""

from .schema import Diagnostic


class ScriptVarError(Exception):
    """Base class for all script variable errors."""


class SourceEvaluationError(ScriptVarError):
    """An in-process function source raised."""

    def __init__(self, var_name: str, cause: BaseException):
        self.var_name = var_name
        self.cause = cause
        super().__init__(f"Failed to compute initial value for {var_name}: {cause}")


class CommandExecutionError(ScriptVarError):
    """The shell exited with a nonzero status."""

    def __init__(self, stderr: str, returncode: int):
        self.stderr = stderr
        self.returncode = returncode
        super().__init__(f"Failed with output:\n{stderr}")


class DecodingError(ScriptVarError):
    """Process output was not valid text in the expected encoding."""

    def __init__(self, stream: str, encoding: str):
        self.stream = stream
        self.encoding = encoding
        super().__init__(f"Command {stream} is not valid {encoding} text")


class SpawnError(ScriptVarError):
    """The operating system could not start the shell."""

    def __init__(self, command: str, shell: str, reason: str = ""):
        self.command = command
        self.shell = shell
        msg = f"Could not run {shell!r} for command {command!r}"
        super().__init__(f"{msg}: {reason}" if reason else msg)


class DiagError(ScriptVarError):
    """Carries a Diagnostic for the caller's reporting backend."""

    def __init__(self, diagnostic: Diagnostic):
        self.diagnostic = diagnostic
        super().__init__(diagnostic.message)
