"""
Command execution abstraction.

The runner never calls subprocess directly. It uses the provided executor
so that tests can inject canned results instead of running real commands.
"""

import subprocess
from dataclasses import dataclass
from typing import Mapping, Optional, Protocol

from .errors import SpawnError

DEFAULT_SHELL = "/bin/sh"


@dataclass
class RunResult:
    """Raw result of running a command. Output is kept as bytes until the runner decodes it."""

    stdout: bytes
    stderr: bytes
    returncode: int


class Executor(Protocol):
    """Protocol for command execution. Implementations may run commands or return canned results."""

    def __call__(self, command: str) -> RunResult:
        """Execute the shell command text. Returns stdout, stderr, returncode."""
        ...


def subprocess_executor(
    command: str,
    *,
    shell: str = DEFAULT_SHELL,
    cwd: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> RunResult:
    """
    Default implementation: run `shell -c command` and wait for it to exit.

    The command text is passed to the shell verbatim. Callers that build it
    from untrusted input must quote it themselves.
    """
    try:
        result = subprocess.run(
            [shell, "-c", command],
            capture_output=True,
            cwd=cwd,
            env=env,
        )
    except (OSError, ValueError) as exc:
        raise SpawnError(command, shell, str(exc)) from exc
    return RunResult(
        stdout=result.stdout or b"",
        stderr=result.stderr or b"",
        returncode=result.returncode,
    )


def make_executor(
    shell: str = DEFAULT_SHELL,
    cwd: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Executor:
    """Create an executor bound to a shell, working directory and environment."""
    def run(command: str) -> RunResult:
        return subprocess_executor(command, shell=shell, cwd=cwd, env=env)
    return run
