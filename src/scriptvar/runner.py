"""
Command runner: run one shell command and turn its output into a DynVal.
"""

import locale
import logging
from typing import Optional, Tuple

from .errors import CommandExecutionError, DecodingError
from .executor import Executor, subprocess_executor
from .schema import DynVal

logger = logging.getLogger(__name__)


def _decode(data: bytes, stream: str, encoding: str) -> str:
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as exc:
        raise DecodingError(stream, encoding) from exc


def run_command(
    command: str,
    executor: Optional[Executor] = None,
    encoding: Optional[str] = None,
) -> Tuple[DynVal, Optional[str]]:
    """
    Run a command and return (value, stderr).

    Exit status alone decides failure: a nonzero exit raises
    CommandExecutionError with the captured stderr. A successful run that
    wrote to stderr returns that text as the second element, otherwise None.
    The command is passed to the shell verbatim; quoting untrusted input is
    the caller's job.
    """
    if executor is None:
        executor = subprocess_executor
    if encoding is None:
        encoding = locale.getpreferredencoding(False)

    logger.debug("Running command: %s", command)
    result = executor(command)

    if result.returncode != 0:
        raise CommandExecutionError(_decode(result.stderr, "stderr", encoding), result.returncode)
    err_output = _decode(result.stderr, "stderr", encoding) if result.stderr else None

    output = _decode(result.stdout, "stdout", encoding)
    return DynVal.from_output(output), err_output
