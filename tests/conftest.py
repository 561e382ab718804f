import pytest

from scriptvar.executor import RunResult


class RecordingExecutor:
    """Executor that returns a canned result and records every command it was asked to run."""

    def __init__(self, result: RunResult):
        self.result = result
        self.commands = []

    def __call__(self, command):
        self.commands.append(command)
        return self.result


@pytest.fixture
def make_recording_executor():
    def make(stdout=b"", stderr=b"", returncode=0):
        return RecordingExecutor(RunResult(stdout=stdout, stderr=stderr, returncode=returncode))
    return make
