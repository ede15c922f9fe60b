import io
from collections.abc import Callable
from dataclasses import dataclass, field
from unittest.mock import Mock

import pytest

from rbgn.core.domain.variable_store import VariableStore
from rbgn.core.io.line_reader import LineReader
from rbgn.core.runtime.interpreter import Interpreter


class FlushCountingStream(io.StringIO):
    """StringIO that records how often it was flushed."""

    def __init__(self) -> None:
        super().__init__()
        self.flushes = 0

    def flush(self) -> None:
        self.flushes += 1
        super().flush()


@dataclass
class ScriptRun:
    interpreter: Interpreter
    stdout: FlushCountingStream
    sleep: Mock = field(default_factory=Mock)

    @property
    def output(self) -> str:
        return self.stdout.getvalue()

    @property
    def variables(self) -> VariableStore:
        return self.interpreter.variables


def script_reader(lines: list[str], name: str = "<test>") -> LineReader:
    return LineReader(io.StringIO("".join(f"{line}\n" for line in lines)), name=name)


@pytest.fixture
def make_interpreter() -> Callable[..., ScriptRun]:
    """Build an interpreter over an in-memory script and stdin."""

    def _make(lines: list[str] | None = None, stdin: str = "") -> ScriptRun:
        sleep = Mock()
        stdout = FlushCountingStream()
        interpreter = Interpreter(
            VariableStore(),
            script_reader(lines or []),
            LineReader(io.StringIO(stdin), name="<stdin>"),
            stdout,
            sleep=sleep,
        )
        return ScriptRun(interpreter=interpreter, stdout=stdout, sleep=sleep)

    return _make


@pytest.fixture
def run_script(make_interpreter: Callable[..., ScriptRun]) -> Callable[..., ScriptRun]:
    """Interpret a whole script the way the session driver does."""

    def _run(lines: list[str], stdin: str = "") -> ScriptRun:
        run = make_interpreter(lines, stdin)
        for line in run.interpreter.script:
            run.interpreter.run_line(line)
        return run

    return _run
