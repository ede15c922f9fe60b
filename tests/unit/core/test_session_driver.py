"""Tests for running whole scripts through a session."""

import io
from unittest.mock import Mock

import pytest

from rbgn.core.common.exceptions import (
    ContractViolationError,
    UnknownCommandError,
    UnsupportedCommandError,
)
from rbgn.core.config.app_config import AppConfig
from rbgn.core.domain.run_mode import RunMode
from rbgn.core.runtime.interpreter import Interpreter
from rbgn.core.runtime.session import Session
from rbgn.core.runtime.transpiler import ShellTranspiler

SCRIPT = b"""- greet the user
READ name
ECHO name
"""


def test_interpret_session_runs_script(capsys) -> None:
    stdout = io.StringIO()
    session = Session(
        AppConfig(),
        RunMode.INTERPRET,
        io.BytesIO(SCRIPT),
        stdin=io.BytesIO(b"Ada\n"),
        stdout=stdout,
    )

    result = session.run()

    assert stdout.getvalue() == "Ada\n"
    assert result.mode is RunMode.INTERPRET
    assert result.lines_processed == 3
    assert result.commands_dispatched == 3
    assert result.output_path is None
    assert capsys.readouterr().out == ""


def test_compile_session_prints_tagged_lines() -> None:
    stdout = io.StringIO()
    session = Session(AppConfig(), RunMode.COMPILE, io.BytesIO(SCRIPT), stdout=stdout)

    session.run()

    assert stdout.getvalue() == 'HRO | read RUNTIME_name\nHRO | echo "$RUNTIME_name"\n'


def test_compile_session_writes_output_file(tmp_path) -> None:
    out = tmp_path / "greet.sh"
    stdout = io.StringIO()
    session = Session(
        AppConfig(), RunMode.COMPILE, io.BytesIO(SCRIPT), stdout=stdout, output_path=out
    )

    result = session.run()

    assert result.output_path == out
    assert stdout.getvalue() == ""
    assert out.read_text(encoding="utf-8").splitlines() == [
        "#!/usr/bin/env bash",
        "read RUNTIME_name",
        'echo "$RUNTIME_name"',
    ]


def test_compile_failure_leaves_no_output_file(tmp_path) -> None:
    out = tmp_path / "broken.sh"
    session = Session(
        AppConfig(),
        RunMode.COMPILE,
        io.BytesIO(b"READ x\nFIRST x\n"),
        stdout=io.StringIO(),
        output_path=out,
    )

    with pytest.raises(UnsupportedCommandError) as exc_info:
        session.run()

    assert exc_info.value.line_number == 2
    assert not out.exists()


def test_errors_are_tagged_with_script_line() -> None:
    session = Session(
        AppConfig(),
        RunMode.INTERPRET,
        io.BytesIO(b"STATIC_STR_VAR x a\n\nNOPE\n"),
        stdin=io.BytesIO(b""),
        stdout=io.StringIO(),
    )

    with pytest.raises(UnknownCommandError) as exc_info:
        session.run()

    assert exc_info.value.line_number == 3


def test_session_uses_configured_prefixes() -> None:
    config = AppConfig.model_validate(
        {"shell": {"variable_prefix": "S_", "console_prefix": "> "}}
    )
    stdout = io.StringIO()

    Session(config, RunMode.COMPILE, io.BytesIO(b"ECHO v\n"), stdout=stdout).run()

    assert stdout.getvalue() == '> echo "$S_v"\n'


def test_session_uses_configured_const_prefix() -> None:
    config = AppConfig.model_validate({"runtime": {"const_prefix": "K_"}})
    session = Session(
        config,
        RunMode.INTERPRET,
        io.BytesIO(b"CONST_SET pi 3.14\n"),
        stdin=io.BytesIO(b""),
        stdout=io.StringIO(),
    )

    session.run()

    assert session.variables.snapshot() == {"K_pi": "3.14"}


def test_session_passes_sleep_to_interpreter() -> None:
    sleep = Mock()
    session = Session(
        AppConfig(),
        RunMode.INTERPRET,
        io.BytesIO(b"WAIT 5\nSLEEP x\n"),
        stdin=io.BytesIO(b""),
        stdout=io.StringIO(),
        sleep=sleep,
    )

    with pytest.raises(ContractViolationError) as exc_info:
        session.run()

    sleep.assert_called_once_with(5)
    assert exc_info.value.line_number == 2


def test_interpret_mode_ignores_output_path(tmp_path) -> None:
    out = tmp_path / "unused.sh"
    stdout = io.StringIO()
    session = Session(
        AppConfig(),
        RunMode.INTERPRET,
        io.BytesIO(b"STATIC_STR_VAR x hi\nECHO x\n"),
        stdin=io.BytesIO(b""),
        stdout=stdout,
        output_path=out,
    )

    result = session.run()

    assert stdout.getvalue() == "hi\n"
    assert result.output_path is None
    assert not out.exists()


@pytest.mark.parametrize(
    ("mode", "backend_type"),
    [(RunMode.INTERPRET, Interpreter), (RunMode.COMPILE, ShellTranspiler)],
)
def test_backend_follows_run_mode(mode: RunMode, backend_type: type) -> None:
    session = Session(
        AppConfig(),
        mode,
        io.BytesIO(b"ECHO x\n"),
        stdin=io.BytesIO(b""),
        stdout=io.StringIO(),
    )

    assert isinstance(session.backend, backend_type)
    assert session.run().commands_dispatched == 1
