import logging

import pytest

from rbgn.core.commands.command import Command
from rbgn.core.common.exceptions import UnknownCommandError


def test_execute_counts_dispatched_commands(run_script) -> None:
    run = run_script(["STATIC_STR_VAR x 1", "- comment", "ECHO x"])

    assert run.interpreter.commands_dispatched == 3


def test_unknown_command_is_not_counted(make_interpreter) -> None:
    run = make_interpreter()

    with pytest.raises(UnknownCommandError, match="Unknown command 'NOPE'"):
        run.interpreter.execute(Command("NOPE"))
    assert run.interpreter.commands_dispatched == 0


def test_read_block_stops_at_sentinel(make_interpreter) -> None:
    run = make_interpreter(["ECHO a", " ECHO b ", "DONE", "ECHO c"])

    block = run.interpreter.read_block()

    assert block == ["ECHO a", "ECHO b"]
    assert run.interpreter.script.next_line() == "ECHO c"


def test_read_block_only_matches_exact_sentinel(make_interpreter) -> None:
    run = make_interpreter(["DONE now", "done", "DONE"])

    assert run.interpreter.read_block() == ["DONE now", "done"]


def test_replay_block_reevaluates_predicate_each_pass(make_interpreter) -> None:
    run = make_interpreter()
    run.variables.set("x", "abc")

    passes = run.interpreter.replay_block(
        ["FIRST x"], lambda: run.variables.get("x") != ""
    )

    assert passes == 3
    assert run.output == "a\nb\nc\n"


def test_replay_block_with_false_predicate_runs_nothing(make_interpreter) -> None:
    run = make_interpreter()

    assert run.interpreter.replay_block(["ECHO x"], lambda: False) == 0
    assert run.output == ""


def test_debug_dispatch_logging_stays_off_stdout(run_script, caplog, capsys) -> None:
    caplog.set_level(logging.DEBUG)

    run = run_script(["STATIC_STR_VAR x hi", "ECHO x"])

    assert run.output == "hi\n"
    assert capsys.readouterr().out == ""
    assert "command.dispatch" in caplog.text
