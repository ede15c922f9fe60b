"""Tests for variable and constant assignment commands."""

import pytest

from rbgn.core.commands.command import Command
from rbgn.core.common.exceptions import UnknownCommandError


@pytest.mark.parametrize(
    "value", ["", "plain", "two words", "  padded  ", "ümlaut", "$HOME \\n \"q\""]
)
def test_static_str_var_stores_literal_unchanged(make_interpreter, value: str) -> None:
    run = make_interpreter()

    run.interpreter.execute(Command("STATIC_STR_VAR", "x", value))

    assert run.variables.get("x") == value


def test_static_str_var_from_script_line(run_script) -> None:
    run = run_script(["STATIC_STR_VAR greeting hello  world"])

    assert run.variables.get("greeting") == "hello  world"


def test_static_str_var_overwrites(run_script) -> None:
    run = run_script(["STATIC_STR_VAR x one", "STATIC_STR_VAR x two"])

    assert run.variables.get("x") == "two"


def test_static_str_space(run_script) -> None:
    run = run_script(["STATIC_STR_SPACE sp", "NONL sp", "ECHO sp"])

    assert run.variables.get("sp") == " "
    assert run.output == "  \n"


def test_const_write_copies_constant_into_variable(run_script) -> None:
    run = run_script(["CONST_SET k value", "CONST_WRITE k y"])

    assert run.variables.get("y") == "value"


def test_constants_are_independent_of_same_named_variables(run_script) -> None:
    run = run_script(
        [
            "STATIC_STR_VAR k ordinary",
            "CONST_SET k constant",
            "STATIC_STR_VAR k changed",
            "CONST_WRITE k y",
        ]
    )

    assert run.variables.get("y") == "constant"
    assert run.variables.get("k") == "changed"


def test_unset_constant_writes_empty_string(run_script) -> None:
    run = run_script(["STATIC_STR_VAR y old", "CONST_WRITE missing y"])

    assert run.variables.get("y") == ""


def test_copy_is_unknown_when_interpreting(run_script) -> None:
    with pytest.raises(UnknownCommandError) as exc_info:
        run_script(["COPY a b"])

    assert exc_info.value.command_name == "COPY"
    assert exc_info.value.exit_code == 2
