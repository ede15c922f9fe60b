"""
Handlers for the character-slicing primitives.

Each primitive removes one character from either end of a variable and
either prints it or stores it in a second variable. Indexing is by code
point. Slicing an empty variable is a contract violation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rbgn.core.commands.command import Command
from rbgn.core.commands.handler import ICommandHandler, NotYetPortable
from rbgn.core.commands.registry import command
from rbgn.core.common.exceptions import ContractViolationError

if TYPE_CHECKING:
    from rbgn.core.runtime.interpreter import Interpreter


def _require_value(command: Command, runtime: Interpreter, end: str) -> str:
    value = runtime.variables.get(command.arg1)
    if not value:
        raise ContractViolationError(
            f"{command.name}: cannot take the {end} character of empty "
            f"variable '{command.arg1}'",
            command_name=command.name,
            details={"variable": command.arg1},
        )
    return value


def take_first(command: Command, runtime: Interpreter) -> str:
    """Remove and return the first character of the variable in arg1."""
    value = _require_value(command, runtime, "first")
    runtime.variables.set(command.arg1, value[1:])
    return value[0]


def take_last(command: Command, runtime: Interpreter) -> str:
    """Remove and return the last character of the variable in arg1."""
    value = _require_value(command, runtime, "last")
    runtime.variables.set(command.arg1, value[:-1])
    return value[-1]


@command("FIRST")
class FirstHandler(NotYetPortable, ICommandHandler):
    """Prints and removes the first character of a variable."""

    @property
    def description(self) -> str:
        return "Print the first character of a variable and drop it"

    @property
    def format(self) -> str:
        return "FIRST <var>"

    @property
    def examples(self) -> list[str]:
        return ["STRGET word\nFIRST word\nDONE"]

    def interpret(self, command: Command, runtime: Interpreter) -> None:
        runtime.write(take_first(command, runtime) + "\n")


@command("STOREFIRST")
class StoreFirstHandler(NotYetPortable, ICommandHandler):
    @property
    def description(self) -> str:
        return "Move the first character of a variable into another variable"

    @property
    def format(self) -> str:
        return "STOREFIRST <var> <target>"

    def interpret(self, command: Command, runtime: Interpreter) -> None:
        value = _require_value(command, runtime, "first")
        runtime.variables.set(command.arg2, value[0])
        runtime.variables.set(command.arg1, value[1:])


@command("LAST")
class LastHandler(NotYetPortable, ICommandHandler):
    """Prints and removes the last character of a variable."""

    @property
    def description(self) -> str:
        return "Print the last character of a variable and drop it"

    @property
    def format(self) -> str:
        return "LAST <var>"

    def interpret(self, command: Command, runtime: Interpreter) -> None:
        runtime.write(take_last(command, runtime) + "\n")


@command("STORELAST")
class StoreLastHandler(NotYetPortable, ICommandHandler):
    @property
    def description(self) -> str:
        return "Move the last character of a variable into another variable"

    @property
    def format(self) -> str:
        return "STORELAST <var> <target>"

    def interpret(self, command: Command, runtime: Interpreter) -> None:
        value = _require_value(command, runtime, "last")
        runtime.variables.set(command.arg2, value[-1])
        runtime.variables.set(command.arg1, value[:-1])
