"""
Handlers that assign variables and named constants.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rbgn.core.commands.command import Command
from rbgn.core.commands.handler import ICommandHandler
from rbgn.core.commands.registry import command

if TYPE_CHECKING:
    from rbgn.core.runtime.interpreter import Interpreter
    from rbgn.core.runtime.transpiler import ShellTranspiler


@command("STATIC_STR_VAR")
class StaticStringHandler(ICommandHandler):
    """Assigns a literal string to a variable.

    The literal is everything after the variable name, taken as-is.
    """

    @property
    def description(self) -> str:
        return "Set a variable to a literal string"

    @property
    def format(self) -> str:
        return "STATIC_STR_VAR <var> <text...>"

    @property
    def examples(self) -> list[str]:
        return ["STATIC_STR_VAR greeting hello world"]

    def interpret(self, command: Command, runtime: Interpreter) -> None:
        runtime.variables.set(command.arg1, command.arg2)


@command("STATIC_STR_SPACE")
class StaticSpaceHandler(ICommandHandler):
    # A literal space cannot be written as an argument, so it gets its own command.

    @property
    def description(self) -> str:
        return "Set a variable to a single space"

    @property
    def format(self) -> str:
        return "STATIC_STR_SPACE <var>"

    def interpret(self, command: Command, runtime: Interpreter) -> None:
        runtime.variables.set(command.arg1, " ")


@command("CONST_SET")
class ConstSetHandler(ICommandHandler):
    @property
    def description(self) -> str:
        return "Define a named constant"

    @property
    def format(self) -> str:
        return "CONST_SET <name> <text...>"

    def interpret(self, command: Command, runtime: Interpreter) -> None:
        runtime.variables.set_const(command.arg1, command.arg2)


@command("CONST_WRITE")
class ConstWriteHandler(ICommandHandler):
    @property
    def description(self) -> str:
        return "Copy a named constant into a variable"

    @property
    def format(self) -> str:
        return "CONST_WRITE <name> <var>"

    def interpret(self, command: Command, runtime: Interpreter) -> None:
        runtime.variables.set(command.arg2, runtime.variables.get_const(command.arg1))


@command("COPY")
class CopyHandler(ICommandHandler):
    """Copies one variable into another.

    Only the shell target implements COPY; the interpreter reports it as an
    unknown command.
    """

    @property
    def description(self) -> str:
        return "Copy a variable into another variable (compile mode only)"

    @property
    def format(self) -> str:
        return "COPY <target> <source>"

    def transpile(self, command: Command, target: ShellTranspiler) -> None:
        target.emit(
            f'{target.shell_var(command.arg1)}="${target.shell_var(command.arg2)}"'
        )
