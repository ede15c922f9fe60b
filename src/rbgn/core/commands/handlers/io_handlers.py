"""
Handlers for commands that talk to standard input and output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rbgn.core.commands.command import Command
from rbgn.core.commands.handler import ICommandHandler, NotYetPortable
from rbgn.core.commands.registry import command

if TYPE_CHECKING:
    from rbgn.core.runtime.interpreter import Interpreter
    from rbgn.core.runtime.transpiler import ShellTranspiler


@command("READ")
class ReadHandler(ICommandHandler):
    """Reads one line of interactive input into a variable."""

    @property
    def description(self) -> str:
        return "Read a line from standard input into a variable"

    @property
    def format(self) -> str:
        return "READ <var>"

    @property
    def examples(self) -> list[str]:
        return ["READ name"]

    def interpret(self, command: Command, runtime: Interpreter) -> None:
        runtime.variables.set(command.arg1, runtime.read_input_line())

    def transpile(self, command: Command, target: ShellTranspiler) -> None:
        target.emit(f"read {target.shell_var(command.arg1)}")


@command("ECHO")
class EchoHandler(ICommandHandler):
    """Prints a variable followed by a newline."""

    @property
    def description(self) -> str:
        return "Print a variable followed by a newline"

    @property
    def format(self) -> str:
        return "ECHO <var>"

    def interpret(self, command: Command, runtime: Interpreter) -> None:
        runtime.write(runtime.variables.get(command.arg1) + "\n")

    def transpile(self, command: Command, target: ShellTranspiler) -> None:
        target.emit(f'echo "${target.shell_var(command.arg1)}"')


@command("NONL")
class NoNewlineHandler(NotYetPortable, ICommandHandler):
    """Prints a variable without a newline and flushes immediately."""

    @property
    def description(self) -> str:
        return "Print a variable without a trailing newline"

    @property
    def format(self) -> str:
        return "NONL <var>"

    def interpret(self, command: Command, runtime: Interpreter) -> None:
        runtime.write(runtime.variables.get(command.arg1))
        runtime.flush()


@command("__RBGN_NONL")
class RawNoNewlineHandler(ICommandHandler):
    """Internal primitive: NONL without the flush."""

    @property
    def description(self) -> str:
        return "Print a variable without a trailing newline, without flushing"

    @property
    def format(self) -> str:
        return "__RBGN_NONL <var>"

    def interpret(self, command: Command, runtime: Interpreter) -> None:
        runtime.write(runtime.variables.get(command.arg1))


@command("__RBGN_FLUSH")
class FlushHandler(ICommandHandler):
    @property
    def description(self) -> str:
        return "Flush standard output"

    @property
    def format(self) -> str:
        return "__RBGN_FLUSH"

    def interpret(self, command: Command, runtime: Interpreter) -> None:
        runtime.flush()
