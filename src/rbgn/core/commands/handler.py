"""
Defines the interface for command handlers.

A handler owns one script command in both run modes: `interpret()` performs
the command's effect and `transpile()` emits the equivalent shell source.
Declaring a command therefore always touches both modes at once; a mode the
command does not support is expressed by leaving the default in place.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from rbgn.core.commands.command import Command
from rbgn.core.common.exceptions import UnknownCommandError, UnsupportedCommandError

if TYPE_CHECKING:
    from rbgn.core.runtime.interpreter import Interpreter
    from rbgn.core.runtime.transpiler import ShellTranspiler


class ICommandHandler(ABC):
    """
    Interface for a command handler.
    """

    @property
    @abstractmethod
    def description(self) -> str:
        """A short description of the command."""

    @property
    @abstractmethod
    def format(self) -> str:
        """The format of the command."""

    @property
    def examples(self) -> list[str]:
        """A list of examples of how to use the command."""
        return []

    def interpret(self, command: Command, runtime: Interpreter) -> None:
        """
        Performs the command.

        Args:
            command: The command to perform.
            runtime: The interpreter holding the variables and I/O.

        Raises:
            UnknownCommandError: If the command has no interpreter semantics.
        """
        raise UnknownCommandError(command.name)

    def transpile(self, command: Command, target: ShellTranspiler) -> None:
        """
        Emits the shell source equivalent to the command.

        Args:
            command: The command to translate.
            target: The transpiler collecting shell lines.

        Raises:
            UnknownCommandError: If the command has no shell translation.
        """
        raise UnknownCommandError(
            command.name,
            message=f"Unknown command '{command.name}' "
            "(maybe you want to interpret with -i)",
        )


class NotYetPortable:
    """Mixin for commands planned for the shell target but not built yet."""

    def transpile(self, command: Command, target: ShellTranspiler) -> None:
        raise UnsupportedCommandError(command.name)
