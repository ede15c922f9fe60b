"""
Handlers for timing, options and no-op lines.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from rbgn.core.commands.command import Command
from rbgn.core.commands.handler import ICommandHandler
from rbgn.core.commands.registry import command
from rbgn.core.common.exceptions import ContractViolationError

if TYPE_CHECKING:
    from rbgn.core.runtime.interpreter import Interpreter
    from rbgn.core.runtime.transpiler import ShellTranspiler

logger = logging.getLogger(__name__)

_SECONDS = re.compile(r"\+?[0-9]+")
MAX_SECONDS = 2**64 - 1


def parse_seconds(command: Command) -> int:
    """Parse the duration argument of a sleep command.

    Raises:
        ContractViolationError: If the argument is not a non-negative integer
            or does not fit in 64 bits
    """
    if not _SECONDS.fullmatch(command.arg1):
        raise ContractViolationError(
            f"{command.name}: expected a non-negative number of seconds, "
            f"got '{command.arg1}'",
            command_name=command.name,
        )
    seconds = int(command.arg1)
    if seconds > MAX_SECONDS:
        raise ContractViolationError(
            f"{command.name}: duration '{command.arg1}' is out of range",
            command_name=command.name,
        )
    return seconds


@command("WAIT", "SLEEP", "SLEEP_SECS")
class SleepHandler(ICommandHandler):
    """Suspends the whole process for a number of seconds."""

    @property
    def description(self) -> str:
        return "Pause for the given number of seconds"

    @property
    def format(self) -> str:
        return "WAIT <seconds>"

    @property
    def examples(self) -> list[str]:
        return ["WAIT 1", "SLEEP 2", "SLEEP_SECS 3"]

    def interpret(self, command: Command, runtime: Interpreter) -> None:
        seconds = parse_seconds(command)
        logger.debug("Sleeping for %d seconds", seconds)
        try:
            runtime.sleep(seconds)
        except OverflowError as exc:
            # time.sleep caps below the 64-bit range on most platforms
            raise ContractViolationError(
                f"{command.name}: cannot sleep for {seconds} seconds: {exc}",
                command_name=command.name,
            ) from exc


@command("_OPT")
class OptionHandler(ICommandHandler):
    """Reserved for option directives; accepted and ignored."""

    @property
    def description(self) -> str:
        return "Option directive (ignored)"

    @property
    def format(self) -> str:
        return "_OPT <anything...>"

    def interpret(self, command: Command, runtime: Interpreter) -> None:
        logger.debug("Ignoring option directive: %s %s", command.arg1, command.arg2)


@command("")
class EmptyHandler(ICommandHandler):
    """Blank and comment lines."""

    @property
    def description(self) -> str:
        return "Comment or blank line"

    @property
    def format(self) -> str:
        return "- <comment>"

    def interpret(self, command: Command, runtime: Interpreter) -> None:
        return None

    def transpile(self, command: Command, target: ShellTranspiler) -> None:
        return None
