"""
Handlers for the looping constructs.

Both loops buffer the lines up to the next ``DONE`` and replay them; they
differ only in the condition checked before each pass.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rbgn.core.commands.command import Command
from rbgn.core.commands.handler import ICommandHandler, NotYetPortable
from rbgn.core.commands.registry import command

if TYPE_CHECKING:
    from rbgn.core.runtime.interpreter import Interpreter

logger = logging.getLogger(__name__)


@command("FOREVER")
class ForeverHandler(ICommandHandler):
    """Replays its block until the process is interrupted."""

    @property
    def description(self) -> str:
        return "Repeat the following block forever"

    @property
    def format(self) -> str:
        return "FOREVER\n<commands...>\nDONE"

    def interpret(self, command: Command, runtime: Interpreter) -> None:
        block = runtime.read_block()
        if not block:
            logger.warning("FOREVER loop has an empty body and will spin until interrupted")
        runtime.replay_block(block, lambda: True)


@command("STRGET")
class StringGetHandler(NotYetPortable, ICommandHandler):
    """Replays its block while a variable is non-empty."""

    @property
    def description(self) -> str:
        return "Repeat the following block while a variable is not empty"

    @property
    def format(self) -> str:
        return "STRGET <var>\n<commands...>\nDONE"

    @property
    def examples(self) -> list[str]:
        return ["STRGET word\nFIRST word\nDONE"]

    def interpret(self, command: Command, runtime: Interpreter) -> None:
        variable = command.arg1
        block = runtime.read_block()
        runtime.replay_block(block, lambda: runtime.variables.get(variable) != "")
