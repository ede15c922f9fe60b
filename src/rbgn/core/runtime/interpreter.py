"""
Script interpreter.

The interpreter executes one command at a time against a `VariableStore`
and standard input/output. Loop commands pull their bodies straight from the
script reader, buffer them in memory and replay them, because the reader is
forward-only and cannot seek back.

Loops do not nest: the first ``DONE`` after a loop command always closes
that loop, even if an inner loop command was opened in between.
"""

from __future__ import annotations

import logging
import sys
import time
from collections.abc import Callable
from typing import TextIO

from rbgn.core.commands.command import Command
from rbgn.core.commands.handler import ICommandHandler
from rbgn.core.commands.parser import CommandParser
from rbgn.core.commands.registry import build_handler_table
from rbgn.core.common.exceptions import MalformedInputError, UnknownCommandError
from rbgn.core.common.logging_utils import get_logger
from rbgn.core.domain.variable_store import VariableStore
from rbgn.core.io.line_reader import LineReader

logger = logging.getLogger(__name__)
event_log = get_logger(__name__)

LOOP_SENTINEL = "DONE"


class Interpreter:
    """Executes script commands directly."""

    def __init__(
        self,
        variables: VariableStore,
        script: LineReader,
        stdin: LineReader,
        stdout: TextIO | None = None,
        *,
        sleep: Callable[[float], None] = time.sleep,
        parser: CommandParser | None = None,
    ) -> None:
        """
        Initializes the interpreter.

        Args:
            variables: The store the script reads and writes.
            script: Reader over the script; loop bodies are pulled from it.
            stdin: Reader over interactive input, consumed by READ.
            stdout: Output stream, sys.stdout when omitted.
            sleep: Callable used by the sleep commands.
            parser: Parser for buffered loop lines.
        """
        self.variables = variables
        self.script = script
        self.stdin = stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.sleep = sleep
        self.parser = parser or CommandParser()
        self.commands_dispatched = 0
        self._handlers: dict[str, ICommandHandler] = build_handler_table()

    def run_line(self, line: str) -> None:
        self.execute(self.parser.parse(line))

    def execute(self, command: Command) -> None:
        """
        Dispatches a single command.

        Raises:
            UnknownCommandError: If no handler is registered for the name.
            RbgnError: Any fatal error raised by the handler.
        """
        handler = self._handlers.get(command.name)
        if handler is None:
            raise UnknownCommandError(command.name)

        if logger.isEnabledFor(logging.DEBUG):
            event_log.debug(
                "command.dispatch",
                command=command.name,
                arg1=command.arg1,
                arg2=command.arg2,
                line_number=self.script.line_number,
            )

        handler.interpret(command, self)
        self.commands_dispatched += 1

    def read_block(self) -> list[str]:
        """
        Buffers the lines of a loop body.

        Reads from the script up to the next line equal to ``DONE``. The
        sentinel is consumed and not included. Reaching the end of the
        script also closes the block.

        Returns:
            The trimmed body lines, in script order.
        """
        block: list[str] = []
        start_line = self.script.line_number
        while (line := self.script.next_line()) is not None:
            trimmed = line.strip()
            if trimmed == LOOP_SENTINEL:
                logger.debug(
                    "Buffered loop block of %d lines starting after line %d",
                    len(block),
                    start_line,
                )
                return block
            block.append(trimmed)

        logger.warning(
            "Loop opened after line %d has no %s; the block runs to the end of the script",
            start_line,
            LOOP_SENTINEL,
        )
        return block

    def replay_block(self, block: list[str], predicate: Callable[[], bool]) -> int:
        """
        Runs a buffered block repeatedly.

        Args:
            block: Lines captured by `read_block`.
            predicate: Checked before every pass; the loop ends when it
                returns False.

        Returns:
            The number of completed passes.
        """
        passes = 0
        while predicate():
            for line in block:
                self.run_line(line)
            passes += 1
        return passes

    def read_input_line(self) -> str:
        """
        Reads one line of interactive input with trailing whitespace removed.

        Raises:
            MalformedInputError: If the input is exhausted.
        """
        line = self.stdin.next_line()
        if line is None:
            raise MalformedInputError(
                f"Unexpected end of input on {self.stdin.name} while executing READ",
                details={"source": self.stdin.name},
            )
        return line.rstrip()

    def write(self, text: str) -> None:
        self.stdout.write(text)

    def flush(self) -> None:
        self.stdout.flush()
