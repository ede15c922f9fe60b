"""
Shell transpiler.

Translates scripts into Bash. Dispatch goes through the same handler table
as the interpreter; each handler's `transpile()` emits the shell lines for
its command. Only a subset of commands is portable so far.
"""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TextIO

from rbgn.core.commands.command import Command
from rbgn.core.commands.handler import ICommandHandler
from rbgn.core.commands.parser import CommandParser
from rbgn.core.commands.registry import build_handler_table
from rbgn.core.common.exceptions import OutputWriteError, UnknownCommandError

logger = logging.getLogger(__name__)

DEFAULT_VARIABLE_PREFIX = "RUNTIME_"
DEFAULT_CONSOLE_PREFIX = "HRO | "
DEFAULT_SHEBANG = "#!/usr/bin/env bash"


class ShellEmitter(ABC):
    """Sink for generated shell lines."""

    def __init__(self) -> None:
        self.lines_emitted = 0

    @abstractmethod
    def emit(self, line: str) -> None:
        """Accept one line of shell source."""

    def close(self) -> None:
        """Finish the output. Called only after a successful compile."""


class ConsoleEmitter(ShellEmitter):
    """Prints every line as soon as it is generated, tagged with a prefix."""

    def __init__(
        self, stream: TextIO | None = None, prefix: str = DEFAULT_CONSOLE_PREFIX
    ) -> None:
        super().__init__()
        self.stream = stream if stream is not None else sys.stdout
        self.prefix = prefix

    def emit(self, line: str) -> None:
        self.stream.write(f"{self.prefix}{line}\n")
        self.lines_emitted += 1


class FileEmitter(ShellEmitter):
    """Collects lines and writes a complete script on close.

    Nothing is written if the compile fails before `close()`.
    """

    def __init__(self, path: str | Path, shebang: str = DEFAULT_SHEBANG) -> None:
        super().__init__()
        self.path = Path(path)
        self.shebang = shebang
        self.lines: list[str] = []

    def emit(self, line: str) -> None:
        self.lines.append(line)
        self.lines_emitted += 1

    def render(self) -> str:
        header = [self.shebang] if self.shebang else []
        return "\n".join(header + self.lines) + "\n"

    def close(self) -> None:
        try:
            self.path.write_text(self.render(), encoding="utf-8")
        except OSError as exc:
            raise OutputWriteError(
                f"Failed to write compiled script to {self.path}: {exc}",
                details={"path": str(self.path)},
            ) from exc
        logger.info("Wrote %d shell lines to %s", self.lines_emitted, self.path)


class ShellTranspiler:
    """Translates script commands into shell source."""

    def __init__(
        self,
        emitter: ShellEmitter,
        *,
        variable_prefix: str = DEFAULT_VARIABLE_PREFIX,
        parser: CommandParser | None = None,
    ) -> None:
        self.emitter = emitter
        self.variable_prefix = variable_prefix
        self.parser = parser or CommandParser()
        self.commands_dispatched = 0
        self._handlers: dict[str, ICommandHandler] = build_handler_table()

    def shell_var(self, name: str) -> str:
        """Return the shell variable name backing script variable `name`."""
        return f"{self.variable_prefix}{name}"

    def emit(self, line: str) -> None:
        self.emitter.emit(line)

    def run_line(self, line: str) -> None:
        self.execute(self.parser.parse(line))

    def execute(self, command: Command) -> None:
        """
        Translates a single command.

        Raises:
            UnknownCommandError: If the name is not a command at all.
            UnsupportedCommandError: If the command has no shell form yet.
        """
        handler = self._handlers.get(command.name)
        if handler is None:
            raise UnknownCommandError(
                command.name,
                message=f"Unknown command '{command.name}' "
                "(maybe you want to interpret with -i)",
            )
        handler.transpile(command, self)
        self.commands_dispatched += 1

    def finish(self) -> None:
        self.emitter.close()
