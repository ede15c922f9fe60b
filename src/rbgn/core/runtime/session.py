"""
Session driver.

A session owns everything one script run needs: the variable store, the
script and input readers, and the backend chosen by the run mode. It feeds
the script to the backend line by line.
"""

from __future__ import annotations

import logging
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import IO, TextIO

from rbgn.core.common.exceptions import RbgnError
from rbgn.core.config.app_config import AppConfig
from rbgn.core.domain.run_mode import RunMode
from rbgn.core.domain.variable_store import VariableStore
from rbgn.core.io.line_reader import LineReader
from rbgn.core.runtime.interpreter import Interpreter
from rbgn.core.runtime.transpiler import (
    ConsoleEmitter,
    FileEmitter,
    ShellEmitter,
    ShellTranspiler,
)

logger = logging.getLogger(__name__)


@dataclass
class SessionResult:
    """Summary of a finished run."""

    mode: RunMode
    lines_processed: int
    commands_dispatched: int
    output_path: Path | None = None


class Session:
    """Runs one script in a single mode."""

    def __init__(
        self,
        config: AppConfig,
        mode: RunMode,
        script: IO[bytes] | IO[str],
        *,
        script_name: str = "<script>",
        stdin: IO[bytes] | IO[str] | None = None,
        stdout: TextIO | None = None,
        output_path: str | Path | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config
        self.mode = mode
        self.script = LineReader(script, name=script_name)
        self.stdout = stdout if stdout is not None else sys.stdout
        self.output_path = Path(output_path) if output_path else None
        self.variables = VariableStore(const_prefix=config.runtime.const_prefix)

        self.backend: Interpreter | ShellTranspiler
        if mode is RunMode.INTERPRET:
            if self.output_path is not None:
                logger.warning("Ignoring output file %s in interpret mode", self.output_path)
            self.backend = Interpreter(
                self.variables,
                self.script,
                LineReader(
                    stdin if stdin is not None else sys.stdin.buffer, name="<stdin>"
                ),
                self.stdout,
                sleep=sleep,
            )
        else:
            self.backend = ShellTranspiler(
                self._build_emitter(),
                variable_prefix=config.shell.variable_prefix,
            )

    def _build_emitter(self) -> ShellEmitter:
        if self.output_path is not None:
            return FileEmitter(self.output_path, shebang=self.config.shell.shebang)
        return ConsoleEmitter(self.stdout, prefix=self.config.shell.console_prefix)

    def run(self) -> SessionResult:
        """
        Processes the whole script.

        Returns:
            A summary of the run.

        Raises:
            RbgnError: On the first fatal error, tagged with the script line
                number it happened on.
        """
        logger.info("Running %s in %s mode", self.script.name, self.mode.value)
        try:
            for line in self.script:
                self.backend.run_line(line)
            if isinstance(self.backend, ShellTranspiler):
                self.backend.finish()
        except RbgnError as exc:
            raise exc.with_line_number(self.script.line_number or None)
        finally:
            self.stdout.flush()

        result = SessionResult(
            mode=self.mode,
            lines_processed=self.script.line_number,
            commands_dispatched=self.backend.commands_dispatched,
            output_path=self.output_path if self.mode is RunMode.COMPILE else None,
        )
        logger.info(
            "Finished %s: %d lines, %d commands",
            self.script.name,
            result.lines_processed,
            result.commands_dispatched,
        )
        return result
