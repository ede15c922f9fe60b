"""
Forward-only line source over a byte or text stream.

Both the script and the interactive input consumed by `READ` are read through
`LineReader`. Lines are produced lazily, one per call, and the reader cannot
be rewound: loop constructs that need to replay lines buffer them instead.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import IO

from rbgn.core.common.exceptions import MalformedInputError

logger = logging.getLogger(__name__)


class LineReader:
    """Reads newline-delimited lines from a stream.

    Binary streams are decoded as UTF-8; text streams are passed through.
    Returned lines have their line terminator (``\\n`` or ``\\r\\n``) removed
    but are otherwise untouched.
    """

    def __init__(self, stream: IO[bytes] | IO[str], name: str = "<stream>") -> None:
        self._stream = stream
        self.name = name
        self.line_number = 0
        self._exhausted = False

    def next_line(self) -> str | None:
        """Return the next line, or None once the stream is exhausted.

        Raises:
            MalformedInputError: If the stream fails or holds invalid UTF-8
        """
        if self._exhausted:
            return None

        try:
            raw = self._stream.readline()
        except OSError as exc:
            raise MalformedInputError(
                f"Failed to read from {self.name}: {exc}",
                details={"source": self.name, "line_number": self.line_number + 1},
            ) from exc

        if not raw:
            self._exhausted = True
            logger.debug("Reached end of %s after %d lines", self.name, self.line_number)
            return None

        self.line_number += 1

        if isinstance(raw, bytes):
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise MalformedInputError(
                    f"Invalid UTF-8 in {self.name} at line {self.line_number}",
                    details={"source": self.name, "line_number": self.line_number},
                ) from exc
        else:
            line = raw

        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        return line

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line
