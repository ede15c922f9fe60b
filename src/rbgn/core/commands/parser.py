"""
Parses script lines into commands.
"""

import re

from rbgn.core.commands.command import EMPTY_COMMAND, Command

COMMENT_PREFIX = "-"

# Fields are separated by runs of ASCII spaces; tabs belong to the field.
_FIELD_SEPARATOR = re.compile(r" +")


def parse_line(line: str, comment_prefix: str = COMMENT_PREFIX) -> Command:
    """
    Parses a single script line.

    The line is trimmed, then split on the first two runs of spaces. Whatever
    follows the second separator is kept verbatim as arg2, so
    ``"ECHO a b c"`` yields ``arg2 == "b c"``. There is no quoting or
    escaping: a space always separates fields.

    Args:
        line: The raw line, with or without its trailing newline.
        comment_prefix: Lines starting with this prefix are comments.

    Returns:
        The parsed Command. Blank lines and comment lines give the empty
        command.
    """
    trimmed = line.strip()
    if not trimmed or trimmed.startswith(comment_prefix):
        return EMPTY_COMMAND

    parts = _FIELD_SEPARATOR.split(trimmed, maxsplit=2)
    parts.extend([""] * (3 - len(parts)))
    name, arg1, arg2 = parts
    return Command(name=name, arg1=arg1, arg2=arg2)


class CommandParser:
    """Parses command invocations from script lines."""

    def __init__(self, comment_prefix: str = COMMENT_PREFIX):
        """Initialize the parser with the desired comment prefix."""
        if not comment_prefix:
            raise ValueError("Comment prefix must not be empty.")
        self.comment_prefix = comment_prefix

    def parse(self, line: str) -> Command:
        """
        Parses a command from the given line.

        Args:
            line: The line to parse.

        Returns:
            The parsed Command.
        """
        return parse_line(line, self.comment_prefix)
