"""
Core data structures for the command system.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """
    Represents one parsed script line.

    Attributes:
        name: The name of the command (e.g. ECHO). Empty for comments and
            blank lines.
        arg1: The first argument, or an empty string.
        arg2: The second argument: everything after arg1, or an empty string.
    """

    name: str = ""
    arg1: str = ""
    arg2: str = ""

    @property
    def is_empty(self) -> bool:
        return self.name == ""


EMPTY_COMMAND = Command()
