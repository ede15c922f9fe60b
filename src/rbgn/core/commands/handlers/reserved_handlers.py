"""
Command names that are reserved but have no implementation in either mode.

The interpreter reports them as unknown commands. The shell transpiler
reports them as not yet portable, so a script author can tell a typo from a
feature that is simply not built.
"""

from rbgn.core.commands.handler import ICommandHandler, NotYetPortable
from rbgn.core.commands.registry import command

RESERVED_COMMANDS = (
    "STDIN",
    "STOP",
    "KILL",
    "DONE",
    "REPEAT",
    "CHINC",
    "CHDEC",
    "STORECHINC",
    "STORECHDEC",
    "STRRANGE",
    "STRRANGELESS",
    "STRCAT",
)


@command(*RESERVED_COMMANDS)
class ReservedHandler(NotYetPortable, ICommandHandler):
    @property
    def description(self) -> str:
        return "Reserved for a future release"

    @property
    def format(self) -> str:
        return "<reserved>"
