from enum import Enum


class RunMode(str, Enum):
    """How a session processes its script."""

    INTERPRET = "interpret"
    COMPILE = "compile"
