"""
In-memory variable store for a single script run.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

DEFAULT_CONST_PREFIX = "_RBGN_INTERNAL_CONST_"


class VariableStore:
    """Mapping of script variable names to string values.

    Reading a variable that was never set yields the empty string. Named
    constants share the same mapping under a reserved key prefix, so a
    constant ``k`` never collides with an ordinary variable ``k``.
    """

    def __init__(self, const_prefix: str = DEFAULT_CONST_PREFIX) -> None:
        self._values: dict[str, str] = {}
        self.const_prefix = const_prefix

    def get(self, name: str) -> str:
        return self._values.get(name, "")

    def set(self, name: str, value: str) -> None:
        self._values[name] = value

    def const_key(self, name: str) -> str:
        """Return the reserved key a named constant is stored under."""
        return f"{self.const_prefix}{name}"

    def get_const(self, name: str) -> str:
        return self.get(self.const_key(name))

    def set_const(self, name: str, value: str) -> None:
        self.set(self.const_key(name), value)

    def snapshot(self) -> dict[str, str]:
        """Return a copy of every stored value, constants included."""
        return dict(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)
