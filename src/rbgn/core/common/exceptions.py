"""
Common exception classes for RBGN.

Every error raised while reading, parsing, interpreting or compiling a script
is terminal. The exceptions defined here carry enough context for the CLI's
top-level handler to report the failure and pick a process exit code.
"""

from __future__ import annotations


class RbgnError(Exception):
    """Base exception class for all RBGN errors."""

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        *,
        exit_code: int | None = None,
        **kwargs,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
            exit_code: Optional process exit code hint for the CLI
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.exit_code = exit_code or 1
        for key, value in (kwargs or {}).items():
            setattr(self, key, value)

    @property
    def line_number(self) -> int | None:
        """Script line the error was raised on, when known."""
        return self.details.get("line_number")

    def with_line_number(self, line_number: int | None) -> RbgnError:
        """Attach a script line number unless one is already recorded."""
        if line_number is not None:
            self.details.setdefault("line_number", line_number)
        return self

    def to_dict(self) -> dict:
        return {
            "error": {
                "message": self.message,
                "type": self.__class__.__name__,
                "details": self.details,
                "exit_code": self.exit_code,
            }
        }


class MalformedInputError(RbgnError):
    """Raised when the script or interactive input cannot be read or decoded."""

    def __init__(
        self,
        message: str = "Malformed input",
        details: dict | None = None,
        **kwargs,
    ):
        # EX_DATAERR
        super().__init__(message, details, exit_code=65, **kwargs)


class UnknownCommandError(RbgnError):
    """Raised when a command name is not in the table for the active mode."""

    def __init__(
        self,
        command_name: str,
        message: str | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        det = details.copy() if details else {}
        det.setdefault("command_name", command_name)
        super().__init__(
            message or f"Unknown command '{command_name}'",
            det,
            exit_code=2,
            **kwargs,
        )
        self.command_name = command_name


class UnsupportedCommandError(RbgnError):
    """Raised when a known command has no shell translation yet."""

    def __init__(
        self,
        command_name: str,
        message: str | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        det = details.copy() if details else {}
        det.setdefault("command_name", command_name)
        super().__init__(
            message
            or f"Command '{command_name}' cannot be compiled to shell yet; "
            "interpret the script with -i instead",
            det,
            exit_code=3,
            **kwargs,
        )
        self.command_name = command_name


class ContractViolationError(RbgnError):
    """Raised when a string primitive is used outside its contract.

    Examples are taking the first character of an empty variable or sleeping
    for a duration that is not a non-negative integer.
    """

    def __init__(
        self,
        message: str = "Contract violation",
        command_name: str | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        det = details.copy() if details else {}
        if command_name:
            det.setdefault("command_name", command_name)
        super().__init__(message, det, exit_code=4, **kwargs)


class ConfigurationError(RbgnError):
    """Raised when there's a configuration issue."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict | None = None,
        **kwargs,
    ):
        # EX_CONFIG
        super().__init__(message, details, exit_code=78, **kwargs)


class OutputWriteError(RbgnError):
    """Raised when the compiled shell script cannot be written."""

    def __init__(
        self,
        message: str = "Cannot write output",
        details: dict | None = None,
        **kwargs,
    ):
        # EX_CANTCREAT
        super().__init__(message, details, exit_code=73, **kwargs)
