"""Base exception classes for rwenv.

Every rwenv exception carries structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context (offending line, path, OS error)
"""

from typing import Any, Dict, Optional, Union


class RwenvError(Exception):
    """Base exception for all rwenv errors.

    Attributes:
        code: Machine-readable error code (e.g., "FILE_READ_ERROR")
        message: Human-readable error message
        details: Optional additional context for debugging
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with structured information.

        Args:
            code: Machine-readable error code
            message: Human-readable error message
            details: Optional additional context
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return formatted error string."""
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(RwenvError):
    """Base for input that cannot be turned into an environment variable."""

    pass


class ResourceNotFoundError(RwenvError):
    """Base for missing or unreadable resources (env files, programs)."""

    pass


class LaunchError(RwenvError):
    """Base for failures while starting the target program."""

    pass


class ConfigurationError(RwenvError):
    """Raised when an RWENV_* setting has an unusable value."""

    def __init__(
        self, message: str, code: str = "INVALID_SETTING", details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(code=code, message=message, details=details)


class MalformedLine(ValidationError):
    """A line could not be split into NAME=VALUE.

    Non-fatal when the line comes from an env file or the inherited
    environment: the assembler drops it and moves on.
    """

    def __init__(self, line: str, reason: str):
        super().__init__(
            code="MALFORMED_LINE",
            message=f"cannot parse {line!r}: {reason}",
            details={"line": line, "reason": reason},
        )
        self.line = line
        self.reason = reason


class InvalidOverride(ValidationError):
    """An override given on the command line is not NAME=VALUE."""

    def __init__(self, override: str, reason: str):
        super().__init__(
            code="INVALID_OVERRIDE",
            message=f"invalid override {override!r}: {reason}",
            details={"override": override, "reason": reason},
        )
        self.override = override


class FileReadError(ResourceNotFoundError):
    """An env file could not be read. Aborts assembly."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            code="FILE_READ_ERROR",
            message=f"read file {path}: {reason}",
            details={"path": path, "reason": reason},
        )
        self.path = path


class ProgramNotFound(ResourceNotFoundError):
    """The command could not be resolved to an executable."""

    def __init__(self, program: str):
        super().__init__(
            code="PROGRAM_NOT_FOUND",
            message=f"look executable path: {program!r} not found",
            details={"program": program},
        )
        self.program = program


class ExecFailed(LaunchError):
    """The operating system refused to run the resolved program.

    *error* is the ``OSError`` from exec/spawn, or the ``ValueError``
    raised for a NUL character in an argument or value.
    """

    def __init__(self, program: str, error: Union[OSError, ValueError]):
        super().__init__(
            code="EXEC_FAILED",
            message=f"exec {program}: {getattr(error, 'strerror', None) or error}",
            details={"program": program, "errno": getattr(error, "errno", None)},
        )
        self.program = program
        self.error = error
