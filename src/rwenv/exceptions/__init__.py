"""Exceptions raised by rwenv.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging

Usage:
    from rwenv.exceptions import RwenvError, InvalidOverride

    try:
        env = assemble(config)
    except RwenvError as e:
        print(e.to_dict())
"""

from rwenv.exceptions.base import (
    ConfigurationError,
    ExecFailed,
    FileReadError,
    InvalidOverride,
    LaunchError,
    MalformedLine,
    ProgramNotFound,
    ResourceNotFoundError,
    RwenvError,
    ValidationError,
)

__all__ = [
    # Base exceptions
    "RwenvError",
    "ValidationError",
    "ResourceNotFoundError",
    "LaunchError",
    "ConfigurationError",
    # Concrete errors
    "MalformedLine",
    "InvalidOverride",
    "FileReadError",
    "ProgramNotFound",
    "ExecFailed",
]
