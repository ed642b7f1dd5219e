"""
rwenv logger module.

Diagnostics always go to stderr; stdout is reserved for the environment
listing.

Usage:
    from rwenv.logger import get_logger, create_logger

    logger = get_logger()
    logger.debug("reading env file", path=".env")

    logger = create_logger(level=logging.DEBUG, json_format=True)

Environment Variables:
    RWENV_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    RWENV_LOG_FILE: Optional file path for log output
    RWENV_LOG_FORMAT: "text" (default) or "json"
"""

import logging
import os
from typing import Optional

from .default_logger import DefaultLogger
from .interface import Logger
from .structured_logger import JsonFormatter, StructuredLogger, TextFormatter


def _get_env_prefix(name: str) -> str:
    """Convert logger name to environment variable prefix.

    Examples:
        "rwenv" -> "RWENV"
        "rwenv-test" -> "RWENV_TEST"
    """
    return name.upper().replace("-", "_")


def create_logger(
    name: str = "rwenv",
    level: Optional[int] = None,
    log_file: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> Logger:
    """Create a logger, filling unset parameters from the environment.

    Args:
        name: Logger name, also used to derive the env var prefix
        level: Logging level (defaults to {PREFIX}_LOG_LEVEL or WARNING)
        log_file: Optional file path for log output
        json_format: If True, output logs as JSON

    Returns:
        A configured Logger instance
    """
    env_prefix = _get_env_prefix(name)

    if level is None:
        level_str = os.environ.get(f"{env_prefix}_LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, level_str, logging.WARNING)

    if log_file is None:
        log_file = os.environ.get(f"{env_prefix}_LOG_FILE")

    if json_format is None:
        json_format = os.environ.get(f"{env_prefix}_LOG_FORMAT", "text").lower() == "json"

    return StructuredLogger(
        name=name,
        level=level,
        log_file=log_file,
        json_format=json_format,
    )


def get_logger(name: str = "rwenv") -> Logger:
    """Get a logger configured purely from environment variables."""
    return create_logger(name=name)


__all__ = [
    # Interface
    "Logger",
    # Implementations
    "DefaultLogger",
    "StructuredLogger",
    # Formatters
    "JsonFormatter",
    "TextFormatter",
    # Factory functions
    "create_logger",
    "get_logger",
]
