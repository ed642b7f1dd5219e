"""Splitting of ``NAME=VALUE`` lines.

The first ``=`` separates name from value; everything after it, further
``=`` characters included, belongs to the value. A value wrapped in one
pair of double quotes loses the quotes. There is no escape processing,
no comment syntax and no multi-line value.
"""

import re
from dataclasses import dataclass

from rwenv.exceptions import MalformedLine

STRICT_NAME = re.compile(r"[A-Z0-9_]+")


@dataclass(frozen=True)
class EnvVar:
    """A single environment variable."""

    name: str
    value: str

    def to_line(self) -> str:
        """Serialize back to ``NAME=VALUE``."""
        return f"{self.name}={self.value}"


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


def split_env(line: str, strict: bool = False) -> EnvVar:
    """Split *line* into an :class:`EnvVar`.

    Args:
        line: Raw line, without its trailing newline
        strict: Require the name to match ``[A-Z0-9_]+``

    Raises:
        MalformedLine: If there is no ``=``, the name is empty, or (strict)
            the name contains other characters
    """
    name, sep, value = line.partition("=")
    if not sep:
        raise MalformedLine(line, "no equal sign found")
    if not name:
        raise MalformedLine(line, "empty variable name")
    if strict and not STRICT_NAME.fullmatch(name):
        raise MalformedLine(line, "variable name must match [A-Z0-9_]+")
    return EnvVar(name, _unquote(value))
