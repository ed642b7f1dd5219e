"""Dataclass-based settings for rwenv.

Settings are read from ``RWENV_*`` variables. A settings file in dotenv
syntax may be named with ``RWENV_CONFIG``; process variables win over it.

Environment variables:
    RWENV_CONFIG: Optional settings file
    RWENV_LOG_LEVEL: Logging level (default: WARNING)
    RWENV_LOG_FORMAT: "text" or "json" (default: text)
    RWENV_LOG_FILE: Optional log file
    RWENV_MAX_VALUE_LEN: Display clip threshold (default: 100)
    RWENV_CLIP: Clip long values on display (default: true)
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from rwenv.config.env_loader import EnvLoader
from rwenv.exceptions import ConfigurationError

ENV_PREFIX = "RWENV"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_LOG_FORMATS = ("text", "json")
_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


def _parse_bool(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigurationError(f"{key} must be a boolean, got {raw!r}", details={"key": key})


def _parse_int(key: str, raw: str, minimum: int) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(
            f"{key} must be an integer, got {raw!r}", details={"key": key}
        ) from None
    if value < minimum:
        raise ConfigurationError(f"{key} must be >= {minimum}, got {value}", details={"key": key})
    return value


@dataclass
class LogSettings:
    """Logging configuration

    Attributes:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Log format (text or json)
        file: Optional extra log destination
    """

    level: str = "WARNING"
    format: str = "text"
    file: Optional[str] = None

    def __post_init__(self):
        self.level = self.level.upper()
        self.format = self.format.lower()
        if self.level not in _LOG_LEVELS:
            raise ConfigurationError(
                f"{ENV_PREFIX}_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {self.level!r}",
                details={"key": f"{ENV_PREFIX}_LOG_LEVEL"},
            )
        if self.format not in _LOG_FORMATS:
            raise ConfigurationError(
                f"{ENV_PREFIX}_LOG_FORMAT must be one of {', '.join(_LOG_FORMATS)}, got {self.format!r}",
                details={"key": f"{ENV_PREFIX}_LOG_FORMAT"},
            )

    @property
    def numeric_level(self) -> int:
        return getattr(logging, self.level)

    @property
    def json_format(self) -> bool:
        return self.format == "json"

    @classmethod
    def from_env(cls, env: Mapping[str, str], prefix: str = ENV_PREFIX) -> "LogSettings":
        """Load logging settings from a mapping of variables."""
        return cls(
            level=env.get(f"{prefix}_LOG_LEVEL", "WARNING"),
            format=env.get(f"{prefix}_LOG_FORMAT", "text"),
            file=env.get(f"{prefix}_LOG_FILE") or None,
        )


@dataclass
class DisplaySettings:
    """Environment listing configuration

    Attributes:
        max_value_len: Values longer than this are clipped to head...tail
        clip: Whether clipping is applied at all
    """

    max_value_len: int = 100
    clip: bool = True

    @classmethod
    def from_env(cls, env: Mapping[str, str], prefix: str = ENV_PREFIX) -> "DisplaySettings":
        """Load display settings from a mapping of variables."""
        settings = cls()
        raw_len = env.get(f"{prefix}_MAX_VALUE_LEN")
        if raw_len is not None:
            # head and tail need at least one character each
            settings.max_value_len = _parse_int(f"{prefix}_MAX_VALUE_LEN", raw_len, minimum=4)
        raw_clip = env.get(f"{prefix}_CLIP")
        if raw_clip is not None:
            settings.clip = _parse_bool(f"{prefix}_CLIP", raw_clip)
        return settings


@dataclass
class Settings:
    """Complete rwenv settings

    Attributes:
        log: Logging settings
        display: Environment listing settings
    """

    log: LogSettings = field(default_factory=LogSettings)
    display: DisplaySettings = field(default_factory=DisplaySettings)

    @classmethod
    def from_env(cls, env: Mapping[str, str], prefix: str = ENV_PREFIX) -> "Settings":
        return cls(
            log=LogSettings.from_env(env, prefix),
            display=DisplaySettings.from_env(env, prefix),
        )


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from the process environment and optional settings file.

    Args:
        environ: Variables to read (defaults to os.environ)

    Raises:
        ConfigurationError: If a setting has an unusable value
    """
    environ = os.environ if environ is None else environ
    loader = EnvLoader(environ.get(f"{ENV_PREFIX}_CONFIG"))
    return Settings.from_env(loader.load(environ=environ))
