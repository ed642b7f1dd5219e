"""Configuration for rwenv itself.

Example:
    from rwenv.config import load_settings

    settings = load_settings()
    settings.display.max_value_len
"""

from rwenv.config.env_loader import EnvLoader
from rwenv.config.settings import (
    ENV_PREFIX,
    DisplaySettings,
    LogSettings,
    Settings,
    load_settings,
)

__all__ = [
    "ENV_PREFIX",
    "EnvLoader",
    "LogSettings",
    "DisplaySettings",
    "Settings",
    "load_settings",
]
