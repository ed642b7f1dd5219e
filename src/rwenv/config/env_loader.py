"""Loader for rwenv's own settings.

Loads values in deterministic order:
1) settings file in dotenv syntax (if provided and exists)
2) OS environment variables (highest precedence)

This is unrelated to the env files rwenv assembles for the target
program; those use the stricter parser in ``rwenv.core.parser``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, MutableMapping, Optional

from dotenv import dotenv_values

from rwenv.exceptions import ConfigurationError


class EnvLoader:
    """Load environment-style key/value pairs with dotenv file support."""

    def __init__(self, env_file: Optional[Path | str] = None) -> None:
        self.env_file = Path(env_file) if env_file else None

    def load(self, environ: Optional[Mapping[str, str]] = None) -> MutableMapping[str, str]:
        """Load settings data with deterministic precedence.

        Precedence (low -> high): settings file, *environ* (default: OS env vars)

        Raises:
            ConfigurationError: If the settings file exists but cannot be read
        """
        data: MutableMapping[str, str] = {}

        if self.env_file is not None and self.env_file.exists():
            try:
                file_values = dotenv_values(self.env_file)
            except (OSError, UnicodeDecodeError) as e:
                raise ConfigurationError(
                    f"cannot read settings file {self.env_file}: {e}",
                    details={"path": str(self.env_file)},
                ) from e
            data.update({k: v for k, v in file_values.items() if v is not None})

        data.update(os.environ if environ is None else environ)

        return data


__all__ = ["EnvLoader"]
