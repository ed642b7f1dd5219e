"""Environment assembly.

Builds the environment for the target program from, in increasing order
of precedence:

1) the inherited process environment (only with ``inherit``)
2) env files, in the order given
3) command-line overrides, in the order given

Malformed lines from the inherited environment or from files are dropped.
A malformed override fails the whole assembly: it is explicit user input.
"""

import os
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from rwenv.core.parser import split_env
from rwenv.core.reader import read_lines
from rwenv.exceptions import InvalidOverride, MalformedLine
from rwenv.logger import Logger, get_logger

Environment = Dict[str, str]


@dataclass(frozen=True)
class AssemblyConfig:
    """Inputs of a single assembly.

    Attributes:
        inherit: Seed from the invoking process's environment
        files: Env file paths, lowest precedence first
        overrides: Raw ``NAME=VALUE`` strings, lowest precedence first
        verbose: Report every variable set and every line ignored
        strict: Only accept names matching ``[A-Z0-9_]+``
    """

    inherit: bool = False
    files: Sequence[str] = ()
    overrides: Sequence[str] = ()
    verbose: bool = False
    strict: bool = False

    @property
    def is_empty(self) -> bool:
        """True when no source was requested at all."""
        return not (self.inherit or self.files or self.overrides)


class EnvironmentAssembler:
    """Merge env sources according to an :class:`AssemblyConfig`."""

    def __init__(self, config: AssemblyConfig, logger: Optional[Logger] = None):
        self.config = config
        self._logger = logger

    @property
    def logger(self) -> Logger:
        if self._logger is None:
            self._logger = get_logger()
        return self._logger

    def _trace(self, message: str, **kwargs: str) -> None:
        if self.config.verbose:
            self.logger.debug(message, **kwargs)

    def _merge_lines(self, env: Environment, lines: Iterable[str], ignored: str) -> None:
        for line in lines:
            try:
                var = split_env(line, strict=self.config.strict)
            except MalformedLine as e:
                self._trace(ignored, line=line, reason=e.reason)
                continue
            self._trace("set env", var=var.name, value=var.value)
            env[var.name] = var.value

    def assemble(self, environ: Optional[Mapping[str, str]] = None) -> Environment:
        """Build the environment.

        Args:
            environ: Inherited variables (defaults to os.environ)

        Raises:
            FileReadError: If an env file cannot be read
            InvalidOverride: If an override is not a valid ``NAME=VALUE``
        """
        env: Environment = {}

        if self.config.inherit:
            self._trace("inheriting env vars")
            inherited = os.environ if environ is None else environ
            self._merge_lines(
                env,
                (f"{name}={value}" for name, value in inherited.items()),
                "ignoring inherited var",
            )

        for path in self.config.files:
            self._trace("reading env file", path=path)
            self._merge_lines(env, read_lines(path), "ignoring line")

        for override in self.config.overrides:
            try:
                var = split_env(override, strict=self.config.strict)
            except MalformedLine as e:
                raise InvalidOverride(override, e.reason) from e
            self._trace("override", var=var.name, value=var.value)
            env[var.name] = var.value

        return env


def assemble(
    config: AssemblyConfig,
    environ: Optional[Mapping[str, str]] = None,
    logger: Optional[Logger] = None,
) -> Environment:
    """Build the environment described by *config*.

    See :meth:`EnvironmentAssembler.assemble`.
    """
    return EnvironmentAssembler(config, logger=logger).assemble(environ)


def to_env_list(env: Mapping[str, str]) -> List[str]:
    """Serialize *env* to ``NAME=VALUE`` strings."""
    return [f"{name}={value}" for name, value in env.items()]
