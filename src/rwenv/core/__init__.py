"""Environment assembly: line parsing, env file reading and merging."""

from rwenv.core.assembler import (
    AssemblyConfig,
    Environment,
    EnvironmentAssembler,
    assemble,
    to_env_list,
)
from rwenv.core.parser import STRICT_NAME, EnvVar, split_env
from rwenv.core.reader import read_lines

__all__ = [
    "AssemblyConfig",
    "Environment",
    "EnvironmentAssembler",
    "assemble",
    "to_env_list",
    "EnvVar",
    "STRICT_NAME",
    "split_env",
    "read_lines",
]
