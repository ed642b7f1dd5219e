"""rwenv - run a command with an environment taken from files.

This package provides:
- core: env line parsing, env file reading and environment assembly
- launcher: exec (process image replacement) or spawn of the target program
- display: sorted, clipped, aligned environment listing
- config: rwenv's own settings (RWENV_* variables)
- logger: diagnostics on stderr, text or JSON
- exceptions: structured error hierarchy
"""

__version__ = "1.0.0"

from rwenv.core import (
    AssemblyConfig,
    Environment,
    EnvVar,
    assemble,
    split_env,
    to_env_list,
)

from rwenv.exceptions import (
    RwenvError,
    MalformedLine,
    InvalidOverride,
    FileReadError,
    ProgramNotFound,
    ExecFailed,
)

__all__ = [
    "__version__",
    # Core
    "AssemblyConfig",
    "Environment",
    "EnvVar",
    "assemble",
    "split_env",
    "to_env_list",
    # Exceptions
    "RwenvError",
    "MalformedLine",
    "InvalidOverride",
    "FileReadError",
    "ProgramNotFound",
    "ExecFailed",
]
