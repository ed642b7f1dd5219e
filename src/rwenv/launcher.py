"""Running the target program with the assembled environment.

Two strategies sit behind the :class:`Launcher` interface:

- :class:`ExecLauncher` replaces the current process image. On success
  ``launch`` never returns; the program's exit status is rwenv's.
- :class:`SpawnLauncher` runs the program as a child that inherits
  stdin, stdout and stderr, waits for it and returns its exit status.
"""

import os
import shutil
import signal
import subprocess
from abc import ABC, abstractmethod
from typing import Mapping, Optional, Sequence

from rwenv.exceptions import ExecFailed, ProgramNotFound


def resolve_program(name: str, search_path: Optional[str] = None) -> str:
    """Resolve *name* to an executable path.

    Names containing a path separator are checked as-is; bare names are
    looked up on *search_path* (default: the invoking process's PATH).

    Raises:
        ProgramNotFound: If no executable matches
    """
    if search_path is None:
        search_path = os.environ.get("PATH", os.defpath)
    program = shutil.which(name, path=search_path)
    if program is None:
        raise ProgramNotFound(name)
    return program


class Launcher(ABC):
    """Run a resolved program with an argument vector and environment."""

    @abstractmethod
    def launch(self, program: str, argv: Sequence[str], env: Mapping[str, str]) -> int:
        """Run *program*.

        Args:
            program: Resolved executable path
            argv: Full argument vector, ``argv[0]`` included
            env: Complete environment of the program

        Returns:
            The program's exit status

        Raises:
            ExecFailed: If the operating system refuses to run the program, or
                the argument vector or environment holds a NUL character
        """


class ExecLauncher(Launcher):
    """Replace the current process image with the program."""

    def launch(self, program: str, argv: Sequence[str], env: Mapping[str, str]) -> int:
        try:
            os.execve(program, list(argv), dict(env))
        except (OSError, ValueError) as e:
            raise ExecFailed(program, e) from e


class SpawnLauncher(Launcher):
    """Run the program as a child process and wait for it.

    While the child runs, SIGINT is ignored in rwenv itself: Ctrl-C from
    the terminal reaches the child, and rwenv reports whatever status the
    child ends with.
    """

    def launch(self, program: str, argv: Sequence[str], env: Mapping[str, str]) -> int:
        try:
            child = subprocess.Popen(list(argv), executable=program, env=dict(env))
        except (OSError, ValueError) as e:
            raise ExecFailed(program, e) from e

        previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
        try:
            returncode = child.wait()
        finally:
            signal.signal(signal.SIGINT, previous)

        if returncode < 0:
            # killed by signal, shell convention
            return 128 - returncode
        return returncode


def get_launcher(spawn: bool = False) -> Launcher:
    """Return the launcher for the requested strategy."""
    return SpawnLauncher() if spawn else ExecLauncher()
