"""Command-line entry point.

USAGE:
    Run a command with an environment taken from files:
        rwenv [-i] [-v] [-s] [--spawn] [-e ENV_FILE]... [-o VAR=VALUE]... CMD [ARGS...]

    Show the environment that would be used:
        rwenv [-i] [-v] [-s] [-f] [-e ENV_FILE]... [-o VAR=VALUE]...

EXIT STATUS:
    0    environment listed
    1    env file unreadable, malformed override or bad RWENV_* setting
    126  program found but could not be executed
    127  program not found
    otherwise the status of the program itself
"""

import argparse
import logging
import os
import sys
from typing import List, Optional, Sequence

from rwenv import __version__
from rwenv.config import Settings, load_settings
from rwenv.core import AssemblyConfig, assemble
from rwenv.display import print_environment
from rwenv.exceptions import ExecFailed, ProgramNotFound, RwenvError
from rwenv.launcher import get_launcher, resolve_program
from rwenv.logger import Logger, create_logger

EXIT_ERROR = 1
EXIT_EXEC_FAILED = 126
EXIT_NOT_FOUND = 127


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="rwenv",
        description="Run command with environment taken from file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
EXAMPLES:
  Show the current environment:
    %(prog)s

  Show the environment built from .env:
    %(prog)s -e .env

  Run env with vars from .env on top of the shell's:
    %(prog)s -i -e .env env

  Override a single var:
    %(prog)s -e .env -o DEBUG=1 ./manage.py runserver

ENVIRONMENT:
  RWENV_LOG_LEVEL, RWENV_LOG_FORMAT, RWENV_LOG_FILE,
  RWENV_MAX_VALUE_LEN, RWENV_CLIP, RWENV_CONFIG (settings file)
        """,
    )
    parser.add_argument(
        "-e", "--env",
        dest="files",
        action="append",
        default=[],
        metavar="ENV_FILE",
        help="env file to take vars from (repeatable, later files win)",
    )
    parser.add_argument(
        "-o", "--override",
        dest="overrides",
        action="append",
        default=[],
        metavar="VAR=VALUE",
        help="additional env var, wins over env files (repeatable)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="print var reading info to stderr",
    )
    parser.add_argument(
        "-i", "--inherit",
        action="store_true",
        help="inherit shell env vars",
    )
    parser.add_argument(
        "-s", "--strict",
        action="store_true",
        help="only accept var names matching [A-Z0-9_]+",
    )
    parser.add_argument(
        "--spawn",
        action="store_true",
        help="run the command as a child process instead of replacing rwenv",
    )
    parser.add_argument(
        "-f", "--full",
        action="store_true",
        help="do not clip long values when showing the environment",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="command to run, with its arguments; omit to show the environment",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> AssemblyConfig:
    """Translate parsed arguments into an assembly config."""
    return AssemblyConfig(
        inherit=args.inherit,
        files=tuple(args.files),
        overrides=tuple(args.overrides),
        verbose=args.verbose,
        strict=args.strict,
    )


def exit_code_for(error: RwenvError) -> int:
    """Map an error to the process exit status."""
    if isinstance(error, ProgramNotFound):
        return EXIT_NOT_FOUND
    if isinstance(error, ExecFailed):
        return EXIT_EXEC_FAILED
    return EXIT_ERROR


def show_env(config: AssemblyConfig, settings: Settings, logger: Logger, clip: bool) -> int:
    """List the assembled environment, or the inherited one if no source was given."""
    env = dict(os.environ) if config.is_empty else assemble(config, logger=logger)
    print_environment(
        env,
        max_value_len=settings.display.max_value_len,
        clip=clip and settings.display.clip,
    )
    return 0


def run_command(command: List[str], config: AssemblyConfig, logger: Logger, spawn: bool) -> int:
    """Resolve and launch *command* with the assembled environment."""
    program = resolve_program(command[0])
    env = assemble(config, logger=logger)
    if config.verbose:
        logger.debug("launching", program=program, mode="spawn" if spawn else "exec")
    return get_launcher(spawn).launch(program, command, env)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    command: List[str] = list(args.command)
    if command and command[0] == "--":
        command = command[1:]

    try:
        settings = load_settings()
    except RwenvError as e:
        print(f"rwenv: {e.code}: {e.message}", file=sys.stderr)
        return EXIT_ERROR

    logger = create_logger(
        name="rwenv",
        level=logging.DEBUG if args.verbose else settings.log.numeric_level,
        log_file=settings.log.file,
        json_format=settings.log.json_format,
    )
    config = config_from_args(args)

    try:
        if not command:
            return show_env(config, settings, logger, clip=not args.full)
        return run_command(command, config, logger, spawn=args.spawn)
    except RwenvError as e:
        if config.verbose:
            logger.debug("aborted", **e.details)
        print(f"rwenv: {e.code}: {e.message}", file=sys.stderr)
        return exit_code_for(e)


if __name__ == "__main__":
    sys.exit(main())
