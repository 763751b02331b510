"""
Entry point for the `exlint` command.

Turns the command line into a command, a working directory and an
Execution, runs the command and converts its result into the process
exit status.
"""

import logging
import operator
import sys
from functools import reduce
from pathlib import Path
from typing import Optional, Sequence

import click
from dotenv import load_dotenv

from exlint.cli.filename import remove_line_no_and_column
from exlint.cli.options import parse
from exlint.cli.registry import command_for
from exlint.cli.resolver import finalize_command, select_command
from exlint.commands.base import CommandResult, Failure, Success
from exlint.core.config import to_execution
from exlint.core.execution import Execution
from exlint.ingestion import find_requires, require_file
from exlint.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

# Outside the range of the category bits (1 | 2 | 4 | 8 | 16).
ERROR_EXIT_STATUS = 64


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Entry point for the CLI."""
    load_dotenv()
    argv = sys.argv[1:] if argv is None else argv

    try:
        halt_if_failed(to_exit_status(run(argv)))
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        logger.debug("Run aborted", exc_info=True)
        sys.exit(ERROR_EXIT_STATUS)


def run(argv: Sequence[str]) -> CommandResult:
    """
    Parse the arguments and run the resolved command.

    Args:
        argv: Arguments without the program name.

    Returns:
        The command's result.
    """
    options = parse(argv)
    setup_logging(level="DEBUG" if options.switches.get("verbose") else "WARNING")

    command_name, directory, args = select_command(options.args)
    execution = to_execution(directory, options.switches, args)
    command_name = finalize_command(command_name, args, execution)

    require_requires(execution, directory)

    command = command_for(command_name)
    logger.info(f"Running {command_name.value} on {directory}")
    return command.run(directory, execution)


def require_requires(execution: Execution, directory: str) -> None:
    """
    Load the files listed under `requires`.

    Patterns are relative to the project directory. Any failure is
    fatal.
    """
    if not execution.requires:
        return

    base = Path(remove_line_no_and_column(directory))
    if base.is_file():
        base = base.parent

    for path in find_requires(execution.requires, base):
        require_file(path)


def to_exit_status(result: CommandResult) -> int:
    """Converts a command result into an exit status."""
    if isinstance(result, Success):
        return 0

    if isinstance(result, Failure):
        return reduce(operator.or_, (issue.exit_status for issue in result.issues), 0)

    raise TypeError(f"Unexpected command result: {result!r}")


def halt_if_failed(exit_status: int) -> None:
    if exit_status == 0:
        return None
    sys.exit(exit_status)


if __name__ == "__main__":
    main()
