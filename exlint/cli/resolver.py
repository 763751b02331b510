"""
Decides which command runs and on which directory.

Resolution happens in two steps because the help and version flags
are only known once the configuration has been resolved:

1. select_command() picks an explicitly named command and the
   working directory from the positional arguments.
2. finalize_command() infers a command when none was named.
"""

import logging
from typing import Optional, Sequence, Tuple

from exlint.cli.filename import contains_line_no
from exlint.cli.registry import DEFAULT_COMMAND, CommandName, command_for
from exlint.core.execution import Execution

logger = logging.getLogger(__name__)

DEFAULT_DIR = "."


def select_command(
    args: Sequence[str],
) -> Tuple[Optional[CommandName], str, Tuple[str, ...]]:
    """
    Pick the command named by the first positional argument, if any.

    Args:
        args: Positional arguments.

    Returns:
        Tuple of (command name or None, working directory, arguments
        for the command).
    """
    args = tuple(args)
    first = args[0] if args else None

    if command_for(first) is not None:
        directory = args[1] if len(args) > 1 else DEFAULT_DIR
        return CommandName(first), directory, args[1:]

    return None, first or DEFAULT_DIR, args


def finalize_command(
    command_name: Optional[CommandName],
    args: Sequence[str],
    execution: Execution,
) -> CommandName:
    """
    Settle on a command; the first matching rule wins.

    An explicitly named command always wins. Otherwise the help and
    version flags, then the absence of arguments, then a `file:line`
    argument decide; anything else runs the default command.
    """
    if command_name is not None:
        resolved = command_name
    elif execution.help:
        resolved = CommandName.HELP
    elif execution.version:
        resolved = CommandName.VERSION
    elif not args:
        resolved = DEFAULT_COMMAND
    elif contains_line_no(args[0]):
        resolved = CommandName.EXPLAIN
    else:
        resolved = DEFAULT_COMMAND

    logger.debug(f"Resolved command: {resolved.value}")
    return resolved
