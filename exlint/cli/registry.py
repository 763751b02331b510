"""
Static table of the commands the CLI knows.

`command_for` is the only place where a command is looked up by its
name; everything after resolution works with CommandName members and
handler instances.
"""

from enum import Enum
from typing import Dict, List, Optional, Union

from exlint.commands import (
    CategoriesCommand,
    CodeClimateCommand,
    Command,
    ExplainCommand,
    GenCheckCommand,
    GenConfigCommand,
    HelpCommand,
    ListCommand,
    SuggestCommand,
    VersionCommand,
)


class CommandName(str, Enum):
    CATEGORIES = "categories"
    EXPLAIN = "explain"
    GEN_CHECK = "gen.check"
    GEN_CONFIG = "gen.config"
    HELP = "help"
    LIST = "list"
    SUGGEST = "suggest"
    VERSION = "version"
    CODECLIMATE = "codeclimate"


DEFAULT_COMMAND = CommandName.CODECLIMATE

COMMANDS: Dict[str, Command] = {
    CommandName.CATEGORIES.value: CategoriesCommand(),
    CommandName.EXPLAIN.value: ExplainCommand(),
    CommandName.GEN_CHECK.value: GenCheckCommand(),
    CommandName.GEN_CONFIG.value: GenConfigCommand(),
    CommandName.HELP.value: HelpCommand(),
    CommandName.LIST.value: ListCommand(),
    CommandName.SUGGEST.value: SuggestCommand(),
    CommandName.VERSION.value: VersionCommand(),
    CommandName.CODECLIMATE.value: CodeClimateCommand(),
}


def command_names() -> List[str]:
    """Returns the names of all commands, in table order."""
    return list(COMMANDS.keys())


def is_known_handler(handler) -> bool:
    """Whether handler is one of the registered command instances."""
    return any(handler is command for command in COMMANDS.values())


def command_for(command: Union[str, Command, None]) -> Optional[Command]:
    """
    Returns the handler for a command name or handler.

    Names that are not registered, handlers that are not part of the
    table and None all give None.
    """
    if command is None:
        return None

    if isinstance(command, CommandName):
        return COMMANDS[command.value]

    if isinstance(command, str):
        return COMMANDS.get(command)

    if is_known_handler(command):
        return command
    return None
