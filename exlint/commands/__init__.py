"""
Commands that can be run from the command line.
"""

from exlint.commands.base import OK, Command, CommandResult, Failure, Success, result_for
from exlint.commands.categories import CategoriesCommand
from exlint.commands.codeclimate import CodeClimateCommand
from exlint.commands.explain import ExplainCommand
from exlint.commands.gen_check import GenCheckCommand
from exlint.commands.gen_config import GenConfigCommand
from exlint.commands.help import HelpCommand
from exlint.commands.list_issues import ListCommand
from exlint.commands.suggest import SuggestCommand
from exlint.commands.version import VersionCommand

__all__ = [
    "OK",
    "Command",
    "CommandResult",
    "Failure",
    "Success",
    "result_for",
    "CategoriesCommand",
    "CodeClimateCommand",
    "ExplainCommand",
    "GenCheckCommand",
    "GenConfigCommand",
    "HelpCommand",
    "ListCommand",
    "SuggestCommand",
    "VersionCommand",
]
