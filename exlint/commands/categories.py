import click

from exlint.commands.base import OK, Command
from exlint.core.issue import Category
from exlint.reporting.formatter import CATEGORY_TAGS


class CategoriesCommand(Command):
    """Lists the issue categories and their exit status bits."""

    SHORT_DESCRIPTION = "Show the issue categories"

    def run(self, directory, execution):
        for category in Category:
            click.echo(
                f"[{CATEGORY_TAGS[category]}] {category.label:<12} "
                f"exit bit {category.exit_status:<3} {category.description}"
            )
        return OK
