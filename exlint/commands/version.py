import click

from exlint import __version__
from exlint.commands.base import OK, Command


class VersionCommand(Command):
    SHORT_DESCRIPTION = "Show the version"

    def run(self, directory, execution):
        click.echo(__version__)
        return OK
