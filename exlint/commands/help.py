import click

from exlint.cli.options import PROG_NAME, switch_usage
from exlint.commands.base import OK, Command


class HelpCommand(Command):
    SHORT_DESCRIPTION = "Show this help message"

    def run(self, directory, execution):
        from exlint.cli.registry import COMMANDS

        click.echo(f"Usage: {PROG_NAME} [command] [directory] [options]")
        click.echo()
        click.echo("Commands:")
        for name, command in COMMANDS.items():
            click.echo(f"  {name:<14} {command.SHORT_DESCRIPTION}")
        click.echo()
        click.echo("Options:")
        click.echo(switch_usage())
        return OK
