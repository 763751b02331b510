"""
The `list` command: every issue, one per line (or as JSON).
"""

import click

from exlint.analysis import run_checks
from exlint.commands.base import Command, result_for
from exlint.ingestion import find
from exlint.reporting import get_formatter


class ListCommand(Command):
    SHORT_DESCRIPTION = "List all issues grouped by file"

    def run(self, directory, execution):
        sources = find(execution, directory)
        issues = run_checks(execution, sources)

        output = get_formatter(execution.format).format(issues)
        if output:
            click.echo(output)

        return result_for(issues)
