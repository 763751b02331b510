"""
The `explain` command: details on the issues at `path:line[:column]`.
"""

from pathlib import Path

import click

from exlint.analysis import CheckRegistry, run_checks
from exlint.cli.filename import column, line_no, remove_line_no_and_column
from exlint.commands.base import OK, Command
from exlint.core.exceptions import SourceError
from exlint.ingestion import find


class ExplainCommand(Command):
    SHORT_DESCRIPTION = "Explain the issues at a given location"

    def run(self, directory, execution):
        filename = remove_line_no_and_column(directory)
        line, col = line_no(directory), column(directory)

        if not execution.read_from_stdin and not Path(filename).is_file():
            raise SourceError(
                f"No such file: {filename}",
                details={"path": filename},
            )

        issues = [
            issue
            for issue in run_checks(execution, find(execution, filename))
            if (line is None or issue.line_no == line)
            and (col is None or issue.column == col)
        ]

        if not issues:
            click.echo(f"No issues found at {directory}")
            return OK

        for issue in issues:
            click.echo(f"{issue.filename}:{issue.line_no}:{issue.column}")
            click.echo(f"  {issue.check} ({issue.category.label}, priority {issue.priority})")
            click.echo(f"  {issue.message}")

            check = CheckRegistry.get_check_class(issue.check)
            if check is not None and check.EXPLANATION:
                click.echo()
                click.echo(f"  {check.EXPLANATION}")
            click.echo()

        return OK
