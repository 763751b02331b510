"""
The `suggest` command: issues grouped by category, most important first.
"""

import click

from exlint.analysis import run_checks
from exlint.commands.base import Command, result_for
from exlint.core.issue import Category
from exlint.ingestion import find
from exlint.reporting.formatter import OnelineFormatter, group_by_category

# issues shown per category unless --all is given
PER_CATEGORY_LIMIT = 5


class SuggestCommand(Command):
    SHORT_DESCRIPTION = "Suggest things to improve (default for humans)"

    def run(self, directory, execution):
        sources = find(execution, directory)
        issues = run_checks(execution, sources)
        grouped = group_by_category(issues)

        for category in Category:
            category_issues = sorted(
                grouped.get(category, []),
                key=lambda issue: -issue.priority,
            )
            if not category_issues:
                continue

            click.echo(f"{category.label.capitalize()} ({len(category_issues)})")
            shown = category_issues if execution.all else category_issues[:PER_CATEGORY_LIMIT]
            for issue in shown:
                click.echo("  " + OnelineFormatter.format_issue(issue))

            hidden = len(category_issues) - len(shown)
            if hidden:
                click.echo(f"  ... and {hidden} more, use --all to show them")
            click.echo()

        click.echo(f"Analyzed {len(sources)} source files, found {len(issues)} issues.")
        return result_for(issues)
