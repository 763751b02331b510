"""
The default command: runs as a Code Climate engine.

Issues are written to stdout in the engine format. The command always
succeeds; Code Climate treats a nonzero exit as an engine crash.
"""

import logging

import click

from exlint.analysis import run_checks
from exlint.commands.base import OK, Command
from exlint.ingestion import find
from exlint.reporting import CodeClimateFormatter

logger = logging.getLogger(__name__)


class CodeClimateCommand(Command):
    SHORT_DESCRIPTION = "Report issues in Code Climate engine format"

    def run(self, directory, execution):
        sources = find(execution, directory)
        issues = run_checks(execution, sources)

        click.echo(CodeClimateFormatter().format(issues), nl=False)
        logger.info(f"Reported {len(issues)} issues to Code Climate")
        return OK
