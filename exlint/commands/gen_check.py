"""
The `gen.check` command: writes a template for a custom check.

The generated file is meant to be listed under `requires` in the
project configuration.
"""

import re
from pathlib import Path

import click

from exlint.commands.base import OK, Command

CHECK_TEMPLATE = '''"""
Custom check: {name}.

Add this file to "requires" in .exlint.json and list "{name}"
under "checks" to enable it.
"""

from exlint.analysis import BaseCheck, CheckRegistry
from exlint.core.issue import Category


@CheckRegistry.register
class {class_name}(BaseCheck):
    NAME = "{name}"
    CATEGORY = Category.WARNING
    BASE_PRIORITY = 0
    EXPLANATION = "Describe what this check looks for and why it matters."
    DEFAULT_PARAMS = {{}}

    def run(self, source, params):
        issues = []

        for line_no, line in enumerate(source.lines, start=1):
            if "IO.inspect" in line:
                issues.append(self.issue_for(
                    source,
                    "There should be no calls to IO.inspect.",
                    line_no=line_no,
                    column=line.index("IO.inspect") + 1,
                    trigger="IO.inspect",
                ))

        return issues
'''


def class_name_for(path: Path) -> str:
    """`lib/no_io_inspect.py` -> `NoIoInspect`."""
    parts = re.split(r"[^0-9a-zA-Z]+", path.stem)
    name = "".join(part[:1].upper() + part[1:] for part in parts if part)
    if not name or name[0].isdigit():
        name = "Check" + name
    return name


class GenCheckCommand(Command):
    SHORT_DESCRIPTION = "Create a new custom check"

    def run(self, directory, execution):
        if not execution.args:
            click.echo("Please provide a filename, e.g. exlint gen.check checks/my_check.py", err=True)
            return OK

        path = Path(directory)
        if path.exists():
            click.echo(f"{path} already exists, not overwriting it", err=True)
            return OK

        class_name = class_name_for(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(CHECK_TEMPLATE.format(
            name=f"Custom.{class_name}",
            class_name=class_name,
        ))

        click.echo(f"Generated a new check in {path}")
        return OK
