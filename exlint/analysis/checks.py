"""
Built-in checks.

All of them work on raw lines, so they need no Elixir parser.
"""

import re
from typing import Any, Dict, List

from exlint.analysis.registry import BaseCheck, CheckRegistry
from exlint.core.issue import Category, Issue


@CheckRegistry.register
class MaxLineLength(BaseCheck):
    """Flags lines longer than the configured maximum."""

    NAME = "Readability.MaxLineLength"
    CATEGORY = Category.READABILITY
    BASE_PRIORITY = 0
    EXPLANATION = (
        "Checks for the length of lines. Long lines are hard to read, "
        "especially side by side in a diff."
    )
    DEFAULT_PARAMS = {"max_length": 120, "ignore_comments": True}

    def run(self, source, params: Dict[str, Any]) -> List[Issue]:
        max_length = params["max_length"]
        issues = []

        for line_no, line in enumerate(source.lines, start=1):
            if len(line) <= max_length:
                continue
            if params["ignore_comments"] and line.lstrip().startswith("#"):
                continue

            issues.append(self.issue_for(
                source,
                f"Line is too long (max is {max_length}, was {len(line)}).",
                line_no=line_no,
                column=max_length + 1,
                trigger=line[max_length:],
            ))

        return issues


@CheckRegistry.register
class TrailingWhitespace(BaseCheck):
    """Flags whitespace at the end of a line."""

    NAME = "Consistency.TrailingWhitespace"
    CATEGORY = Category.CONSISTENCY
    BASE_PRIORITY = 0
    EXPLANATION = (
        "There should be no white-space at the end of a line. Most editors "
        "can strip it on save."
    )

    def run(self, source, params: Dict[str, Any]) -> List[Issue]:
        issues = []

        for line_no, line in enumerate(source.lines, start=1):
            stripped = line.rstrip(" \t")
            if stripped == line:
                continue

            issues.append(self.issue_for(
                source,
                "There should be no trailing white-space at the end of a line.",
                line_no=line_no,
                column=len(stripped) + 1,
                trigger=line[len(stripped):],
            ))

        return issues


class _TagCheck(BaseCheck):
    """Shared logic for comment-tag checks."""

    CATEGORY = Category.DESIGN
    BASE_PRIORITY = -5
    TAG = ""

    def run(self, source, params: Dict[str, Any]) -> List[Issue]:
        pattern = re.compile(rf"#\s*{self.TAG}\b:?\s*(.*)$")
        issues = []

        for line_no, line in enumerate(source.lines, start=1):
            match = pattern.search(line)
            if not match:
                continue

            issues.append(self.issue_for(
                source,
                f"Found a {self.TAG} tag in a comment: {match.group(1).strip()}",
                line_no=line_no,
                column=match.start() + 1,
                trigger=self.TAG,
            ))

        return issues


@CheckRegistry.register
class TagTODO(_TagCheck):
    NAME = "Design.TagTODO"
    TAG = "TODO"
    EXPLANATION = "TODO comments are fine, but they should not linger forever."


@CheckRegistry.register
class TagFIXME(_TagCheck):
    NAME = "Design.TagFIXME"
    TAG = "FIXME"
    BASE_PRIORITY = 0
    EXPLANATION = "FIXME comments mark code that is known to be broken."
