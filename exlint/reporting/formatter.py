"""
Issue formatters for the supported output formats.
"""

import hashlib
import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence

from exlint.core.issue import Category, Issue

logger = logging.getLogger(__name__)

CATEGORY_TAGS = {
    Category.CONSISTENCY: "C",
    Category.DESIGN: "D",
    Category.READABILITY: "R",
    Category.REFACTOR: "F",
    Category.WARNING: "W",
}

CODECLIMATE_CATEGORIES = {
    Category.CONSISTENCY: "Style",
    Category.DESIGN: "Complexity",
    Category.READABILITY: "Style",
    Category.REFACTOR: "Complexity",
    Category.WARNING: "Bug Risk",
}


class IssueFormatter(ABC):
    """Abstract base class for issue formatters."""

    @abstractmethod
    def format(self, issues: Sequence[Issue]) -> str:
        """Format issues to a string."""
        pass


class OnelineFormatter(IssueFormatter):
    """One `[tag] file:line:column message` line per issue."""

    def format(self, issues: Sequence[Issue]) -> str:
        return "\n".join(self.format_issue(issue) for issue in issues)

    @staticmethod
    def format_issue(issue: Issue) -> str:
        location = issue.filename
        if issue.line_no is not None:
            location += f":{issue.line_no}"
            if issue.column is not None:
                location += f":{issue.column}"
        return f"[{CATEGORY_TAGS[issue.category]}] {location} {issue.message}"


class JSONFormatter(IssueFormatter):
    """A single JSON document listing all issues."""

    def __init__(self, indent: int = 2):
        self.indent = indent

    def format(self, issues: Sequence[Issue]) -> str:
        data = {"issues": [issue.to_dict() for issue in issues]}
        return json.dumps(data, indent=self.indent)


class CodeClimateFormatter(IssueFormatter):
    """
    Code Climate engine output.

    Each issue is a JSON object terminated by a NUL byte, as the engine
    specification requires.
    """

    def format(self, issues: Sequence[Issue]) -> str:
        return "".join(json.dumps(self.to_engine_issue(i)) + "\0" for i in issues)

    @staticmethod
    def to_engine_issue(issue: Issue) -> Dict[str, Any]:
        line = issue.line_no or 1
        return {
            "type": "issue",
            "check_name": issue.check,
            "description": issue.message,
            "categories": [CODECLIMATE_CATEGORIES[issue.category]],
            "location": {
                "path": issue.filename,
                "lines": {"begin": line, "end": line},
            },
            "severity": "major" if issue.category is Category.WARNING else "minor",
            "fingerprint": fingerprint(issue),
        }


def fingerprint(issue: Issue) -> str:
    """Stable identifier of an issue across runs."""
    key = "|".join([issue.check, issue.filename, issue.message, issue.trigger or ""])
    return hashlib.sha256(key.encode("utf-8")).hexdigest()


FORMATTERS = {
    "oneline": OnelineFormatter,
    "json": JSONFormatter,
    "codeclimate": CodeClimateFormatter,
}


def get_formatter(name: str = None) -> IssueFormatter:
    """
    Get a formatter by name.

    Unknown names fall back to the oneline formatter.
    """
    name = name or "oneline"
    if name not in FORMATTERS:
        logger.warning(f"Unknown format '{name}', using oneline")
        name = "oneline"
    return FORMATTERS[name]()


def group_by_category(issues: Sequence[Issue]) -> Dict[Category, List[Issue]]:
    grouped: Dict[Category, List[Issue]] = {}
    for issue in issues:
        grouped.setdefault(issue.category, []).append(issue)
    return grouped
