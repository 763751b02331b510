"""
Output formatting for issues.
"""

from exlint.reporting.formatter import (
    IssueFormatter,
    OnelineFormatter,
    JSONFormatter,
    CodeClimateFormatter,
    get_formatter,
)

__all__ = [
    "IssueFormatter",
    "OnelineFormatter",
    "JSONFormatter",
    "CodeClimateFormatter",
    "get_formatter",
]
