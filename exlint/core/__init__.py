"""
Core module containing the Execution value, issues, configuration and errors.
"""

from exlint.core.execution import Execution, SourceFiles
from exlint.core.issue import Category, Issue
from exlint.core.exceptions import (
    ExlintError,
    OptionParseError,
    ConfigurationError,
    SourceError,
    RequireError,
    CheckError,
)

__all__ = [
    "Execution",
    "SourceFiles",
    "Category",
    "Issue",
    "ExlintError",
    "OptionParseError",
    "ConfigurationError",
    "SourceError",
    "RequireError",
    "CheckError",
]
