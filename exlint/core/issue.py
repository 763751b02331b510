"""
Issues and the categories they belong to.

Each category owns a distinct exit status bit, so the process exit
code tells which kinds of issues were found.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class Category(Enum):
    """Issue categories with their exit status bit and description."""

    CONSISTENCY = ("consistency", 1, "Inconsistencies in the way code is written.")
    DESIGN = ("design", 2, "Places where the design could be improved.")
    READABILITY = ("readability", 4, "Code that is harder to read than it needs to be.")
    REFACTOR = ("refactor", 8, "Opportunities to refactor.")
    WARNING = ("warning", 16, "Code that is likely to be a bug.")

    def __init__(self, label: str, exit_status: int, description: str):
        self.label = label
        self.exit_status = exit_status
        self.description = description


@dataclass(frozen=True)
class Issue:
    """A single finding produced by a check."""

    check: str
    category: Category
    message: str
    filename: str
    line_no: Optional[int] = None
    column: Optional[int] = None
    priority: int = 0
    trigger: Optional[str] = None

    @property
    def exit_status(self) -> int:
        return self.category.exit_status

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "check": self.check,
            "category": self.category.label,
            "message": self.message,
            "filename": self.filename,
            "line_no": self.line_no,
            "column": self.column,
            "priority": self.priority,
            "trigger": self.trigger,
            "exit_status": self.exit_status,
        }
