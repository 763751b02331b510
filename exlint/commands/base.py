"""
Command interface and command results.

A command receives the working directory and the resolved Execution
and returns either OK or a Failure carrying the issues it found.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from exlint.core.execution import Execution
from exlint.core.issue import Issue


class Success:
    """Result of a command that completed without issues."""

    def __repr__(self):
        return "OK"


OK = Success()


@dataclass(frozen=True)
class Failure:
    """Result of a command that found issues."""

    issues: Tuple[Issue, ...]


CommandResult = Union[Success, Failure]


def result_for(issues: Iterable[Issue]) -> CommandResult:
    """OK when there are no issues, a Failure otherwise."""
    issues = tuple(issues)
    if not issues:
        return OK
    return Failure(issues)


class Command(ABC):
    """Base class for commands."""

    SHORT_DESCRIPTION: str = ""

    @abstractmethod
    def run(self, directory: str, execution: Execution) -> CommandResult:
        """Run the command."""
        pass
