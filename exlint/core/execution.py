"""
The Execution value passed to every command.

An Execution is built once per run by the configuration resolver and
is never mutated afterwards; derived values are made with
dataclasses.replace.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

DEFAULT_INCLUDED = ("lib/", "src/", "web/", "apps/")
DEFAULT_EXCLUDED = ("_build/", "deps/")


@dataclass(frozen=True)
class SourceFiles:
    """Patterns describing which files are in scope."""

    included: Tuple[str, ...] = DEFAULT_INCLUDED
    excluded: Tuple[str, ...] = DEFAULT_EXCLUDED


@dataclass(frozen=True)
class Execution:
    """Merged settings for a single run."""

    files: SourceFiles = field(default_factory=SourceFiles)

    # (check name, params) pairs; None enables every registered check
    checks: Optional[Tuple[Tuple[str, Dict[str, Any]], ...]] = None
    requires: Tuple[str, ...] = ()

    # None means "not set by the config file or the command line"
    all: Optional[bool] = None
    all_priorities: Optional[bool] = None
    crash_on_error: Optional[bool] = None
    min_priority: Optional[int] = None
    strict: Optional[bool] = None

    help: bool = False
    version: bool = False
    verbose: bool = False
    read_from_stdin: bool = False
    format: Optional[str] = None
    match_checks: Optional[str] = None
    ignore_checks: Optional[str] = None
    config_name: Optional[str] = None

    args: Tuple[str, ...] = ()

    @property
    def included(self) -> Tuple[str, ...]:
        return self.files.included

    @property
    def excluded(self) -> Tuple[str, ...]:
        return self.files.excluded
