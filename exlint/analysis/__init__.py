"""
Checks and the machinery that runs them.
"""

from exlint.analysis.registry import BaseCheck, CheckRegistry
from exlint.analysis import checks
from exlint.analysis.runner import run_checks, active_checks

__all__ = [
    "BaseCheck",
    "CheckRegistry",
    "checks",
    "run_checks",
    "active_checks",
]
