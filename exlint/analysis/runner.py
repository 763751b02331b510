"""
Runs the configured checks over a set of source files.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from exlint.analysis.registry import BaseCheck, CheckRegistry
from exlint.core.exceptions import CheckError
from exlint.core.execution import Execution
from exlint.core.issue import Issue

logger = logging.getLogger(__name__)

LOWEST_PRIORITY = -99


def active_checks(execution: Execution) -> List[Tuple[BaseCheck, Dict[str, Any]]]:
    """
    Resolve the checks to run and their parameters.

    Args:
        execution: Current execution.

    Returns:
        List of (check instance, params) pairs.
    """
    if execution.checks is None:
        configured = [(name, {}) for name in CheckRegistry.list_checks()]
    else:
        configured = list(execution.checks)

    selected = []
    for name, params in configured:
        check = CheckRegistry.get_check(name)
        if check is None:
            logger.warning(f"Ignoring unknown check: {name}")
            continue
        if not _name_selected(name, execution.match_checks, execution.ignore_checks):
            logger.debug(f"Skipping check {name}")
            continue
        selected.append((check, {**check.DEFAULT_PARAMS, **params}))

    return selected


def run_checks(execution: Execution, sources: Iterable) -> List[Issue]:
    """
    Run every active check on every source.

    Args:
        execution: Current execution.
        sources: SourceFile objects to inspect.

    Returns:
        Issues at or above the effective minimum priority, sorted by
        location.

    Raises:
        CheckError: If a check crashes and crash_on_error is set.
    """
    checks = active_checks(execution)
    issues: List[Issue] = []

    for source in sources:
        for check, params in checks:
            try:
                issues.extend(check.run(source, params))
            except Exception as e:
                if execution.crash_on_error:
                    raise CheckError(check.NAME, source.filename, str(e)) from e
                logger.warning(f"{check.NAME} crashed on {source.filename}: {e}")

    threshold = min_priority(execution)
    issues = [issue for issue in issues if issue.priority >= threshold]
    issues.sort(key=lambda i: (i.filename, i.line_no or 0, i.column or 0, i.check))

    logger.info(f"Found {len(issues)} issues using {len(checks)} checks")
    return issues


def min_priority(execution: Execution) -> int:
    """Effective minimum priority for reported issues."""
    if execution.strict or execution.all_priorities:
        return LOWEST_PRIORITY
    if execution.min_priority is None:
        return 0
    return execution.min_priority


def _name_selected(name: str, match: Optional[str], ignore: Optional[str]) -> bool:
    lowered = name.lower()

    if match and not any(p in lowered for p in _patterns(match)):
        return False
    if ignore and any(p in lowered for p in _patterns(ignore)):
        return False
    return True


def _patterns(value: str) -> List[str]:
    return [p.strip().lower() for p in value.split(",") if p.strip()]
