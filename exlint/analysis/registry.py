"""
Check registry.

Checks register themselves with a decorator, which is also how custom
checks loaded through `requires` become available:

    @CheckRegistry.register
    class NoIOInspect(BaseCheck):
        ...
"""

import logging
from typing import Any, Dict, List, Optional, Type

from exlint.core.issue import Category, Issue

logger = logging.getLogger(__name__)


class BaseCheck:
    """
    Base class for checks.

    A check looks at one source file and returns the issues it finds.
    """

    NAME: str = "unknown"
    CATEGORY: Category = Category.CONSISTENCY
    BASE_PRIORITY: int = 0
    EXPLANATION: str = ""
    DEFAULT_PARAMS: Dict[str, Any] = {}

    def run(self, source, params: Dict[str, Any]) -> List[Issue]:
        """
        Run the check on a source file.

        Args:
            source: SourceFile to inspect.
            params: Check parameters merged over DEFAULT_PARAMS.

        Returns:
            List of issues found.
        """
        raise NotImplementedError("Subclasses must implement run")

    def issue_for(
        self,
        source,
        message: str,
        line_no: Optional[int] = None,
        column: Optional[int] = None,
        trigger: Optional[str] = None,
        priority: Optional[int] = None,
    ) -> Issue:
        """Build an issue attributed to this check."""
        return Issue(
            check=self.NAME,
            category=self.CATEGORY,
            message=message,
            filename=source.filename,
            line_no=line_no,
            column=column,
            priority=self.BASE_PRIORITY if priority is None else priority,
            trigger=trigger,
        )


class CheckRegistry:
    """
    Central registry for checks.

    Check names are unique; registering a second class under the same
    name replaces the first.
    """

    _checks: Dict[str, Type[BaseCheck]] = {}
    _instances: Dict[str, BaseCheck] = {}

    @classmethod
    def register(cls, check_class: Type[BaseCheck]) -> Type[BaseCheck]:
        """
        Register a check class.

        Args:
            check_class: The check class to register.

        Returns:
            The registered class (for decorator usage).
        """
        name = check_class.NAME
        if name in cls._checks:
            logger.warning(
                f"Overwriting existing check {name}: "
                f"{cls._checks[name].__name__} -> {check_class.__name__}"
            )
            cls._instances.pop(name, None)

        cls._checks[name] = check_class
        logger.debug(f"Registered check {name}: {check_class.__name__}")
        return check_class

    @classmethod
    def get_check(cls, name: str) -> Optional[BaseCheck]:
        """
        Get a check instance by name.

        Lazily instantiates checks on first request.
        """
        if name not in cls._checks:
            return None

        if name not in cls._instances:
            cls._instances[name] = cls._checks[name]()

        return cls._instances[name]

    @classmethod
    def has_check(cls, name: str) -> bool:
        return name in cls._checks

    @classmethod
    def list_checks(cls) -> List[str]:
        """List all registered check names in registration order."""
        return list(cls._checks.keys())

    @classmethod
    def get_check_class(cls, name: str) -> Optional[Type[BaseCheck]]:
        return cls._checks.get(name)

    @classmethod
    def unregister(cls, name: str) -> None:
        """Remove a check (mainly for testing)."""
        cls._checks.pop(name, None)
        cls._instances.pop(name, None)
