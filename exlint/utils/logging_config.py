"""
Logging configuration for the application.

Logs go to stderr: stdout is reserved for command output, which the
Code Climate engine protocol parses.
"""

import logging
import os
import sys

LOG_LEVEL_ENV = "EXLINT_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """
    Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR). The
            EXLINT_LOG_LEVEL environment variable takes precedence.
    """
    level = os.getenv(LOG_LEVEL_ENV) or level

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
