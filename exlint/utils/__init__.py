"""
Utility functions and helpers.
"""

from exlint.utils.logging_config import setup_logging

__all__ = [
    "setup_logging",
]
