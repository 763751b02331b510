"""
Helpers for filenames carrying a `:line[:column]` suffix, as in
`lib/foo.ex:12:3`.
"""

import re
from typing import Optional

_LINE_NO_PATTERN = re.compile(r"^(?P<path>.+?):(?P<line>\d+)(?::(?P<column>\d+))?$")


def contains_line_no(filename: Optional[str]) -> bool:
    """Whether the filename ends with `:line` or `:line:column`."""
    if filename is None:
        return False
    return _LINE_NO_PATTERN.match(filename) is not None


def remove_line_no_and_column(filename: Optional[str]) -> Optional[str]:
    """Strip a trailing `:line[:column]`; other values come back unchanged."""
    if filename is None:
        return None

    match = _LINE_NO_PATTERN.match(filename)
    if match is None:
        return filename
    return match.group("path")


def line_no(filename: Optional[str]) -> Optional[int]:
    match = _LINE_NO_PATTERN.match(filename or "")
    return int(match.group("line")) if match else None


def column(filename: Optional[str]) -> Optional[int]:
    match = _LINE_NO_PATTERN.match(filename or "")
    if match is None or match.group("column") is None:
        return None
    return int(match.group("column"))
