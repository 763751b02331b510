"""
Source discovery and loading of required files.
"""

from exlint.ingestion.sources import (
    SourceFile,
    expand_braces,
    find,
    find_paths,
    find_requires,
    require_file,
)

__all__ = [
    "SourceFile",
    "expand_braces",
    "find",
    "find_paths",
    "find_requires",
    "require_file",
]
