"""
Source discovery.

Expands the include and exclude patterns of an Execution into the list
of files to analyze, and loads the extra Python files listed under
`requires`.
"""

import fnmatch
import importlib.util
import logging
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from exlint.core.exceptions import RequireError, SourceError
from exlint.core.execution import Execution

logger = logging.getLogger(__name__)

_BRACES = re.compile(r"\{([^{}]*)\}")


@dataclass(frozen=True)
class SourceFile:
    """A source file and its content."""

    filename: str
    content: str

    @property
    def lines(self) -> List[str]:
        return self.content.splitlines()

    @classmethod
    def read(cls, path: Path, filename: Optional[str] = None) -> "SourceFile":
        try:
            content = Path(path).read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise SourceError(
                f"Could not read {path}: {e}",
                details={"path": str(path)},
            )
        return cls(filename=filename or str(path), content=content)


def expand_braces(pattern: str) -> List[str]:
    """Expand `{a,b}` alternatives, e.g. `*.{ex,exs}` -> `*.ex`, `*.exs`."""
    match = _BRACES.search(pattern)
    if match is None:
        return [pattern]

    head, tail = pattern[:match.start()], pattern[match.end():]
    expanded = []
    for option in match.group(1).split(","):
        expanded.extend(expand_braces(head + option + tail))
    return expanded


def find(execution: Execution, directory: str = ".") -> List[SourceFile]:
    """
    Find the source files an execution covers.

    Args:
        execution: Current execution.
        directory: Directory the include patterns are relative to.

    Returns:
        SourceFile objects sorted by filename.
    """
    if execution.read_from_stdin:
        return [SourceFile(filename=directory, content=sys.stdin.read())]

    # a single file argument is already listed in `included` as given
    base = Path(directory)
    if base.is_file():
        base = Path(".")

    paths = find_paths(execution.included, base, execution.excluded)
    logger.info(f"Discovered {len(paths)} source files in {base}")
    return [SourceFile.read(path, _display_name(path, base)) for path in paths]


def find_paths(
    included: Sequence[str],
    base: Path,
    excluded: Sequence[str] = (),
) -> List[Path]:
    """Expand include patterns below base, minus excluded ones."""
    found = {}

    for pattern in included:
        for expanded in expand_braces(pattern):
            for path in _glob(base, expanded):
                if path.is_file() and not _is_excluded(path, base, excluded):
                    found[path.resolve()] = path

    return sorted(found.values(), key=str)


def _glob(base: Path, pattern: str) -> List[Path]:
    candidate = Path(pattern)
    if candidate.is_absolute():
        if candidate.is_file():
            return [candidate]
        base, pattern = Path(candidate.anchor), str(candidate.relative_to(candidate.anchor))

    if pattern.startswith("./"):
        pattern = pattern[2:]

    direct = base / pattern
    if direct.is_file():
        return [direct]
    if direct.is_dir():
        return list(direct.rglob("*.ex")) + list(direct.rglob("*.exs"))

    return list(base.glob(pattern))


def _is_excluded(path: Path, base: Path, excluded: Sequence[str]) -> bool:
    name = _display_name(path, base)

    for pattern in excluded:
        for expanded in expand_braces(pattern):
            expanded = expanded[2:] if expanded.startswith("./") else expanded
            if expanded.endswith("/") and name.startswith(expanded):
                return True
            if fnmatch.fnmatch(name, expanded):
                return True
    return False


def _display_name(path: Path, base: Path) -> str:
    try:
        return path.relative_to(base).as_posix()
    except ValueError:
        return str(path)


def find_requires(patterns: Sequence[str], base: Path = Path(".")) -> List[Path]:
    """Resolve `requires` patterns to existing files."""
    paths = find_paths(patterns, base)

    for pattern in patterns:
        if not any(_glob(base, p) for p in expand_braces(pattern)):
            logger.warning(f"No files match required pattern: {pattern}")

    return paths


def require_file(path: Path) -> None:
    """
    Execute a Python file so the checks it defines register themselves.

    Raises:
        RequireError: If the file cannot be loaded or raises.
    """
    module_name = f"exlint_requires_{Path(path).stem}"
    spec = importlib.util.spec_from_file_location(module_name, str(path))
    if spec is None or spec.loader is None:
        raise RequireError(str(path), "not a loadable Python file")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        del sys.modules[module_name]
        raise RequireError(str(path), str(e)) from e

    logger.debug(f"Required {path}")
