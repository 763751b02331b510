"""
Configuration resolution for a single run.

Builds the Execution handed to a command from four layers, lowest
priority first: built-in defaults, the project configuration file,
the command-line switches, and the Code Climate side config (which
can only narrow `included` when the project left it unconfigured).
"""

import json
import logging
import os
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Tuple

from exlint.cli.filename import remove_line_no_and_column
from exlint.core.config_file import ConfigFile
from exlint.core.exceptions import ConfigurationError
from exlint.core.execution import Execution

logger = logging.getLogger(__name__)

# Code Climate mounts the engine configuration here.
DEFAULT_SIDE_CONFIG_PATH = "/config.json"
SIDE_CONFIG_ENV = "EXLINT_ENGINE_CONFIG"

SOURCE_GLOB_SUFFIX = "**/*.{ex,exs}"
SOURCE_EXTENSIONS = (".ex", ".exs")

# `included` values that mean the user never customized it
CATCH_ALL_INCLUDED = ("./**/*.{ex,exs}",)
DEFAULT_DIR_PREFIXES = ("lib/", "src/", "web/", "apps/")

SKIPPED_INCLUDE_PATHS = ("deps/", "build/")

DEFAULT_OVERRIDES = {
    "crash_on_error": False,
    "all": True,
    "min_priority": -99,
}

# switch name -> Execution field
SWITCH_FIELDS = {
    "all": "all",
    "all_priorities": "all_priorities",
    "checks": "match_checks",
    "config_name": "config_name",
    "crash_on_error": "crash_on_error",
    "format": "format",
    "help": "help",
    "ignore_checks": "ignore_checks",
    "min_priority": "min_priority",
    "read_from_stdin": "read_from_stdin",
    "strict": "strict",
    "verbose": "verbose",
    "version": "version",
}


def side_config_path() -> str:
    """Location of the side config, overridable through the environment."""
    return os.getenv(SIDE_CONFIG_ENV) or DEFAULT_SIDE_CONFIG_PATH


def to_execution(
    directory: str,
    switches: Mapping[str, Any],
    args: Sequence[str] = (),
    side_config: Optional[str] = None,
) -> Execution:
    """
    Resolve the Execution for a run.

    Args:
        directory: Working directory argument, possibly with a
            `:line:column` suffix.
        switches: Switches given on the command line.
        args: Arguments passed through to the command.
        side_config: Path of the side config; defaults to
            side_config_path().

    Returns:
        The merged Execution.

    Raises:
        ConfigurationError: If the project configuration is invalid.
    """
    json_config = load_json_config(side_config)

    execution = ConfigFile.read_or_default(
        remove_line_no_and_column(directory),
        switches.get("config_name"),
    )
    execution = apply_switches(execution, switches)
    execution = set_defaults(execution)
    execution = set_include_paths(execution, json_config)

    return replace(execution, args=tuple(args))


def load_json_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the side config.

    A missing, unreadable or malformed file, or one that does not hold a
    JSON object, yields an empty dict.
    """
    path = Path(path or side_config_path())
    if not path.is_file():
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.loads(f.read())
    except OSError as e:
        logger.warning(f"Ignoring unreadable side config {path}: {e}")
        return {}
    except (ValueError, RecursionError) as e:
        logger.warning(f"Ignoring malformed side config {path}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Ignoring side config {path}: not a JSON object")
        return {}

    return data


def apply_switches(execution: Execution, switches: Mapping[str, Any]) -> Execution:
    """Override execution fields with command-line switches."""
    changes = {}
    for name, value in switches.items():
        if name not in SWITCH_FIELDS:
            raise ConfigurationError(f"Unknown switch: {name}")
        changes[SWITCH_FIELDS[name]] = value

    return replace(execution, **changes)


def set_defaults(execution: Execution) -> Execution:
    """Fill in DEFAULT_OVERRIDES for fields nobody set explicitly."""
    changes = {
        key: value
        for key, value in DEFAULT_OVERRIDES.items()
        if getattr(execution, key) is None
    }
    return replace(execution, **changes)


def set_include_paths(execution: Execution, json_config: Mapping[str, Any]) -> Execution:
    """
    Narrow `included` to the side config's `include_paths`.

    Only applies while `included` still has one of its unconfigured
    shapes; a customized `included` is always left alone.
    """
    paths = json_config.get("include_paths")
    if not isinstance(paths, list):
        return execution

    if not is_unconfigured(execution.included):
        logger.debug("Keeping customized include patterns")
        return execution

    included = update_include_paths(paths)
    logger.debug(f"Using include paths from side config: {included}")

    files = replace(execution.files, included=included)
    return replace(execution, files=files)


def is_unconfigured(included: Sequence[str]) -> bool:
    """Whether `included` is one of the two default shapes."""
    included = tuple(included)

    if included == CATCH_ALL_INCLUDED:
        return True

    return len(included) == len(DEFAULT_DIR_PREFIXES) and all(
        isinstance(pattern, str) and pattern.startswith(prefix)
        for pattern, prefix in zip(included, DEFAULT_DIR_PREFIXES)
    )


def update_include_paths(paths: Iterable[Any]) -> Tuple[str, ...]:
    """Turn Code Climate include paths into include patterns."""
    included = []

    for path in paths:
        if not isinstance(path, str) or path in SKIPPED_INCLUDE_PATHS:
            continue

        if path.endswith("/"):
            included.append(path + SOURCE_GLOB_SUFFIX)
        elif path.endswith(SOURCE_EXTENSIONS):
            included.append(path)

    return tuple(included)
