"""
Project configuration source.

Reads `.exlint.json` from a project directory (and its `config/`
subdirectory) and turns the selected profile into an Execution.
When no file exists a structural default is returned.
"""

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Optional

from exlint.analysis import CheckRegistry
from exlint.core.exceptions import ConfigurationError
from exlint.core.execution import Execution, SourceFiles

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".exlint.json"
DEFAULT_CONFIG_NAME = "default"

# Subdirectories searched after the project root; later files win.
CONFIG_SUBDIRS = ("", "config")

_BOOL_KEYS = ("all", "all_priorities", "crash_on_error", "strict")
_INT_KEYS = ("min_priority",)


class ConfigFile:
    """Loads project configuration profiles."""

    @classmethod
    def read_or_default(cls, directory: str, config_name: Optional[str] = None) -> Execution:
        """
        Read the project configuration for a directory.

        Args:
            directory: Project directory, or a single source file.
            config_name: Profile to select; defaults to "default".

        Returns:
            Execution built from the selected profile, or the default.

        Raises:
            ConfigurationError: If a config file exists but is invalid.
        """
        path = Path(directory)
        single_file = path.is_file()
        base_dir = path.parent if single_file else path

        profiles = cls._load_profiles(base_dir)
        profile = cls._select_profile(profiles, config_name)
        execution = cls._profile_to_execution(profile)

        if single_file:
            files = SourceFiles(included=(str(directory),), excluded=())
            execution = replace(execution, files=files)

        return execution

    @classmethod
    def _load_profiles(cls, base_dir: Path) -> Dict[str, Dict[str, Any]]:
        profiles: Dict[str, Dict[str, Any]] = {}

        for subdir in CONFIG_SUBDIRS:
            config_path = base_dir / subdir / CONFIG_FILENAME
            if not config_path.is_file():
                continue

            logger.debug(f"Loading configuration from {config_path}")
            for profile in cls.load_from_file(config_path):
                name = profile["name"]
                merged = profiles.setdefault(name, {})
                _merge_profile(merged, profile)

        return profiles

    @staticmethod
    def load_from_file(config_path: Path) -> List[Dict[str, Any]]:
        """
        Load the list of profiles from a configuration file.

        Args:
            config_path: Path to the configuration file.

        Returns:
            List of profile dictionaries, each with a "name" key.
        """
        try:
            with open(config_path, "r") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in {config_path}: {e}",
                details={"path": str(config_path)},
            )
        except OSError as e:
            raise ConfigurationError(
                f"Could not read {config_path}: {e}",
                details={"path": str(config_path)},
            )

        if not isinstance(data, dict) or not isinstance(data.get("configs"), list):
            raise ConfigurationError(
                f"{config_path} must contain an object with a \"configs\" list",
                details={"path": str(config_path)},
            )

        profiles = []
        for entry in data["configs"]:
            if not isinstance(entry, dict):
                raise ConfigurationError(
                    f"Every entry of \"configs\" in {config_path} must be an object",
                    details={"path": str(config_path)},
                )
            profile = dict(entry)
            profile.setdefault("name", DEFAULT_CONFIG_NAME)
            profiles.append(profile)

        return profiles

    @staticmethod
    def _select_profile(
        profiles: Dict[str, Dict[str, Any]], config_name: Optional[str]
    ) -> Dict[str, Any]:
        name = config_name or DEFAULT_CONFIG_NAME

        if name in profiles:
            return profiles[name]

        if config_name:
            logger.warning(
                f"Configuration profile '{config_name}' not found, "
                f"using '{DEFAULT_CONFIG_NAME}'"
            )

        return profiles.get(DEFAULT_CONFIG_NAME, {})

    @staticmethod
    def _profile_to_execution(profile: Dict[str, Any]) -> Execution:
        """Convert a profile dictionary to an Execution."""
        kwargs: Dict[str, Any] = {}

        files = profile.get("files", {})
        if not isinstance(files, dict):
            raise ConfigurationError("\"files\" must be an object")
        defaults = SourceFiles()
        kwargs["files"] = SourceFiles(
            included=_string_tuple(files, "included", defaults.included),
            excluded=_string_tuple(files, "excluded", defaults.excluded),
        )

        kwargs["requires"] = _string_tuple(profile, "requires", ())

        if "checks" in profile:
            kwargs["checks"] = _parse_checks(profile["checks"])

        for key in _BOOL_KEYS:
            if key in profile:
                if not isinstance(profile[key], bool):
                    raise ConfigurationError(f"\"{key}\" must be true or false")
                kwargs[key] = profile[key]

        for key in _INT_KEYS:
            if key in profile:
                value = profile[key]
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ConfigurationError(f"\"{key}\" must be an integer")
                kwargs[key] = value

        return Execution(**kwargs)

    @staticmethod
    def default_profile() -> Dict[str, Any]:
        """Default profile, as written by `gen.config`."""
        files = SourceFiles()
        checks = []
        for name in CheckRegistry.list_checks():
            check_class = CheckRegistry.get_check_class(name)
            checks.append([name, dict(check_class.DEFAULT_PARAMS)])

        return {
            "name": DEFAULT_CONFIG_NAME,
            "files": {
                "included": list(files.included),
                "excluded": list(files.excluded),
            },
            "requires": [],
            "strict": False,
            "checks": checks,
        }

    @classmethod
    def save_to_file(cls, config_path: Path) -> None:
        """
        Write the default configuration to a file.

        Args:
            config_path: Path to save the configuration file.
        """
        config_path = Path(config_path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            json.dump({"configs": [cls.default_profile()]}, f, indent=2)
            f.write("\n")


def _merge_profile(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    for key, value in source.items():
        if key == "files" and isinstance(value, dict) and isinstance(target.get(key), dict):
            target[key] = {**target[key], **value}
        else:
            target[key] = value


def _string_tuple(data: Dict[str, Any], key: str, default: tuple) -> tuple:
    if key not in data:
        return default

    value = data[key]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigurationError(f"\"{key}\" must be a list of strings")
    return tuple(value)


def _parse_checks(value: Any) -> tuple:
    if not isinstance(value, list):
        raise ConfigurationError("\"checks\" must be a list")

    checks = []
    for entry in value:
        if isinstance(entry, str):
            checks.append((entry, {}))
        elif (
            isinstance(entry, list)
            and len(entry) == 2
            and isinstance(entry[0], str)
            and isinstance(entry[1], dict)
        ):
            checks.append((entry[0], dict(entry[1])))
        else:
            raise ConfigurationError(
                f"Invalid check entry: {entry!r}",
                details={"entry": entry},
            )
    return tuple(checks)
