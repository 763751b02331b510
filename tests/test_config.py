"""
Unit tests for configuration loading and resolution.
"""

import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from exlint.core.config import (
    CATCH_ALL_INCLUDED,
    DEFAULT_SIDE_CONFIG_PATH,
    apply_switches,
    is_unconfigured,
    load_json_config,
    set_defaults,
    set_include_paths,
    side_config_path,
    to_execution,
    update_include_paths,
)
from exlint.core.config_file import CONFIG_FILENAME, ConfigFile
from exlint.core.exceptions import ConfigurationError
from exlint.core.execution import DEFAULT_INCLUDED, Execution, SourceFiles


def _with_included(*included):
    return Execution(files=SourceFiles(included=tuple(included)))


class ConfigTestCase(unittest.TestCase):
    """Creates a temporary project directory."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.root = Path(self.tmpdir.name)

    def tearDown(self):
        self.tmpdir.cleanup()

    def write(self, relative: str, content) -> Path:
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if not isinstance(content, str):
            content = json.dumps(content)
        path.write_text(content)
        return path


class TestSideConfig(ConfigTestCase):
    """Tests for the Code Climate side config."""

    def test_missing_file(self):
        self.assertEqual(load_json_config(str(self.root / "config.json")), {})

    def test_valid_file(self):
        path = self.write("config.json", {"include_paths": ["lib/"]})

        self.assertEqual(load_json_config(str(path)), {"include_paths": ["lib/"]})

    def test_malformed_file_is_ignored(self):
        path = self.write("config.json", "{include_paths: ")

        self.assertEqual(load_json_config(str(path)), {})

    def test_invalid_utf8_is_ignored(self):
        path = self.root / "config.json"
        path.write_bytes(b'{"include_paths": ["\xff\xfe"]}')

        self.assertEqual(load_json_config(str(path)), {})

    def test_deeply_nested_file_is_ignored(self):
        path = self.write("config.json", "[" * 200000)

        self.assertEqual(load_json_config(str(path)), {})

    def test_unreadable_file_is_ignored(self):
        path = self.write("config.json", {"include_paths": ["lib/"]})

        with mock.patch("exlint.core.config.open", create=True,
                        side_effect=PermissionError("denied")):
            self.assertEqual(load_json_config(str(path)), {})

    def test_non_object_is_ignored(self):
        path = self.write("config.json", ["lib/"])

        self.assertEqual(load_json_config(str(path)), {})

    def test_path_from_environment(self):
        with mock.patch.dict(os.environ, {"EXLINT_ENGINE_CONFIG": "/tmp/engine.json"}):
            self.assertEqual(side_config_path(), "/tmp/engine.json")

        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(side_config_path(), DEFAULT_SIDE_CONFIG_PATH)


class TestDefaults(unittest.TestCase):
    """Tests for the default overrides."""

    def test_fills_unset_fields(self):
        execution = set_defaults(Execution())

        self.assertFalse(execution.crash_on_error)
        self.assertTrue(execution.all)
        self.assertEqual(execution.min_priority, -99)

    def test_keeps_explicit_values(self):
        execution = set_defaults(Execution(crash_on_error=True, all=False, min_priority=3))

        self.assertTrue(execution.crash_on_error)
        self.assertFalse(execution.all)
        self.assertEqual(execution.min_priority, 3)

    def test_returns_new_value(self):
        original = Execution()
        set_defaults(original)

        self.assertIsNone(original.min_priority)

    def test_apply_switches(self):
        execution = apply_switches(Execution(), {"checks": "Readability", "strict": True})

        self.assertEqual(execution.match_checks, "Readability")
        self.assertTrue(execution.strict)


class TestIncludePaths(unittest.TestCase):
    """Tests for narrowing `included` to the side config's include paths."""

    def test_unconfigured_shapes(self):
        self.assertTrue(is_unconfigured(CATCH_ALL_INCLUDED))
        self.assertTrue(is_unconfigured(DEFAULT_INCLUDED))
        self.assertTrue(is_unconfigured((
            "lib/**/*.ex", "src/**/*.ex", "web/**/*.ex", "apps/**/*.ex",
        )))

    def test_customized_shapes(self):
        self.assertFalse(is_unconfigured(("lib/",)))
        self.assertFalse(is_unconfigured(("lib/", "src/", "web/")))
        self.assertFalse(is_unconfigured(("src/", "lib/", "web/", "apps/")))
        self.assertFalse(is_unconfigured(("./**/*.ex",)))
        self.assertFalse(is_unconfigured(CATCH_ALL_INCLUDED + ("lib/",)))

    def test_update_include_paths(self):
        self.assertEqual(
            update_include_paths(["lib/", "other.ex", "deps/"]),
            ("lib/**/*.{ex,exs}", "other.ex"),
        )

    def test_drops_build_and_non_sources(self):
        self.assertEqual(
            update_include_paths(["build/", "mix.exs", "README.md", "config/", 3]),
            ("mix.exs", "config/**/*.{ex,exs}"),
        )

    def test_rewrites_default_included(self):
        execution = set_include_paths(
            Execution(),
            {"include_paths": ["lib/", "other.ex", "deps/"]},
        )

        self.assertEqual(execution.included, ("lib/**/*.{ex,exs}", "other.ex"))

    def test_rewrites_catch_all_included(self):
        execution = set_include_paths(
            _with_included(*CATCH_ALL_INCLUDED),
            {"include_paths": ["test/"]},
        )

        self.assertEqual(execution.included, ("test/**/*.{ex,exs}",))

    def test_keeps_customized_included(self):
        execution = _with_included("lib/my_app/")

        result = set_include_paths(execution, {"include_paths": ["lib/", "other.ex"]})

        self.assertEqual(result.included, ("lib/my_app/",))

    def test_requires_include_paths_list(self):
        for json_config in ({}, {"include_paths": "lib/"}, {"other": ["lib/"]}):
            with self.subTest(json_config=json_config):
                execution = set_include_paths(Execution(), json_config)
                self.assertEqual(execution.included, DEFAULT_INCLUDED)


class TestConfigFile(ConfigTestCase):
    """Tests for reading project configuration files."""

    def test_default_without_file(self):
        execution = ConfigFile.read_or_default(str(self.root))

        self.assertEqual(execution.included, DEFAULT_INCLUDED)
        self.assertIsNone(execution.checks)
        self.assertIsNone(execution.min_priority)
        self.assertEqual(execution.requires, ())

    def test_reads_default_profile(self):
        self.write(CONFIG_FILENAME, {"configs": [{
            "name": "default",
            "files": {"included": ["lib/"], "excluded": ["lib/vendor/"]},
            "requires": ["checks/*.py"],
            "strict": True,
            "min_priority": 2,
            "checks": [["Readability.MaxLineLength", {"max_length": 80}], "Design.TagTODO"],
        }]})

        execution = ConfigFile.read_or_default(str(self.root))

        self.assertEqual(execution.included, ("lib/",))
        self.assertEqual(execution.excluded, ("lib/vendor/",))
        self.assertEqual(execution.requires, ("checks/*.py",))
        self.assertTrue(execution.strict)
        self.assertEqual(execution.min_priority, 2)
        self.assertEqual(
            execution.checks,
            (("Readability.MaxLineLength", {"max_length": 80}), ("Design.TagTODO", {})),
        )

    def test_named_profile(self):
        self.write(CONFIG_FILENAME, {"configs": [
            {"name": "default", "strict": False},
            {"name": "ci", "strict": True},
        ]})

        self.assertTrue(ConfigFile.read_or_default(str(self.root), "ci").strict)
        self.assertFalse(ConfigFile.read_or_default(str(self.root)).strict)

    def test_missing_profile_falls_back_to_default(self):
        self.write(CONFIG_FILENAME, {"configs": [{"name": "default", "strict": True}]})

        with self.assertLogs("exlint.core.config_file", level="WARNING"):
            execution = ConfigFile.read_or_default(str(self.root), "nope")

        self.assertTrue(execution.strict)

    def test_config_subdirectory_overrides_root(self):
        self.write(CONFIG_FILENAME, {"configs": [{
            "name": "default",
            "strict": True,
            "files": {"included": ["lib/"], "excluded": ["lib/old/"]},
        }]})
        self.write(f"config/{CONFIG_FILENAME}", {"configs": [{
            "name": "default",
            "files": {"included": ["src/"]},
        }]})

        execution = ConfigFile.read_or_default(str(self.root))

        self.assertTrue(execution.strict)
        self.assertEqual(execution.included, ("src/",))
        self.assertEqual(execution.excluded, ("lib/old/",))

    def test_single_file(self):
        source = self.write("lib/foo.ex", "defmodule Foo do\nend\n")

        execution = ConfigFile.read_or_default(str(source))

        self.assertEqual(execution.included, (str(source),))
        self.assertEqual(execution.excluded, ())

    def test_invalid_json(self):
        self.write(CONFIG_FILENAME, "{configs: []")

        with self.assertRaises(ConfigurationError):
            ConfigFile.read_or_default(str(self.root))

    def test_invalid_structure(self):
        invalid = [
            [],
            {"configs": {}},
            {"configs": ["default"]},
            {"configs": [{"files": {"included": "lib/"}}]},
            {"configs": [{"strict": "yes"}]},
            {"configs": [{"min_priority": "high"}]},
            {"configs": [{"checks": [["Design.TagTODO"]]}]},
        ]
        for data in invalid:
            with self.subTest(data=data):
                self.write(CONFIG_FILENAME, data)
                with self.assertRaises(ConfigurationError):
                    ConfigFile.read_or_default(str(self.root))

    def test_save_to_file_round_trips(self):
        path = self.root / CONFIG_FILENAME

        ConfigFile.save_to_file(path)
        execution = ConfigFile.read_or_default(str(self.root))

        self.assertEqual(execution.included, DEFAULT_INCLUDED)
        self.assertIn("Readability.MaxLineLength", [name for name, _ in execution.checks])


class TestToExecution(ConfigTestCase):
    """Tests for the complete resolution."""

    def test_merges_all_layers(self):
        side_config = self.write("engine.json", {"include_paths": ["lib/", "deps/"]})

        execution = to_execution(
            str(self.root),
            {"verbose": True, "min_priority": 1},
            args=("extra",),
            side_config=str(side_config),
        )

        self.assertTrue(execution.verbose)
        self.assertEqual(execution.min_priority, 1)
        self.assertTrue(execution.all)
        self.assertFalse(execution.crash_on_error)
        self.assertEqual(execution.included, ("lib/**/*.{ex,exs}",))
        self.assertEqual(execution.args, ("extra",))

    def test_strips_line_number(self):
        source = self.write("lib/foo.ex", "defmodule Foo do\nend\n")

        execution = to_execution(
            f"{source}:2:1",
            {},
            side_config=str(self.root / "missing.json"),
        )

        self.assertEqual(execution.included, (str(source),))

    def test_config_name_switch(self):
        self.write(CONFIG_FILENAME, {"configs": [
            {"name": "default"},
            {"name": "ci", "crash_on_error": True},
        ]})

        execution = to_execution(
            str(self.root),
            {"config_name": "ci"},
            side_config=str(self.root / "missing.json"),
        )

        self.assertTrue(execution.crash_on_error)
        self.assertEqual(execution.config_name, "ci")

    def test_config_error_propagates(self):
        self.write(CONFIG_FILENAME, "not json")

        with self.assertRaises(ConfigurationError):
            to_execution(str(self.root), {}, side_config=str(self.root / "missing.json"))


if __name__ == "__main__":
    unittest.main()
