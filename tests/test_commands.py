"""
Unit tests for the commands.
"""

import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from dataclasses import replace
from pathlib import Path

from exlint import __version__
from exlint.commands import (
    OK,
    CategoriesCommand,
    CodeClimateCommand,
    ExplainCommand,
    Failure,
    GenCheckCommand,
    GenConfigCommand,
    HelpCommand,
    ListCommand,
    SuggestCommand,
    VersionCommand,
    result_for,
)
from exlint.commands.gen_check import class_name_for
from exlint.core.config import set_defaults
from exlint.core.config_file import CONFIG_FILENAME, ConfigFile
from exlint.core.exceptions import SourceError
from exlint.core.execution import Execution
from exlint.core.issue import Category


class CommandTestCase(unittest.TestCase):
    """Creates a small project and captures command output."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.root = Path(self.tmpdir.name)
        self.write("lib/clean.ex", "defmodule Clean do\n  :ok\nend\n")
        self.write("lib/dirty.ex", "defmodule Dirty do \n  # TODO: split\n  :ok\nend\n")

    def tearDown(self):
        self.tmpdir.cleanup()

    def write(self, relative: str, content: str) -> Path:
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    def execution(self, directory=None, **changes) -> Execution:
        execution = set_defaults(ConfigFile.read_or_default(str(directory or self.root)))
        return replace(execution, **changes)

    def run_command(self, command, directory, execution):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            result = command.run(str(directory), execution)
        return result, out.getvalue(), err.getvalue()


class TestResults(unittest.TestCase):

    def test_result_for(self):
        self.assertIs(result_for([]), OK)
        self.assertIsInstance(result_for(["issue"]), Failure)


class TestInformationalCommands(CommandTestCase):
    """Tests for help, version and categories."""

    def test_help(self):
        result, out, _ = self.run_command(HelpCommand(), ".", Execution())

        self.assertIs(result, OK)
        self.assertIn("gen.config", out)
        self.assertIn("--min-priority", out)

    def test_version(self):
        result, out, _ = self.run_command(VersionCommand(), ".", Execution())

        self.assertIs(result, OK)
        self.assertEqual(out.strip(), __version__)

    def test_categories(self):
        result, out, _ = self.run_command(CategoriesCommand(), ".", Execution())

        self.assertIs(result, OK)
        for category in Category:
            self.assertIn(category.label, out)


class TestAnalysisCommands(CommandTestCase):
    """Tests for list, suggest, explain and codeclimate."""

    def test_list(self):
        result, out, _ = self.run_command(ListCommand(), self.root, self.execution())

        self.assertIsInstance(result, Failure)
        self.assertEqual(
            {issue.check for issue in result.issues},
            {"Consistency.TrailingWhitespace", "Design.TagTODO"},
        )
        self.assertIn("[C] lib/dirty.ex:1:19", out)

    def test_list_json(self):
        execution = self.execution(format="json")

        _, out, _ = self.run_command(ListCommand(), self.root, execution)

        self.assertEqual(len(json.loads(out)["issues"]), 2)

    def test_list_clean_project(self):
        (self.root / "lib" / "dirty.ex").unlink()

        result, out, _ = self.run_command(ListCommand(), self.root, self.execution())

        self.assertIs(result, OK)
        self.assertEqual(out, "")

    def test_suggest(self):
        result, out, _ = self.run_command(SuggestCommand(), self.root, self.execution())

        self.assertIsInstance(result, Failure)
        self.assertIn("Consistency (1)", out)
        self.assertIn("Design (1)", out)
        self.assertIn("Analyzed 2 source files, found 2 issues.", out)

    def test_suggest_limits_issues_per_category(self):
        self.write("lib/many.ex", "".join(f"x = {i} \n" for i in range(8)))
        execution = self.execution(all=False)

        result, out, _ = self.run_command(SuggestCommand(), self.root, execution)

        self.assertEqual(len(result.issues), 10)
        self.assertIn("... and 4 more", out)

    def test_explain(self):
        target = self.root / "lib" / "dirty.ex"
        directory = f"{target}:2"

        result, out, _ = self.run_command(
            ExplainCommand(), directory, self.execution(target)
        )

        self.assertIs(result, OK)
        self.assertIn("Design.TagTODO", out)
        self.assertNotIn("TrailingWhitespace", out)

    def test_explain_without_issues(self):
        target = self.root / "lib" / "clean.ex"

        result, out, _ = self.run_command(
            ExplainCommand(), f"{target}:1:1", self.execution(target)
        )

        self.assertIs(result, OK)
        self.assertIn("No issues found", out)

    def test_explain_missing_file(self):
        with self.assertRaises(SourceError):
            self.run_command(ExplainCommand(), "lib/missing.ex:3", Execution())

    def test_codeclimate(self):
        result, out, _ = self.run_command(CodeClimateCommand(), self.root, self.execution())

        self.assertIs(result, OK)
        documents = [json.loads(d) for d in out.split("\0") if d]
        self.assertEqual(len(documents), 2)
        self.assertTrue(all(d["location"]["path"] == "lib/dirty.ex" for d in documents))


class TestGeneratorCommands(CommandTestCase):
    """Tests for gen.config and gen.check."""

    def test_gen_config(self):
        result, out, _ = self.run_command(GenConfigCommand(), self.root, Execution())

        self.assertIs(result, OK)
        data = json.loads((self.root / CONFIG_FILENAME).read_text())
        self.assertEqual(data["configs"][0]["name"], "default")

    def test_gen_config_does_not_overwrite(self):
        self.write(CONFIG_FILENAME, '{"configs": []}')

        _, _, err = self.run_command(GenConfigCommand(), self.root, Execution())

        self.assertIn("already exists", err)
        self.assertEqual((self.root / CONFIG_FILENAME).read_text(), '{"configs": []}')

    def test_gen_check(self):
        target = self.root / "checks" / "no_io_inspect.py"

        result, _, _ = self.run_command(
            GenCheckCommand(), target, Execution(args=(str(target),))
        )

        self.assertIs(result, OK)
        content = target.read_text()
        self.assertIn("class NoIoInspect(BaseCheck):", content)
        self.assertIn('NAME = "Custom.NoIoInspect"', content)
        compile(content, str(target), "exec")

    def test_gen_check_requires_filename(self):
        _, _, err = self.run_command(GenCheckCommand(), ".", Execution())

        self.assertIn("Please provide a filename", err)

    def test_class_name_for(self):
        self.assertEqual(class_name_for(Path("lib/no_io_inspect.py")), "NoIoInspect")
        self.assertEqual(class_name_for(Path("2fast.py")), "Check2fast")


if __name__ == "__main__":
    unittest.main()
