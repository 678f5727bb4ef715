"""Integration tests for the generate commands."""

import importlib.util
import unittest

import pytest
from click.testing import CliRunner

from docassert.cli import main


@pytest.fixture
def runner():
    """Create a CLI runner."""
    return CliRunner()


@pytest.fixture
def calculator_file(tmp_path, calculator_source):
    """Write the calculator module to disk."""
    source = tmp_path / "calculator_cli.py"
    source.write_text(calculator_source)
    return source


@pytest.fixture
def metadata_file(tmp_path, calculator_yaml):
    """Write the calculator metadata to disk."""
    path = tmp_path / "calculator.yaml"
    path.write_text(calculator_yaml)
    return path


class TestGenerateCommand:
    def test_text_output_default(self, runner, calculator_file):
        result = runner.invoke(
            main, ["generate", "Calculator", "--source-file", str(calculator_file)]
        )

        assert result.exit_code == 0, result.output
        assert "from calculator_cli import Calculator" in result.output
        assert "class CalculatorTest(SkeletonTestCase):" in result.output
        assert "def testAdd2(self):" in result.output
        assert "def testReset(self):" in result.output

    def test_ns_class(self, runner, calculator_file):
        result = runner.invoke(
            main, ["generate", "ns-class", "--source-file", str(calculator_file)]
        )

        assert result.exit_code == 0, result.output
        assert "class BaseTest(SkeletonTestCase):" in result.output

    def test_custom_test_class_name(self, runner, calculator_file):
        result = runner.invoke(
            main,
            [
                "generate",
                "Calculator",
                "--source-file",
                str(calculator_file),
                "--test-class-name",
                "CalculatorSpec",
            ],
        )

        assert result.exit_code == 0
        assert "class CalculatorSpec(SkeletonTestCase):" in result.output

    def test_file_output_default_location(self, runner, calculator_file):
        result = runner.invoke(
            main,
            ["generate", "Calculator", "--source-file", str(calculator_file), "--format", "file"],
        )

        assert result.exit_code == 0, result.output
        expected = calculator_file.parent / ".~unit-tests" / "test_calculator.py"
        assert expected.exists()
        assert "Generated:" in result.output

    def test_file_output_explicit_path(self, runner, calculator_file, tmp_path):
        output = tmp_path / "out" / "nested" / "test_calc.py"
        result = runner.invoke(
            main,
            [
                "generate",
                "Calculator",
                "--source-file",
                str(calculator_file),
                "--format",
                "file",
                "--output",
                str(output),
            ],
        )

        assert result.exit_code == 0, result.output
        assert output.exists()
        compile(output.read_text(), str(output), "exec")

    def test_generated_tests_run_green(self, runner, calculator_file, tmp_path, monkeypatch):
        """Generated tests should pass against the annotated class."""
        output = tmp_path / "test_calculator_generated.py"
        result = runner.invoke(
            main,
            [
                "generate",
                "Calculator",
                "--source-file",
                str(calculator_file),
                "--format",
                "file",
                "--output",
                str(output),
            ],
        )
        assert result.exit_code == 0, result.output

        monkeypatch.syspath_prepend(str(tmp_path))
        spec = importlib.util.spec_from_file_location("test_calculator_generated", output)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)

        suite = unittest.defaultTestLoader.loadTestsFromTestCase(module.CalculatorTest)
        outcome = unittest.TestResult()
        suite.run(outcome)

        assert outcome.errors == []
        assert outcome.failures == []
        assert outcome.testsRun == 7
        assert len(outcome.skipped) == 1  # reset has no @assert tag

    def test_unknown_class(self, runner, calculator_file):
        result = runner.invoke(
            main, ["generate", "Missing", "--source-file", str(calculator_file)]
        )

        assert result.exit_code == 2
        assert "Could not find class" in result.output

    def test_unsupported_operator(self, runner, tmp_path):
        source = tmp_path / "finder_cli.py"
        source.write_text(
            'class Finder:\n'
            '    def find(self, pattern):\n'
            '        """@assert (\'x\') regexmatch /x/"""\n'
        )

        result = runner.invoke(main, ["generate", "Finder", "--source-file", str(source)])

        assert result.exit_code == 1
        assert "regexmatch" in result.output
        assert "class FinderTest" not in result.output

    def test_template_dir_override(self, runner, calculator_file, tmp_path):
        templates = tmp_path / "templates"
        templates.mkdir()
        (templates / "Incomplete.py.j2").write_text("\n    # TODO test{{ methodName }}\n")

        result = runner.invoke(
            main,
            [
                "generate",
                "Calculator",
                "--source-file",
                str(calculator_file),
                "--template-dir",
                str(templates),
            ],
        )

        assert result.exit_code == 0, result.output
        assert "# TODO testReset" in result.output

    def test_missing_template(self, runner, calculator_file, tmp_path):
        templates = tmp_path / "templates"
        templates.mkdir()
        (templates / "TestClass.py.j2").write_text("{{ undefined_variable }}")

        result = runner.invoke(
            main,
            [
                "generate",
                "Calculator",
                "--source-file",
                str(calculator_file),
                "--template-dir",
                str(templates),
            ],
        )

        assert result.exit_code == 2
        assert "Template error" in result.output


class TestGenerateFromMetadataCommand:
    def test_text_output(self, runner, metadata_file):
        result = runner.invoke(main, ["generate-from-metadata", str(metadata_file)])

        assert result.exit_code == 0, result.output
        assert "from calculator import Calculator" in result.output
        assert "self.object = Calculator(10)" in result.output

    def test_file_output_next_to_metadata(self, runner, metadata_file):
        result = runner.invoke(
            main, ["generate-from-metadata", str(metadata_file), "--format", "file"]
        )

        assert result.exit_code == 0, result.output
        assert (metadata_file.parent / ".~unit-tests" / "test_calculator.py").exists()

    def test_validation_error(self, runner, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("methods: []\n")

        result = runner.invoke(main, ["generate-from-metadata", str(path)])

        assert result.exit_code == 2
        assert "Metadata validation error" in result.output
        assert "class" in result.output

    def test_invalid_yaml(self, runner, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("class: [unclosed")

        result = runner.invoke(main, ["generate-from-metadata", str(path)])

        assert result.exit_code == 2
        assert "Invalid YAML" in result.output

    def test_parse_error(self, runner, tmp_path):
        path = tmp_path / "parse.yaml"
        path.write_text(
            "class: Calculator\n"
            "methods:\n"
            "  - name: add\n"
            "    doc: '@assert (1, 2)'\n"
        )

        result = runner.invoke(main, ["generate-from-metadata", str(path)])

        assert result.exit_code == 1
        assert "Annotation error" in result.output

    def test_nonexistent_file(self, runner):
        result = runner.invoke(main, ["generate-from-metadata", "/nonexistent/file.yaml"])

        assert result.exit_code == 2
