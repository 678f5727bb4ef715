"""Tests for generator.renderer."""

import pytest

from docassert.generator.errors import RenderError
from docassert.generator.models import TemplateKind
from docassert.generator.renderer import JinjaRenderer


@pytest.fixture
def method_vars():
    return {
        "preface": "",
        "arguments": "2, 3",
        "assertion": "Equals",
        "expected": "5",
        "className": "Calculator",
        "origMethodName": "add",
        "methodName": "Add",
    }


class TestPackagedTemplates:
    @pytest.mark.parametrize("kind", list(TemplateKind))
    def test_every_template_kind_has_a_file(self, renderer, kind, method_vars):
        variables = {
            **method_vars,
            "namespace_declaration": "",
            "testClassName": "CalculatorTest",
            "constructorArgs": "",
            "methods": "",
            "date": "2024-05-17",
            "time": "09:30:15",
            "version": "0.1.0",
        }
        assert renderer.render(kind.value, variables)

    def test_generic(self, renderer, method_vars):
        output = renderer.render("Generic", method_vars)

        assert output.startswith("\n    def testAdd(self):\n")
        assert "        self.assertEquals(\n            5,\n            self.object.add(2, 3),\n        )\n" in output

    def test_generic_static_calls_class(self, renderer, method_vars):
        output = renderer.render("GenericStatic", method_vars)
        assert "Calculator.add(2, 3)" in output
        assert "self.object" not in output

    def test_boolean_has_single_argument(self, renderer, method_vars):
        output = renderer.render("Boolean", {**method_vars, "assertion": "NotEmpty", "expected": ""})
        assert "self.assertNotEmpty(self.object.add(2, 3))" in output

    def test_exception_uses_expected_as_exception(self, renderer, method_vars):
        output = renderer.render(
            "Exception", {**method_vars, "assertion": "Exception", "expected": "ZeroDivisionError"}
        )
        assert "with self.assertRaises(ZeroDivisionError):\n            self.object.add(2, 3)" in output

    def test_preface_rendered_as_comment(self, renderer, method_vars):
        output = renderer.render("Generic", {**method_vars, "preface": "First.\n        # Second."})
        assert "        # First.\n        # Second.\n\n        self.assertEquals(" in output

    def test_no_preface_no_comment(self, renderer, method_vars):
        output = renderer.render("Generic", method_vars)
        assert "#" not in output

    def test_incomplete(self, renderer):
        output = renderer.render(
            "Incomplete",
            {"className": "Calculator", "origMethodName": "reset", "methodName": "Reset"},
        )
        assert "def testReset(self):" in output
        assert "self.markTestIncomplete(" in output


class TestRendererErrors:
    def test_missing_template(self, renderer):
        with pytest.raises(RenderError) as exc_info:
            renderer.render("NoSuchTemplate", {})
        assert exc_info.value.template == "NoSuchTemplate"

    def test_missing_variable(self, renderer):
        with pytest.raises(RenderError):
            renderer.render("Incomplete", {"className": "Calculator"})


class TestTemplateDir:
    def test_user_template_overrides_packaged(self, tmp_path, method_vars):
        (tmp_path / "Generic.py.j2").write_text("custom {{ methodName }}")
        renderer = JinjaRenderer(tmp_path)

        assert renderer.render("Generic", method_vars) == "custom Add"

    def test_falls_back_to_packaged(self, tmp_path, method_vars):
        renderer = JinjaRenderer(tmp_path)
        assert "def testAdd" in renderer.render("Generic", method_vars)
