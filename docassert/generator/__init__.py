"""Test generation module for docassert."""

from .assembler import build_test_class, generate, map_annotation, render_test_class
from .errors import RenderError
from .models import GeneratedClass, GeneratedMethod, MappedAssertion, TemplateKind
from .naming import MethodNamer, capitalize_first
from .renderer import JinjaRenderer, TemplateRenderer
from .templates import BOOLEAN_KINDS, select_template

__all__ = [
    "build_test_class",
    "generate",
    "map_annotation",
    "render_test_class",
    "RenderError",
    "GeneratedClass",
    "GeneratedMethod",
    "MappedAssertion",
    "TemplateKind",
    "MethodNamer",
    "capitalize_first",
    "JinjaRenderer",
    "TemplateRenderer",
    "BOOLEAN_KINDS",
    "select_template",
]
