"""Annotation layer: find, parse and map @assert tags."""

from .errors import AnnotationError, ParseError, UnsupportedOperatorError
from .extractor import extract_annotations, extract_constructor_args
from .models import PREFACE_SEPARATOR, ParsedAssertion, RawAnnotationTag
from .operators import (
    BOOLEAN_FLIPS,
    OPERATOR_KINDS,
    AssertionKind,
    map_operator,
    normalize_boolean,
)
from .parser import parse_assertion

__all__ = [
    # Errors
    "AnnotationError",
    "ParseError",
    "UnsupportedOperatorError",
    # Models
    "PREFACE_SEPARATOR",
    "ParsedAssertion",
    "RawAnnotationTag",
    # Extraction and parsing
    "extract_annotations",
    "extract_constructor_args",
    "parse_assertion",
    # Operators
    "AssertionKind",
    "BOOLEAN_FLIPS",
    "OPERATOR_KINDS",
    "map_operator",
    "normalize_boolean",
]
