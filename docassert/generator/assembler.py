"""Assemble a test class from a class's @assert annotations."""

import logging
from datetime import datetime

from .. import __version__
from ..annotations.extractor import extract_annotations, extract_constructor_args
from ..annotations.models import RawAnnotationTag
from ..annotations.operators import map_operator, normalize_boolean
from ..annotations.parser import parse_assertion
from ..metadata.errors import MetadataUnavailableError
from ..metadata.models import ClassMetadata, SourceMethod
from .models import GeneratedClass, GeneratedMethod, MappedAssertion, TemplateKind
from .naming import MethodNamer
from .renderer import JinjaRenderer, TemplateRenderer
from .templates import select_template

logger = logging.getLogger(__name__)


def map_annotation(tag: RawAnnotationTag, is_static: bool = False) -> MappedAssertion:
    """Turn a raw tag into an assertion ready for rendering.

    Raises:
        ParseError: If the test expression is malformed.
        UnsupportedOperatorError: If the operator is unknown.
    """
    parsed = parse_assertion(tag.test_expression, raw=tag.raw)
    kind = map_operator(parsed.operator, raw=tag.raw)
    template = select_template(kind, is_static)
    kind, expected = normalize_boolean(kind, parsed.expected)

    return MappedAssertion(
        kind=kind,
        arguments=parsed.arguments,
        expected=expected,
        template=template,
        is_static=is_static,
    )


def build_test_class(
    metadata: ClassMetadata | None,
    renderer: TemplateRenderer | None = None,
    test_class_name: str | None = None,
    timestamp: datetime | None = None,
) -> GeneratedClass:
    """Generate every test method for a class.

    For each eligible method, in declaration order, one method is rendered
    per @assert tag; methods without tags get an incomplete stub. Stubs are
    placed after all assertion methods.

    Args:
        metadata: Description of the class under test.
        renderer: Template renderer; defaults to the packaged templates.
        test_class_name: Name of the generated class; defaults to `<Class>Test`.
        timestamp: Generation time recorded in the output; defaults to now.

    Returns:
        The assembled GeneratedClass.

    Raises:
        MetadataUnavailableError: If no metadata was supplied.
        ParseError: If any tag is malformed.
        UnsupportedOperatorError: If any tag uses an unknown operator.
    """
    if metadata is None or not metadata.name:
        raise MetadataUnavailableError()

    renderer = renderer or JinjaRenderer()
    timestamp = timestamp or datetime.now()
    namer = MethodNamer()

    assertion_methods: list[GeneratedMethod] = []
    incomplete_methods: list[GeneratedMethod] = []

    eligible = metadata.eligible_methods
    logger.debug(
        "%s: %d of %d methods eligible", metadata.name, len(eligible), len(metadata.methods)
    )

    for method in eligible:
        tags = extract_annotations(method.doc_comment)
        logger.debug("Found %d @assert tag(s) on %s.%s", len(tags), metadata.name, method.name)

        if not tags:
            incomplete_methods.append(
                _render_incomplete(metadata.name, method, namer.name(method.name), renderer)
            )
            continue

        for tag in tags:
            assertion = map_annotation(tag, method.is_static)
            assertion_methods.append(
                _render_assertion(
                    metadata.name, method, tag, assertion, namer.name(method.name), renderer
                )
            )

    return GeneratedClass(
        class_name=metadata.name,
        test_class_name=test_class_name or f"{metadata.name}Test",
        namespace_declaration=_namespace_declaration(metadata),
        constructor_args=extract_constructor_args(metadata.doc_comment),
        methods=assertion_methods + incomplete_methods,
        date=timestamp.strftime("%Y-%m-%d"),
        time=timestamp.strftime("%H:%M:%S"),
        version=__version__,
    )


def render_test_class(test_class: GeneratedClass, renderer: TemplateRenderer | None = None) -> str:
    """Render a GeneratedClass into module source text."""
    renderer = renderer or JinjaRenderer()
    return renderer.render(
        TemplateKind.TEST_CLASS.value,
        {
            "namespace_declaration": test_class.namespace_declaration,
            "className": test_class.class_name,
            "testClassName": test_class.test_class_name,
            "constructorArgs": test_class.constructor_args,
            "methods": test_class.methods_source,
            "date": test_class.date,
            "time": test_class.time,
            "version": test_class.version,
        },
    )


def generate(
    metadata: ClassMetadata | None,
    renderer: TemplateRenderer | None = None,
    test_class_name: str | None = None,
    timestamp: datetime | None = None,
) -> str:
    """Generate the source of a test module for a class.

    Convenience wrapper around build_test_class and render_test_class.

    Returns:
        The generated source text.
    """
    renderer = renderer or JinjaRenderer()
    test_class = build_test_class(
        metadata, renderer=renderer, test_class_name=test_class_name, timestamp=timestamp
    )
    return render_test_class(test_class, renderer)


def _namespace_declaration(metadata: ClassMetadata) -> str:
    """Import statement for the class under test, if its module is known."""
    if not metadata.module:
        return ""
    return f"\nfrom {metadata.module} import {metadata.name}\n"


def _render_assertion(
    class_name: str,
    method: SourceMethod,
    tag: RawAnnotationTag,
    assertion: MappedAssertion,
    method_name: str,
    renderer: TemplateRenderer,
) -> GeneratedMethod:
    logger.debug("Rendering test%s with %s template", method_name, assertion.template.value)
    preface = tag.preface
    body = renderer.render(
        assertion.template.value,
        {
            "preface": preface,
            "arguments": assertion.arguments,
            "assertion": assertion.kind.value,
            "expected": assertion.expected,
            "className": class_name,
            "origMethodName": method.name,
            "methodName": method_name,
        },
    )
    return GeneratedMethod(
        name=method_name, body=body, source_method=method, assertion=assertion
    )


def _render_incomplete(
    class_name: str,
    method: SourceMethod,
    method_name: str,
    renderer: TemplateRenderer,
) -> GeneratedMethod:
    body = renderer.render(
        TemplateKind.INCOMPLETE.value,
        {
            "className": class_name,
            "origMethodName": method.name,
            "methodName": method_name,
        },
    )
    return GeneratedMethod(name=method_name, body=body, source_method=method)
