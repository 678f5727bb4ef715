"""Choose the template for a generated test method."""

from ..annotations.operators import AssertionKind
from .models import TemplateKind

# Kinds asserted on the method's return value alone
BOOLEAN_KINDS = frozenset(
    {
        AssertionKind.EMPTY,
        AssertionKind.NOT_EMPTY,
        AssertionKind.FILE_EXISTS,
        AssertionKind.FILE_NOT_EXISTS,
    }
)

STATIC_VARIANTS = {
    TemplateKind.GENERIC: TemplateKind.GENERIC_STATIC,
    TemplateKind.BOOLEAN: TemplateKind.BOOLEAN_STATIC,
    TemplateKind.EXCEPTION: TemplateKind.EXCEPTION_STATIC,
}


def select_template(kind: AssertionKind, is_static: bool = False) -> TemplateKind:
    """Pick the template kind for an assertion.

    Args:
        kind: The assertion kind.
        is_static: Whether the method under test is called on the class.

    Returns:
        The template kind to render with.
    """
    if kind == AssertionKind.EXCEPTION:
        template = TemplateKind.EXCEPTION
    elif kind in BOOLEAN_KINDS:
        template = TemplateKind.BOOLEAN
    else:
        template = TemplateKind.GENERIC

    if is_static:
        return STATIC_VARIANTS[template]
    return template
