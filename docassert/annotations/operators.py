"""Operator tokens and the assertion kinds they map to."""

from enum import Enum

from .errors import UnsupportedOperatorError


class AssertionKind(str, Enum):
    """Semantic check performed by a generated test.

    Values are the suffixes of the `assert<Kind>` methods the generated
    code calls.
    """

    EQUALS = "Equals"
    NOT_EQUALS = "NotEquals"
    SAME = "Same"
    NOT_SAME = "NotSame"
    GREATER_THAN = "GreaterThan"
    GREATER_THAN_OR_EQUAL = "GreaterThanOrEqual"
    LESS_THAN = "LessThan"
    LESS_THAN_OR_EQUAL = "LessThanOrEqual"
    EXCEPTION = "Exception"
    EMPTY = "Empty"
    NOT_EMPTY = "NotEmpty"
    INSTANCE_OF = "InstanceOf"
    NOT_INSTANCE_OF = "NotInstanceOf"
    CONTAINS = "Contains"
    NOT_CONTAINS = "NotContains"
    ARRAY_HAS_KEY = "ArrayHasKey"
    ARRAY_NOT_HAS_KEY = "ArrayNotHasKey"
    OBJECT_HAS_ATTRIBUTE = "ObjectHasAttribute"
    OBJECT_NOT_HAS_ATTRIBUTE = "ObjectNotHasAttribute"
    INTERNAL_TYPE = "InternalType"
    NOT_INTERNAL_TYPE = "NotInternalType"
    CONTAINS_ONLY = "ContainsOnly"
    NOT_CONTAINS_ONLY = "NotContainsOnly"
    COUNT = "Count"
    NOT_COUNT = "NotCount"
    FILE_EXISTS = "FileExists"
    FILE_NOT_EXISTS = "FileNotExists"
    REG_EXP = "RegExp"
    NOT_REG_EXP = "NotRegExp"


OPERATOR_KINDS: dict[str, AssertionKind] = {
    "==": AssertionKind.EQUALS,
    "!=": AssertionKind.NOT_EQUALS,
    "===": AssertionKind.SAME,
    "!==": AssertionKind.NOT_SAME,
    ">": AssertionKind.GREATER_THAN,
    ">=": AssertionKind.GREATER_THAN_OR_EQUAL,
    "<": AssertionKind.LESS_THAN,
    "<=": AssertionKind.LESS_THAN_OR_EQUAL,
    "throws": AssertionKind.EXCEPTION,
    "empty": AssertionKind.EMPTY,
    "!empty": AssertionKind.NOT_EMPTY,
    "instanceof": AssertionKind.INSTANCE_OF,
    "!instanceof": AssertionKind.NOT_INSTANCE_OF,
    "contains-value": AssertionKind.CONTAINS,
    "!contains-value": AssertionKind.NOT_CONTAINS,
    "contains-key": AssertionKind.ARRAY_HAS_KEY,
    "!contains-key": AssertionKind.ARRAY_NOT_HAS_KEY,
    "contains-property": AssertionKind.OBJECT_HAS_ATTRIBUTE,
    "!contains-property": AssertionKind.OBJECT_NOT_HAS_ATTRIBUTE,
    "is-type": AssertionKind.INTERNAL_TYPE,
    "!is-type": AssertionKind.NOT_INTERNAL_TYPE,
    "contains-only-type": AssertionKind.CONTAINS_ONLY,
    "!contains-only-type": AssertionKind.NOT_CONTAINS_ONLY,
    "count": AssertionKind.COUNT,
    "!count": AssertionKind.NOT_COUNT,
    "file-exists": AssertionKind.FILE_EXISTS,
    "!file-exists": AssertionKind.FILE_NOT_EXISTS,
    "matches": AssertionKind.REG_EXP,
    "!matches": AssertionKind.NOT_REG_EXP,
}

# Kinds whose meaning inverts when the expected value is FALSE
BOOLEAN_FLIPS: dict[AssertionKind, AssertionKind] = {
    AssertionKind.EMPTY: AssertionKind.NOT_EMPTY,
    AssertionKind.NOT_EMPTY: AssertionKind.EMPTY,
    AssertionKind.FILE_EXISTS: AssertionKind.FILE_NOT_EXISTS,
    AssertionKind.FILE_NOT_EXISTS: AssertionKind.FILE_EXISTS,
}


def map_operator(operator: str, raw: str | None = None) -> AssertionKind:
    """Look up the assertion kind for an operator token.

    Args:
        operator: The exact operator token, e.g. `==` or `!contains-key`.
        raw: The full tag text, used in error messages.

    Returns:
        The matching AssertionKind.

    Raises:
        UnsupportedOperatorError: If the token is not in the table.
    """
    try:
        return OPERATOR_KINDS[operator]
    except KeyError:
        raise UnsupportedOperatorError(operator, raw) from None


def normalize_boolean(kind: AssertionKind, expected: str) -> tuple[AssertionKind, str]:
    """Turn `empty FALSE` style assertions into their positive counterpart.

    Returns:
        The (possibly flipped) kind and expected value. The expected value
        is cleared when the kind is flipped.
    """
    if kind in BOOLEAN_FLIPS and expected.upper() == "FALSE":
        return BOOLEAN_FLIPS[kind], ""
    return kind, expected
