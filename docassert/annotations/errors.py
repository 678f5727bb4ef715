"""Annotation-related exceptions."""


class AnnotationError(Exception):
    """Base exception for malformed @assert annotations."""

    def __init__(self, message: str, raw: str | None = None):
        self.raw = raw
        super().__init__(message)


class ParseError(AnnotationError):
    """Raised when a test expression does not match `(args) operator expected`."""

    pass


class UnsupportedOperatorError(AnnotationError):
    """Raised when an operator token has no matching assertion kind."""

    def __init__(self, operator: str, raw: str | None = None):
        self.operator = operator
        message = f"Assertion could not be parsed from @assert tag. Got unknown test type: `{operator}`"
        if raw:
            message += f" in `{raw}`"
        super().__init__(message, raw)
