"""Parse `(arguments) operator expected` test expressions."""

from .errors import ParseError
from .models import ParsedAssertion


def parse_assertion(expression: str, raw: str | None = None) -> ParsedAssertion:
    """Split a test expression into arguments, operator and expected value.

    The arguments run from the opening `(` to the first `)`, so a nested
    call such as `(max(1, 2))` is cut short at `max(1, 2`.

    Args:
        expression: A single-line test expression, e.g. `(2, 3) == 5`.
        raw: The full tag text, used in error messages.

    Returns:
        The parsed assertion.

    Raises:
        ParseError: If the expression does not have the expected shape.
    """
    raw = raw or expression
    text = expression.strip()

    if not text.startswith("("):
        raise ParseError(f"Test expression must start with `(`: `{raw}`", raw)

    close = text.find(")")
    if close == -1:
        raise ParseError(f"Test expression has no closing `)`: `{raw}`", raw)

    arguments = text[1:close].strip()
    remainder = text[close + 1 :]

    if not remainder[:1].isspace():
        raise ParseError(f"Missing operator after arguments: `{raw}`", raw)

    parts = remainder.split(maxsplit=1)
    if not parts:
        raise ParseError(f"Missing operator after arguments: `{raw}`", raw)

    operator = parts[0]
    expected = parts[1].strip() if len(parts) > 1 else ""

    return ParsedAssertion(arguments=arguments, operator=operator, expected=expected)
