"""Scan doc comments for @assert tags."""

import re

from .errors import ParseError
from .models import RawAnnotationTag

# `@assert` or `@assert-<note>`, standing alone as a word
TAG_PATTERN = re.compile(
    r"(?<!\S)@assert(?:-(?P<note>[a-z0-9_-]+))?(?=\s|$)(?P<rest>.*)$"
)

# Class-level `@assert (<constructor args>)`
CONSTRUCTOR_ARGS_PATTERN = re.compile(r"@assert[ \t]+\((?P<arguments>.*)\)")


def extract_annotations(doc_comment: str | None) -> list[RawAnnotationTag]:
    """Find every @assert tag in a doc comment.

    A tag is the `@assert[-note]` keyword, optional preface lines and a
    parenthesized test expression on a line of its own (or on the tag line
    itself when no preface is given):

        @assert Adds two numbers.
            (2, 3) == 5

    Args:
        doc_comment: Raw doc comment or docstring text.

    Returns:
        The tags in order of appearance.

    Raises:
        ParseError: If a tag is not followed by a test expression.
    """
    if not doc_comment:
        return []

    lines = [_clean_line(line) for line in doc_comment.splitlines()]
    tags: list[RawAnnotationTag] = []

    index = 0
    while index < len(lines):
        match = TAG_PATTERN.search(lines[index])
        if match is None:
            index += 1
            continue

        tag, index = _read_tag(lines, index, match)
        tags.append(tag)

    return tags


def extract_constructor_args(doc_comment: str | None) -> str:
    """Get the constructor arguments from a class-level `@assert (args)` tag.

    Args:
        doc_comment: The class's own doc comment.

    Returns:
        The text between the parentheses, or an empty string if absent.
    """
    if not doc_comment:
        return ""

    match = CONSTRUCTOR_ARGS_PATTERN.search(doc_comment)
    if match is None:
        return ""
    return match.group("arguments")


def _clean_line(line: str) -> str:
    """Strip comment markers and surrounding whitespace from a doc line."""
    line = line.strip()
    if line.startswith("/**"):
        line = line[3:]
    if line.endswith("*/"):
        line = line[:-2]
    return line.lstrip("*").strip()


def _read_tag(
    lines: list[str], start: int, match: re.Match
) -> tuple[RawAnnotationTag, int]:
    """Read one tag starting at `lines[start]`.

    Returns:
        The tag and the index of the first line after it.
    """
    note = match.group("note")
    rest = match.group("rest").strip()

    if rest.startswith("("):
        tag = RawAnnotationTag(test_expression=rest, note=note, raw=lines[start])
        return tag, start + 1

    preface = [rest] if rest else []
    raw_lines = [lines[start]]

    index = start + 1
    while index < len(lines):
        line = lines[index]
        if line.startswith("@"):
            break

        raw_lines.append(line)
        if line.startswith("("):
            tag = RawAnnotationTag(
                test_expression=line,
                note=note,
                preface_lines=tuple(preface),
                raw="\n".join(raw_lines),
            )
            return tag, index + 1

        if line:
            preface.append(line)
        index += 1

    raw = "\n".join(raw_lines).strip()
    raise ParseError(f"No test expression found for @assert tag: `{raw}`", raw)
