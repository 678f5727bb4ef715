"""Data models for parsed annotations."""

from dataclasses import dataclass, field

# Joins preface lines so each one lands on its own comment line
# inside the generated test method body.
PREFACE_SEPARATOR = "\n        # "


@dataclass(frozen=True)
class RawAnnotationTag:
    """One `@assert` occurrence found in a doc comment."""

    test_expression: str
    note: str | None = None
    preface_lines: tuple[str, ...] = field(default_factory=tuple)
    raw: str = ""  # Source text of the tag, for error messages

    @property
    def preface(self) -> str:
        """Preface lines joined for inclusion as a comment."""
        return PREFACE_SEPARATOR.join(self.preface_lines).strip()


@dataclass(frozen=True)
class ParsedAssertion:
    """A test expression split into its three parts."""

    arguments: str
    operator: str
    expected: str = ""
