"""Data models for test generation."""

from dataclasses import dataclass, field
from enum import Enum

from ..annotations.operators import AssertionKind
from ..metadata.models import SourceMethod


class TemplateKind(str, Enum):
    """Template used to render a generated method or class."""

    GENERIC = "Generic"  # assert<Kind>(expected, actual)
    GENERIC_STATIC = "GenericStatic"
    BOOLEAN = "Boolean"  # assert<Kind>(actual)
    BOOLEAN_STATIC = "BooleanStatic"
    EXCEPTION = "Exception"  # assertRaises(expected)
    EXCEPTION_STATIC = "ExceptionStatic"
    INCOMPLETE = "Incomplete"  # Stub for methods without tags
    TEST_CLASS = "TestClass"  # Class wrapper


@dataclass(frozen=True)
class MappedAssertion:
    """An assertion ready to be rendered."""

    kind: AssertionKind
    arguments: str
    expected: str
    template: TemplateKind
    is_static: bool = False


@dataclass
class GeneratedMethod:
    """A rendered test method."""

    name: str  # e.g., Add2
    body: str
    source_method: SourceMethod
    assertion: MappedAssertion | None = None  # None for incomplete stubs

    @property
    def is_incomplete(self) -> bool:
        """Whether this is a placeholder for an unannotated method."""
        return self.assertion is None


@dataclass
class GeneratedClass:
    """A test class assembled from generated methods."""

    class_name: str
    test_class_name: str
    namespace_declaration: str = ""
    constructor_args: str = ""
    methods: list[GeneratedMethod] = field(default_factory=list)
    date: str = ""
    time: str = ""
    version: str = ""

    @property
    def assertion_methods(self) -> list[GeneratedMethod]:
        """Methods generated from @assert tags."""
        return [m for m in self.methods if not m.is_incomplete]

    @property
    def incomplete_methods(self) -> list[GeneratedMethod]:
        """Placeholder methods."""
        return [m for m in self.methods if m.is_incomplete]

    @property
    def method_names(self) -> list[str]:
        """Names of all generated methods, in output order."""
        return [m.name for m in self.methods]

    @property
    def methods_source(self) -> str:
        """All method bodies concatenated, trailing whitespace removed."""
        return "".join(m.body for m in self.methods).rstrip()
