"""Pydantic models describing a class under test."""

from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field, model_validator

VISIBILITIES = ("public", "protected", "private")


class SourceMethod(BaseModel):
    """A method of the class under test."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    is_static: bool = Field(default=False, alias="static")
    is_public: bool = Field(default=True, alias="public")
    is_abstract: bool = Field(default=False, alias="abstract")
    is_constructor: bool = Field(default=False, alias="constructor")
    declared_on_target_class: bool = Field(default=True, alias="declared")
    doc_comment: str = Field(default="", alias="doc")

    @model_validator(mode="before")
    @classmethod
    def normalize_visibility(cls, data: dict) -> dict:
        """Translate `visibility: private` into the public flag."""
        if not isinstance(data, dict) or "visibility" not in data:
            return data

        data = dict(data)
        visibility = data.pop("visibility")
        if visibility not in VISIBILITIES:
            raise ValueError(
                f"visibility must be one of {', '.join(VISIBILITIES)}, got {visibility!r}"
            )
        data["public"] = visibility == "public"
        return data

    @model_validator(mode="before")
    @classmethod
    def normalize_doc(cls, data: dict) -> dict:
        """Treat a null doc comment as empty."""
        if isinstance(data, dict):
            for key in ("doc", "doc_comment"):
                if key in data and data[key] is None:
                    data = {**data, key: ""}
        return data

    @property
    def is_eligible(self) -> bool:
        """Whether tests should be generated for this method."""
        return (
            self.is_public
            and not self.is_constructor
            and not self.is_abstract
            and self.declared_on_target_class
        )


class ClassMetadata(BaseModel):
    """A class under test and its methods in declaration order."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(alias="class", min_length=1)
    module: str | None = None
    doc_comment: str = Field(default="", alias="doc")
    methods: list[SourceMethod] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def normalize_methods(cls, data: dict) -> dict:
        """Allow bare method names and a null doc comment."""
        if not isinstance(data, dict):
            return data

        data = dict(data)
        for key in ("doc", "doc_comment"):
            if key in data and data[key] is None:
                data[key] = ""

        methods = data.get("methods")
        if methods is None:
            data["methods"] = []
        elif isinstance(methods, list):
            data["methods"] = [
                {"name": m} if isinstance(m, str) else m for m in methods
            ]
        return data

    @property
    def eligible_methods(self) -> list[SourceMethod]:
        """Methods that tests are generated for, in declaration order."""
        return [m for m in self.methods if m.is_eligible]

    def get_method(self, name: str) -> SourceMethod | None:
        """Get the first method with the given name."""
        return next((m for m in self.methods if m.name == name), None)


class MetadataProvider(Protocol):
    """Anything that can describe a class for test generation."""

    def get_metadata(self) -> ClassMetadata:
        """Return the class's metadata."""
        ...
