"""Metadata layer: describe the class that tests are generated for."""

from .errors import (
    MetadataError,
    MetadataLoadError,
    MetadataUnavailableError,
    MetadataValidationError,
)
from .introspect import ClassIntrospector, describe_class, load_class
from .loader import YamlMetadataProvider, parse_metadata
from .models import ClassMetadata, MetadataProvider, SourceMethod

__all__ = [
    "MetadataError",
    "MetadataLoadError",
    "MetadataUnavailableError",
    "MetadataValidationError",
    "ClassMetadata",
    "MetadataProvider",
    "SourceMethod",
    "ClassIntrospector",
    "describe_class",
    "load_class",
    "YamlMetadataProvider",
    "parse_metadata",
]
