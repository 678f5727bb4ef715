"""Metadata-related exceptions."""


class MetadataError(Exception):
    """Base exception for class metadata problems."""

    pass


class MetadataUnavailableError(MetadataError):
    """Raised when no usable class information could be obtained."""

    def __init__(self, message: str = "No class metadata available", class_name: str | None = None):
        self.class_name = class_name
        super().__init__(message)


class MetadataLoadError(MetadataError):
    """Raised when a metadata YAML file cannot be loaded."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class MetadataValidationError(MetadataError):
    """Raised when metadata fails schema validation."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)
