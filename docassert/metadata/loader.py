"""Class descriptions read from YAML documents."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import MetadataLoadError, MetadataValidationError
from .models import ClassMetadata

logger = logging.getLogger(__name__)


def parse_metadata(text: str, path: str | None = None) -> ClassMetadata:
    """Parse a YAML document describing one class.

    Args:
        text: The YAML document.
        path: File the document was read from, used in error messages.

    Returns:
        The parsed ClassMetadata.

    Raises:
        MetadataLoadError: If the text is not YAML or its root is not a mapping.
        MetadataValidationError: If the mapping is not a valid class description.
    """
    origin = path or "YAML text"

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise MetadataLoadError(f"Invalid YAML in {origin}: {e}", path) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise MetadataLoadError(
            f"{origin} should describe a class as a mapping, got {type(data).__name__}", path
        )

    try:
        metadata = ClassMetadata.model_validate(data)
    except ValidationError as e:
        errors = [
            {"loc": ".".join(str(x) for x in err["loc"]), "msg": err["msg"], "type": err["type"]}
            for err in e.errors()
        ]
        class_name = data.get("class") or "<unnamed>"
        raise MetadataValidationError(
            f"Class `{class_name}` in {origin} has {len(errors)} invalid field(s)", errors
        ) from e

    logger.debug("Read class %s (%d methods) from %s", metadata.name, len(metadata.methods), origin)
    return metadata


class YamlMetadataProvider:
    """Metadata provider backed by a YAML file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def get_metadata(self) -> ClassMetadata:
        """Read and parse the class description.

        Raises:
            MetadataLoadError: If the file cannot be read or is not a mapping.
            MetadataValidationError: If the description is invalid.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise MetadataLoadError(
                f"Cannot read class description {self.path}: {e.strerror}", str(self.path)
            ) from e
        return parse_metadata(text, str(self.path))
