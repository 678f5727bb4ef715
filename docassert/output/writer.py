"""Output paths and file writing for generated test modules."""

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

# Generated files go into this directory next to the source file by default
DEFAULT_OUTPUT_DIR = ".~unit-tests"


def _snake_case(s: str) -> str:
    """Convert a CamelCase class name to snake_case."""
    s = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", s)
    return s.lower().replace(" ", "_").replace("-", "_")


def default_output_path(class_name: str, source_file: str | Path | None = None) -> Path:
    """Where to write the tests for a class when no path is given.

    Args:
        class_name: Name of the class under test.
        source_file: File that defines the class; the current directory
            is used when unknown.

    Returns:
        `<source dir>/.~unit-tests/test_<class>.py`
    """
    base = Path(source_file).resolve().parent if source_file is not None else Path.cwd()
    return base / DEFAULT_OUTPUT_DIR / f"test_{_snake_case(class_name)}.py"


def write_test_file(path: str | Path, content: str) -> Path:
    """Write a generated test module, creating parent directories.

    Returns:
        The path written to.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.debug("Wrote %d characters to %s", len(content), path)
    return path
