"""Writing generated test modules to disk."""

from .writer import DEFAULT_OUTPUT_DIR, default_output_path, write_test_file

__all__ = ["DEFAULT_OUTPUT_DIR", "default_output_path", "write_test_file"]
