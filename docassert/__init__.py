"""docassert: generate unit-test skeletons from @assert doc annotations."""

__version__ = "0.1.0"

from .generator import build_test_class, generate  # noqa: E402

__all__ = ["__version__", "build_test_class", "generate"]
