"""Describe Python classes through runtime introspection."""

import importlib
import importlib.util
import inspect
import logging
import re
import sys
from pathlib import Path
from types import ModuleType

from .errors import MetadataUnavailableError
from .models import ClassMetadata, SourceMethod

logger = logging.getLogger(__name__)

# Class name placeholder meaning "the first class defined in the source file"
NS_CLASS = "ns-class"

CLASS_STATEMENT_PATTERN = re.compile(r"^\s*class\s+(?P<name>[A-Za-z_]\w*)", re.MULTILINE)

CONSTRUCTOR_NAMES = ("__init__", "__new__")

# Package prefix for modules imported from source files
SOURCE_MODULE_PREFIX = "docassert_source"


def load_class(class_name: str, source_file: str | Path | None = None) -> type:
    """Import a class by dotted path or from a source file.

    Args:
        class_name: Dotted path such as `package.module.Class`. When a
            source file is given, the bare class name is enough, and
            `ns-class` picks the first class defined in the file.
        source_file: Optional path to the file that defines the class.

    Returns:
        The class object.

    Raises:
        MetadataUnavailableError: If the class cannot be located.
    """
    if not class_name:
        raise MetadataUnavailableError("Missing class name")

    if source_file is not None:
        path = Path(source_file)
        module = _import_file(path)
        if class_name == NS_CLASS:
            class_name = _first_class_name(path)
        attr = class_name.rpartition(".")[2]
    else:
        module_name, _, attr = class_name.rpartition(".")
        if not module_name:
            raise MetadataUnavailableError(
                f"`{class_name}` is not a dotted path; pass a source file or use package.module.Class",
                class_name,
            )
        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            raise MetadataUnavailableError(
                f"Cannot import module `{module_name}`: {e}", class_name
            ) from e

    cls = getattr(module, attr, None)
    if not inspect.isclass(cls):
        raise MetadataUnavailableError(
            f"Could not find class `{attr}` in `{module.__name__}`", class_name
        )

    logger.debug("Loaded class %s from module %s", cls.__qualname__, module.__name__)
    return cls


def describe_class(cls: type, module: str | None = None) -> ClassMetadata:
    """Build ClassMetadata for a class.

    Methods are listed in declaration order, the target class's own
    methods first, followed by those inherited along the MRO.

    Args:
        cls: The class to describe.
        module: Import path to record; defaults to the class's module.

    Returns:
        The class metadata.
    """
    if module is None and cls.__module__ != "__main__":
        module = cls.__module__

    methods: list[SourceMethod] = []
    seen: set[str] = set()

    for klass in cls.__mro__:
        if klass is object:
            continue
        for name, value in vars(klass).items():
            if name in seen:
                continue
            method = _describe_method(name, value, declared=klass is cls)
            if method is None:
                continue
            seen.add(name)
            methods.append(method)

    return ClassMetadata(
        name=cls.__name__,
        module=module,
        doc_comment=inspect.cleandoc(vars(cls).get("__doc__") or ""),
        methods=methods,
    )


def get_source_file(cls: type) -> Path | None:
    """Get the file that defines a class, if known."""
    try:
        source = inspect.getsourcefile(cls)
    except TypeError:
        return None
    return Path(source) if source else None


def _describe_method(name: str, value: object, declared: bool) -> SourceMethod | None:
    """Describe one class attribute, or return None if it is not a method."""
    if isinstance(value, (staticmethod, classmethod)):
        func = value.__func__
        is_static = True
    elif inspect.isfunction(value):
        func = value
        is_static = False
    else:
        return None

    return SourceMethod(
        name=name,
        is_static=is_static,
        is_public=not name.startswith("_"),
        is_abstract=bool(getattr(func, "__isabstractmethod__", False)),
        is_constructor=name in CONSTRUCTOR_NAMES,
        declared_on_target_class=declared,
        doc_comment=inspect.cleandoc(func.__doc__ or ""),
    )


def _import_file(path: Path) -> ModuleType:
    """Import a Python source file under a private module name.

    The module is registered as `docassert_source.<stem>` so that a file
    sharing its name with an installed module never replaces it.
    """
    if not path.is_file():
        raise MetadataUnavailableError(f"`{path}` is not a file")

    module_name = f"{SOURCE_MODULE_PREFIX}.{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise MetadataUnavailableError(f"Cannot import `{path}`")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        sys.modules.pop(module_name, None)
        raise MetadataUnavailableError(f"Error importing `{path}`: {e}") from e

    return module


def _first_class_name(path: Path) -> str:
    """Find the first `class` statement in a source file."""
    match = CLASS_STATEMENT_PATTERN.search(path.read_text(encoding="utf-8"))
    if match is None:
        raise MetadataUnavailableError(f"No class defined in `{path}`")
    return match.group("name")


class ClassIntrospector:
    """Metadata provider backed by a live Python class."""

    def __init__(self, class_name: str, source_file: str | Path | None = None):
        self.class_name = class_name
        self.source_file = Path(source_file) if source_file is not None else None
        self._cls: type | None = None

    @property
    def cls(self) -> type:
        """Lazy-load the class."""
        if self._cls is None:
            self._cls = load_class(self.class_name, self.source_file)
        return self._cls

    def get_metadata(self) -> ClassMetadata:
        """Describe the class."""
        module = self.source_file.stem if self.source_file is not None else None
        return describe_class(self.cls, module=module)

    def get_source_file(self) -> Path | None:
        """The file that defines the class."""
        if self.source_file is not None:
            return self.source_file
        return get_source_file(self.cls)
