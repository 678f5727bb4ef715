"""Template rendering for generated test code."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from jinja2 import (
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
    TemplateNotFound,
    UndefinedError,
)

from .errors import RenderError

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".py.j2"


class TemplateRenderer(Protocol):
    """Renders a named template with string variables."""

    def render(self, template: str, variables: Mapping[str, str]) -> str:
        """Render `template` with `variables` substituted."""
        ...


class JinjaRenderer:
    """Renderer backed by Jinja2 templates.

    Templates are looked up as `<identifier>.py.j2`, first in
    `template_dir` (if given), then among the packaged templates.
    """

    def __init__(self, template_dir: str | Path | None = None):
        self.template_dir = Path(template_dir) if template_dir is not None else None
        self._env = self._build_environment()

    def _build_environment(self) -> Environment:
        loaders = []
        if self.template_dir is not None:
            loaders.append(FileSystemLoader(str(self.template_dir)))
        loaders.append(PackageLoader("docassert", "templates"))

        return Environment(
            loader=ChoiceLoader(loaders),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def render(self, template: str, variables: Mapping[str, str]) -> str:
        """Render a template by identifier.

        Args:
            template: Template identifier, e.g. `Generic` or `TestClass`.
            variables: Values substituted into the template.

        Returns:
            The rendered text.

        Raises:
            RenderError: If the template is missing or uses an unknown variable.
        """
        filename = f"{template}{TEMPLATE_SUFFIX}"
        try:
            compiled = self._env.get_template(filename)
        except TemplateNotFound as e:
            raise RenderError(f"Template not found: {filename}", template) from e

        logger.debug("Rendering template %s", filename)
        try:
            return compiled.render(**variables)
        except UndefinedError as e:
            raise RenderError(f"Error rendering {filename}: {e}", template) from e
