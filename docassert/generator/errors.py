"""Generator-related exceptions."""


class RenderError(Exception):
    """Raised when a template cannot be found or rendered."""

    def __init__(self, message: str, template: str | None = None):
        self.template = template
        super().__init__(message)
