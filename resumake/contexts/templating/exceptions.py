"""Custom exceptions for the templating context."""

from pathlib import Path
from typing import Optional


class TemplateRenderError(Exception):
    """
    Exception raised when template rendering fails.

    Attributes:
        message: Error description
        type_name: Name of the section or structure template being rendered
        template_path: Path to the template file
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        type_name: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.type_name = type_name
        self.template_path = template_path
        self.original_error = original_error

        parts = [message]

        if type_name and template_path:
            parts.append(f"\nTemplate: {template_path}")
            parts.append(f"Type: {type_name}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))


class InvalidResumeStructureError(ValueError):
    """
    Exception raised when resume data has the wrong shape.

    Raised for container-level problems only (e.g. 'education' is a string instead
    of a list, or an entry is not a mapping). Leaf values are never validated.
    """

    pass


class HeaderConfigError(ValueError):
    """
    Exception raised when the header configuration cannot be resolved.

    Covers unknown configuration keys, unknown presets and colors outside the
    Awesome-CV palette.
    """

    pass
