"""Custom exceptions for composing context with template references."""

from pathlib import Path
from typing import Optional


class TemplateRenderError(Exception):
    """
    Exception raised when page template rendering fails.

    Attributes:
        message: Error description
        page_name: Name of the page being rendered (e.g., 'home')
        template_path: Path to the template file
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        page_name: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.page_name = page_name
        self.template_path = template_path
        self.original_error = original_error

        parts = [message]

        if page_name and template_path:
            parts.append(f"\nTemplate: {template_path}")
            parts.append(f"Page: {page_name}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))


class InvalidSiteConfigError(ValueError):
    """
    Exception raised when the site YAML is missing required fields or has the wrong shape.

    Attributes:
        key: Dotted path of the offending entry (e.g., 'projects[2].title')
        config_path: Config file being loaded (if read from disk)
    """

    def __init__(self, message: str, key: Optional[str] = None, config_path: Optional[Path] = None):
        self.message = message
        self.key = key
        self.config_path = config_path

        parts = [message]
        if key:
            parts.append(f"Key: {key}")
        if config_path:
            parts.append(f"Config: {config_path}")

        super().__init__("\n".join(parts))
