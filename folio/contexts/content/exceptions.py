"""Custom exceptions for the content context with references to offending posts."""

from pathlib import Path
from typing import Optional, Sequence


class PostValidationError(ValueError):
    """
    Exception raised when a post is missing required metadata or has malformed values.

    Attributes:
        message: Error description
        slug: Slug of the offending post (if known)
        source_path: Markdown file the post was read from (if known)
    """

    def __init__(
        self,
        message: str,
        slug: Optional[str] = None,
        source_path: Optional[Path] = None,
    ):
        self.message = message
        self.slug = slug
        self.source_path = source_path

        parts = [message]

        if slug:
            parts.append(f"Post: {slug}")
        if source_path:
            parts.append(f"File: {source_path}")

        super().__init__("\n".join(parts))


class DuplicateSlugError(PostValidationError):
    """
    Exception raised when two posts in a collection share a slug.

    Attributes:
        paths: Source files that declare the same slug
    """

    def __init__(self, slug: str, paths: Sequence[Path]):
        self.paths = list(paths)
        listed = ", ".join(str(p) for p in self.paths)
        super().__init__(f"Duplicate slug '{slug}' declared by: {listed}", slug=slug)


class ContentCollectionError(Exception):
    """Exception raised when the content directory itself cannot be read."""

    pass
