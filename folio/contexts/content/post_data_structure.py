"""
Post Data Structures

Defines the post record produced by the content collection and the display
projection handed to page templates.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

WRITINGS_ROUTE = "/writings"


def post_url(slug: str) -> str:
    """Route at which a post is published (e.g., "/writings/hello-world")."""
    return f"{WRITINGS_ROUTE}/{slug}"


@dataclass(frozen=True)
class Post:
    """
    A markdown-authored blog entry with its metadata.

    Attributes:
        title: Post title
        date: ISO 8601 date string (e.g., "2024-09-06")
        slug: Unique URL-safe identifier
        read_time: Precomputed display string (e.g., "4 min read")
        description: Optional summary for listings and the page description
        body: Markdown body with frontmatter removed
        source_path: Markdown file the post was read from
    """

    title: str
    date: str
    slug: str
    read_time: str
    description: Optional[str] = None
    body: str = ""
    source_path: Optional[Path] = None

    @property
    def url(self) -> str:
        return post_url(self.slug)

    def to_display(self) -> "DisplayPost":
        """Project this post to the minimal shape used by list templates."""
        return DisplayPost(
            title=self.title,
            slug=self.slug,
            date=self.date,
            read_time=self.read_time,
        )


@dataclass(frozen=True)
class DisplayPost:
    """
    Minimal projection of a Post used for list rendering.

    A separate value, so nothing done to it reaches the source collection.

    Attributes:
        title: Post title
        slug: Unique URL-safe identifier
        date: ISO 8601 date string
        read_time: Display string (e.g., "4 min read")
    """

    title: str
    slug: str
    date: str
    read_time: str

    @property
    def url(self) -> str:
        return post_url(self.slug)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the public field names (readTime in camelCase)."""
        return {
            "title": self.title,
            "slug": self.slug,
            "date": self.date,
            "readTime": self.read_time,
        }
