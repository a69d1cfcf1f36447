"""
Content Context

Responsibilities:
- Parses markdown writings and their YAML frontmatter into Post records
- Validates slugs, titles and dates, and computes read times
- Selects the most recent posts for the home page

Owns: Post collection, Post -> DisplayPost projection, recency ordering
Never: Renders HTML pages or writes files
"""

from folio.contexts.content.collection import ContentCollection, load_content_collection
from folio.contexts.content.exceptions import (
    ContentCollectionError,
    DuplicateSlugError,
    PostValidationError,
)
from folio.contexts.content.loader import (
    RECENT_POSTS_LIMIT,
    load_recent_posts,
    parse_post_date,
    sort_posts_by_date,
)
from folio.contexts.content.post_data_structure import DisplayPost, Post, post_url

__all__ = [
    # Collection loading
    "ContentCollection",
    "load_content_collection",
    # Recent-post selection
    "RECENT_POSTS_LIMIT",
    "load_recent_posts",
    "parse_post_date",
    "sort_posts_by_date",
    # Data structures
    "DisplayPost",
    "Post",
    "post_url",
    # Errors
    "ContentCollectionError",
    "DuplicateSlugError",
    "PostValidationError",
]
