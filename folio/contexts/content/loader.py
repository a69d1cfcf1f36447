"""
Recent Post Loader

Selects and shapes the posts shown on the home page: newest first, bounded,
projected to DisplayPost.
"""

from datetime import datetime, timezone
from typing import Iterable, List, Optional

from folio.contexts.content.exceptions import PostValidationError
from folio.contexts.content.post_data_structure import DisplayPost, Post

RECENT_POSTS_LIMIT = 3


def parse_post_date(value: str, slug: Optional[str] = None) -> datetime:
    """
    Parse a post date into a comparable naive UTC datetime.

    Accepts plain dates ("2024-09-06") and full ISO 8601 datetimes, with or
    without an offset ("2024-09-06T08:30:00Z", "2024-09-06T10:30:00+02:00").
    Offset-aware values are converted to UTC so mixed inputs sort together.

    Args:
        value: Date string from the post metadata
        slug: Slug of the post, used in error messages

    Returns:
        Naive datetime in UTC

    Raises:
        PostValidationError: If the date is missing or not ISO 8601
    """
    if not isinstance(value, str) or not value.strip():
        raise PostValidationError(f"Missing post date (got {value!r})", slug=slug)

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise PostValidationError(f"Unparsable post date {value!r}: {e}", slug=slug) from e

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)

    return parsed


def sort_posts_by_date(posts: Iterable[Post]) -> List[Post]:
    """
    Order posts newest first.

    Posts sharing a date keep their input order. Every date is parsed before
    sorting, so one bad date fails the whole call instead of misordering it.

    Raises:
        PostValidationError: If any post has a missing or unparsable date
    """
    keyed = [(parse_post_date(post.date, slug=post.slug), post) for post in posts]
    # sorted() is stable and reverse=True keeps equal keys in input order
    keyed = sorted(keyed, key=lambda pair: pair[0], reverse=True)
    return [post for _, post in keyed]


def load_recent_posts(
    all_posts: Iterable[Post], limit: int = RECENT_POSTS_LIMIT
) -> List[DisplayPost]:
    """
    Select the most recent posts for home-page display.

    Args:
        all_posts: Full, unordered post collection (unique by slug)
        limit: Maximum number of posts to return (default: 3)

    Returns:
        Up to `limit` DisplayPosts ordered by descending date

    Raises:
        PostValidationError: If any post has a missing or unparsable date
        ValueError: If limit is negative

    Example:
        recent = load_recent_posts(collection.posts)
        [p.date for p in recent]
        # ["2024-09-06", "2024-01-01", "2023-05-05"]
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    return [post.to_display() for post in sort_posts_by_date(all_posts)[:limit]]
