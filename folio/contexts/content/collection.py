"""
Content Collection

Scans a directory of markdown writings, parses their YAML frontmatter and
builds validated, immutable Post records.

Expected file layout:

    ---
    title: Hello World
    date: 2024-09-06
    slug: hello-world        # optional, defaults to the file stem
    readTime: 3 min read     # optional, computed from the body otherwise
    description: A first post
    draft: false
    ---

    Markdown body...
"""

import re
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

import frontmatter
import yaml

from folio.contexts.content.exceptions import (
    ContentCollectionError,
    DuplicateSlugError,
    PostValidationError,
)
from folio.contexts.content.loader import parse_post_date
from folio.contexts.content.logger import _log_debug, _log_warning, log_collection_loaded
from folio.contexts.content.post_data_structure import Post
from folio.utils.markdown import estimate_read_time

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
READ_TIME_KEYS = ("readTime", "read_time")


class ContentCollection:
    """
    Read-only set of every post available at build time.

    Posts keep the order they were loaded in (sorted by source path). Ordering
    by date is the loader's job.
    """

    def __init__(self, posts: Tuple[Post, ...]):
        self._posts = tuple(posts)
        self._by_slug = {post.slug: post for post in self._posts}

    @property
    def posts(self) -> Tuple[Post, ...]:
        return self._posts

    def get(self, slug: str) -> Post:
        """
        Look up a post by slug.

        Raises:
            KeyError: If no post has that slug
        """
        try:
            return self._by_slug[slug]
        except KeyError:
            raise KeyError(f"No post with slug '{slug}'") from None

    def slugs(self) -> List[str]:
        return [post.slug for post in self._posts]

    def __len__(self) -> int:
        return len(self._posts)

    def __iter__(self) -> Iterator[Post]:
        return iter(self._posts)

    def __contains__(self, slug: object) -> bool:
        return slug in self._by_slug


def _normalize_date(value: Any) -> Any:
    """Turn YAML-native dates back into ISO strings; leave anything else alone."""
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return value


def _require_text(metadata: Dict[str, Any], key: str, source_path: Optional[Path]) -> str:
    value = metadata.get(key)
    if value is None or not str(value).strip():
        raise PostValidationError(
            f"Missing required frontmatter field '{key}'",
            slug=metadata.get("slug"),
            source_path=source_path,
        )
    return str(value).strip()


def _parse_frontmatter(text: str, source_path: Optional[Path]) -> Tuple[Dict[str, Any], str]:
    """Split markdown source into (metadata, body)."""
    try:
        parsed = frontmatter.loads(text)
    except (yaml.YAMLError, ValueError) as e:
        raise PostValidationError(f"Malformed frontmatter: {e}", source_path=source_path) from e

    metadata = parsed.metadata
    if not isinstance(metadata, dict):
        raise PostValidationError(
            f"Frontmatter must be a mapping, got {type(metadata).__name__}",
            source_path=source_path,
        )
    return metadata, parsed.content


def _read_draft_flag(metadata: Dict[str, Any], source_path: Optional[Path]) -> bool:
    draft = metadata.get("draft", False)
    if not isinstance(draft, bool):
        raise PostValidationError(
            f"'draft' must be true or false, got {draft!r}",
            slug=metadata.get("slug"),
            source_path=source_path,
        )
    return draft


def _build_post(metadata: Dict[str, Any], body: str, source_path: Optional[Path]) -> Post:
    slug = metadata.get("slug")
    if slug is None:
        if source_path is None:
            raise PostValidationError("Missing slug and no file to derive it from")
        slug = source_path.stem
    slug = str(slug).strip()
    if not SLUG_PATTERN.match(slug):
        raise PostValidationError(
            f"Slug '{slug}' must be lowercase letters, digits and single hyphens",
            slug=slug,
            source_path=source_path,
        )

    title = _require_text(metadata, "title", source_path)

    post_date = _normalize_date(metadata.get("date"))
    if post_date is None or (isinstance(post_date, str) and not post_date.strip()):
        raise PostValidationError(
            "Missing required frontmatter field 'date'", slug=slug, source_path=source_path
        )
    post_date = str(post_date).strip()
    try:
        parse_post_date(post_date, slug=slug)
    except PostValidationError as e:
        raise PostValidationError(e.message, slug=slug, source_path=source_path) from e

    read_time = next(
        (str(metadata[key]).strip() for key in READ_TIME_KEYS if metadata.get(key)), None
    )
    if read_time is None:
        read_time = estimate_read_time(body)

    description = metadata.get("description")
    if description is not None:
        description = str(description).strip() or None

    return Post(
        title=title,
        date=post_date,
        slug=slug,
        read_time=read_time,
        description=description,
        body=body,
        source_path=source_path,
    )


def post_from_markdown(text: str, source_path: Optional[Path] = None) -> Tuple[Post, bool]:
    """
    Build a Post from markdown source with YAML frontmatter.

    Drafts are validated like any other post.

    Args:
        text: Full file contents
        source_path: File the text came from (slug fallback and error messages)

    Returns:
        Tuple of (post, is_draft)

    Raises:
        PostValidationError: If frontmatter is malformed or a field is invalid
    """
    metadata, body = _parse_frontmatter(text, source_path)
    is_draft = _read_draft_flag(metadata, source_path)
    return _build_post(metadata, body, source_path), is_draft


def load_content_collection(
    content_dir: Path, include_drafts: bool = False
) -> ContentCollection:
    """
    Load every markdown post under a directory.

    Files are read in sorted path order so the collection's source order is
    deterministic across platforms. Unless include_drafts is set, drafts are
    skipped as soon as their `draft` flag is read, so an unfinished draft never
    fails the load.

    Args:
        content_dir: Directory containing *.md writings (searched recursively)
        include_drafts: Keep and validate posts marked `draft: true` (default: False)

    Returns:
        ContentCollection of validated posts

    Raises:
        ContentCollectionError: If content_dir doesn't exist or isn't a directory
        PostValidationError: If any post is invalid
        DuplicateSlugError: If two posts share a slug
    """
    content_dir = Path(content_dir)
    if not content_dir.is_dir():
        raise ContentCollectionError(f"Content directory not found: {content_dir}")

    posts: List[Post] = []
    seen: Dict[str, Path] = {}
    skipped_drafts = 0

    for md_file in sorted(content_dir.rglob("*.md")):
        _log_debug(f"Reading {md_file}")
        metadata, body = _parse_frontmatter(md_file.read_text(encoding="utf-8"), md_file)

        if _read_draft_flag(metadata, md_file) and not include_drafts:
            skipped_drafts += 1
            _log_debug(f"  Skipping draft: {md_file.name}")
            continue

        post = _build_post(metadata, body, md_file)
        if post.slug in seen:
            raise DuplicateSlugError(post.slug, [seen[post.slug], md_file])
        seen[post.slug] = md_file

        posts.append(post)

    if not posts:
        _log_warning(f"No posts found in {content_dir}")

    log_collection_loaded(content_dir, len(posts), skipped_drafts)
    return ContentCollection(tuple(posts))
