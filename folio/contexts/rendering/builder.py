"""
Static Site Builder

Loads the content collection and site config, composes every page and writes
the result to an output directory as one index.html per route.
"""

import json
import os
import shutil
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from dotenv import load_dotenv

from folio.contexts.composing import (
    ComposedPage,
    IconRegistry,
    InvalidSiteConfigError,
    TemplateRegistry,
    TemplateRenderError,
    compose_about_page,
    compose_home_page,
    compose_post_page,
    compose_projects_page,
    compose_writings_page,
    load_site_config,
)
from folio.contexts.composing.site_config import SITE_CONFIG_PATH
from folio.contexts.content import (
    ContentCollectionError,
    PostValidationError,
    load_content_collection,
    load_recent_posts,
)
from folio.contexts.content.post_data_structure import DisplayPost
from folio.contexts.rendering.logger import (
    _log_debug,
    _log_info,
    _log_warning,
    log_build_result,
    log_build_start,
    setup_rendering_logger,
)
from folio.utils.event_logging import log_build_event
from folio.utils.timestamp import now

load_dotenv()

CONTENT_PATH = Path(os.getenv("CONTENT_PATH", "content/writings"))
STATIC_PATH = Path(os.getenv("STATIC_PATH", "static"))
OUTPUT_PATH = Path(os.getenv("OUTPUT_PATH", "outs/site"))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

# Data file mirroring the home route's `posts` field
POSTS_DATA_FILE = "posts.json"

# Failures reported through BuildResult.errors instead of propagating
BUILD_ERRORS = (
    PostValidationError,
    ContentCollectionError,
    InvalidSiteConfigError,
    TemplateRenderError,
    FileNotFoundError,
)


@dataclass
class BuildResult:
    """
    Result of a site build.

    Attributes:
        success: Whether every page was written
        output_dir: Directory the site was written to
        pages: Routes written, in build order
        post_count: Number of posts in the collection
        recent_posts: Posts exposed on the home route
        errors: Error messages (empty on success)
        log_dir: Directory holding build.log
    """

    success: bool
    output_dir: Optional[Path] = None
    pages: List[str] = field(default_factory=list)
    post_count: int = 0
    recent_posts: List[DisplayPost] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    log_dir: Optional[Path] = None


def route_to_path(route: str, output_dir: Path) -> Path:
    """
    Map a site route to the file that serves it.

    Examples:
        route_to_path("/", Path("site"))                # site/index.html
        route_to_path("/writings/hello", Path("site"))  # site/writings/hello/index.html
    """
    parts = [part for part in route.strip("/").split("/") if part]
    if any(part in (".", "..") for part in parts):
        raise ValueError(f"Route escapes the output directory: {route}")
    return Path(output_dir).joinpath(*parts, "index.html")


def write_pages(pages: Sequence[ComposedPage], output_dir: Path) -> List[str]:
    """
    Write composed pages under output_dir.

    Returns:
        Routes written, in the order given
    """
    written = []
    for page in pages:
        target = route_to_path(page.route, output_dir)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(page.html, encoding="utf-8")
        _log_debug(f"Wrote {page.route} -> {target}")
        written.append(page.route)
    return written


def write_posts_data(recent_posts: Sequence[DisplayPost], output_dir: Path) -> Path:
    """Write the home route's `posts` field as JSON."""
    target = Path(output_dir) / POSTS_DATA_FILE
    payload = {"posts": [post.to_dict() for post in recent_posts]}
    target.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return target


def copy_static(static_dir: Path, output_dir: Path) -> Optional[Path]:
    """Copy the static asset directory to {output_dir}/static, if it exists."""
    if not static_dir.is_dir():
        _log_warning(f"Static directory not found, skipping assets: {static_dir}")
        return None

    target = Path(output_dir) / "static"
    shutil.copytree(static_dir, target, dirs_exist_ok=True)
    _log_debug(f"Copied static assets from {static_dir}")
    return target


def _check_output_dir(output_dir: Path, protected: Sequence[Path]) -> None:
    """Refuse to clean a directory that contains site sources or the working directory."""
    resolved = output_dir.resolve()
    for path in [Path.cwd(), *protected]:
        path = path.resolve()
        if resolved == path or resolved in path.parents:
            raise ValueError(f"Refusing to clean {output_dir}: it contains {path}")


def build_site(
    content_dir: Path = None,
    site_config_path: Path = None,
    output_dir: Path = None,
    static_dir: Path = None,
    clean: bool = True,
    include_drafts: bool = False,
    verbose: bool = False,
    log_dir: Path = None,
    events_file: Path = None,
) -> BuildResult:
    """
    Build the whole site.

    Writes:
        index.html                      home page (identity, technologies, projects, recent posts)
        about/index.html                about/uses page
        projects/index.html             every project
        writings/index.html             every post, newest first
        writings/{slug}/index.html      one page per post
        posts.json                      the home route's `posts` field
        static/                         copy of the static directory

    Content and config errors are logged and returned in BuildResult.errors;
    nothing is written when they occur.

    Args:
        content_dir: Markdown writings (default: CONTENT_PATH env variable)
        site_config_path: Site YAML (default: SITE_CONFIG_PATH env variable)
        output_dir: Destination (default: OUTPUT_PATH env variable)
        static_dir: Static assets (default: STATIC_PATH env variable)
        clean: Delete output_dir before writing (default: True)
        include_drafts: Publish posts marked draft (default: False)
        verbose: Log every written route (default: False)
        log_dir: Directory for build.log (default: timestamped under LOGS_PATH)
        events_file: Build event log override (default: BUILD_EVENTS_FILE)

    Returns:
        BuildResult with success status and diagnostic information

    Raises:
        ValueError: If clean=True and output_dir contains the sources or working directory
    """
    content_dir = Path(content_dir or CONTENT_PATH)
    site_config_path = Path(site_config_path or SITE_CONFIG_PATH)
    output_dir = Path(output_dir or OUTPUT_PATH)
    static_dir = Path(static_dir or STATIC_PATH)

    if clean and output_dir.exists():
        _check_output_dir(output_dir, [content_dir, site_config_path, static_dir])

    if log_dir is None:
        log_dir = LOGS_PATH / f"build_{now()}"
    log_dir = Path(log_dir)

    setup_rendering_logger(log_dir, output_dir)
    log_build_start(content_dir, site_config_path, output_dir)
    log_build_event(
        "build_started", source="rendering", output_dir=str(output_dir), events_file=events_file
    )

    start_time = time.time()
    result = BuildResult(success=False, output_dir=output_dir, log_dir=log_dir)

    try:
        collection = load_content_collection(content_dir, include_drafts=include_drafts)
        site = load_site_config(site_config_path)
        recent_posts = load_recent_posts(collection.posts)

        templates = TemplateRegistry()
        icons = IconRegistry()
        pages = [
            compose_home_page(recent_posts, site, templates, icons),
            compose_about_page(site, templates),
            compose_projects_page(site, templates),
            compose_writings_page(collection.posts, site, templates),
            *(compose_post_page(post, site, templates) for post in collection),
        ]
    except BUILD_ERRORS as e:
        result.errors.append(str(e))
        elapsed = time.time() - start_time
        log_build_result(result, elapsed, verbose=verbose)
        log_build_event(
            "build_failed",
            source="rendering",
            build_time_s=round(elapsed, 2),
            errors=result.errors,
            events_file=events_file,
        )
        return result

    if clean and output_dir.exists():
        _log_info(f"Cleaning {output_dir}")
        shutil.rmtree(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    result.pages = write_pages(pages, output_dir)
    write_posts_data(recent_posts, output_dir)
    copy_static(static_dir, output_dir)

    result.success = True
    result.post_count = len(collection)
    result.recent_posts = recent_posts

    elapsed = time.time() - start_time
    log_build_result(result, elapsed, verbose=verbose)
    log_build_event(
        "build_completed",
        source="rendering",
        build_time_s=round(elapsed, 2),
        page_count=len(result.pages),
        post_count=result.post_count,
        output_dir=str(output_dir),
        events_file=events_file,
    )

    return result
