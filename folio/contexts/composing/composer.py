"""
Page Composer

Binds recent posts, the post collection and static site metadata into page
templates. Every compose_* function is a pure transformation from data to a
ComposedPage; nothing is written to disk here.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence

from jinja2 import TemplateError
from markupsafe import Markup

from folio.contexts.composing.defaults import NAVIGATION
from folio.contexts.composing.exceptions import TemplateRenderError
from folio.contexts.composing.logger import _log_error, log_page_composed
from folio.contexts.composing.registries import IconRegistry, TemplateRegistry
from folio.contexts.composing.site_data_structure import SiteConfig
from folio.contexts.content.loader import sort_posts_by_date
from folio.contexts.content.post_data_structure import DisplayPost, Post
from folio.utils.markdown import markdown_to_html, markdown_to_inline_html


@dataclass(frozen=True)
class ComposedPage:
    """
    A rendered page ready to be written.

    Attributes:
        route: Site path the page is served at (e.g., "/writings/hello-world")
        title: Page title
        html: Full HTML document
    """

    route: str
    title: str
    html: str


def _page_title(page_title: Optional[str], site: SiteConfig) -> str:
    if not page_title:
        return site.site_title
    return f"{page_title} | {site.site_title}"


def _render(
    page_name: str,
    route: str,
    site: SiteConfig,
    registry: Optional[TemplateRegistry],
    page_title: Optional[str] = None,
    description: Optional[str] = None,
    **context: Any,
) -> ComposedPage:
    """
    Render a page template with the shared layout context.

    Raises:
        TemplateRenderError: If the template is missing or fails to render
    """
    registry = registry or TemplateRegistry()
    title = _page_title(page_title, site)

    try:
        template = registry.get_template(page_name)
        html = template.render(
            site=site,
            navigation=NAVIGATION,
            current_route=route,
            page_title=title,
            page_description=description or site.description,
            **context,
        )
    except TemplateError as e:
        _log_error(f"Failed to render {page_name} page for {route}")
        raise TemplateRenderError(
            f"Failed to render {page_name} page",
            page_name=page_name,
            template_path=registry.get_template_path(page_name),
            original_error=e,
        ) from e

    log_page_composed(page_name, route, len(html))
    return ComposedPage(route=route, title=title, html=html)


def _bio_html(site: SiteConfig) -> List[Markup]:
    return [Markup(markdown_to_inline_html(paragraph)) for paragraph in site.identity.bio]


def _technology_cards(site: SiteConfig, icons: IconRegistry) -> List[Dict[str, Any]]:
    return [
        {"name": tech.name, "link": tech.link, "icon": icons.get_icon(tech.icon)}
        for tech in site.technologies
    ]


def compose_home_page(
    recent_posts: Sequence[DisplayPost],
    site: SiteConfig,
    registry: TemplateRegistry = None,
    icons: IconRegistry = None,
) -> ComposedPage:
    """
    Compose the home page.

    Regions:
    - identity/bio blurb
    - technology grid (icons resolved through the icon registry)
    - project cards, bounded by site.home_projects_limit, with a "view more"
      link to /projects when more projects exist
    - recent writings, each linking to /writings/{slug}

    Args:
        recent_posts: Output of load_recent_posts()
        site: Static site metadata
        registry: Template registry (defaults to a fresh TemplateRegistry)
        icons: Icon registry (defaults to a fresh IconRegistry)

    Returns:
        ComposedPage for "/"
    """
    icons = icons or IconRegistry()
    limit = site.home_projects_limit

    return _render(
        "home",
        "/",
        site,
        registry,
        bio=_bio_html(site),
        technologies=_technology_cards(site, icons),
        projects=site.projects[:limit],
        has_more_projects=len(site.projects) > limit,
        posts=list(recent_posts),
    )


def compose_about_page(site: SiteConfig, registry: TemplateRegistry = None) -> ComposedPage:
    """Compose the about/uses page: identity, contact links and uses groups."""
    uses = [
        {"name": group.name, "items": [Markup(markdown_to_inline_html(i)) for i in group.items]}
        for group in site.uses
    ]
    return _render(
        "about",
        "/about",
        site,
        registry,
        page_title="About",
        bio=_bio_html(site),
        uses=uses,
    )


def compose_projects_page(site: SiteConfig, registry: TemplateRegistry = None) -> ComposedPage:
    """Compose the full projects listing."""
    return _render(
        "projects",
        "/projects",
        site,
        registry,
        page_title="Projects",
        projects=site.projects,
    )


def compose_writings_page(
    all_posts: Iterable[Post], site: SiteConfig, registry: TemplateRegistry = None
) -> ComposedPage:
    """
    Compose the writings index listing every post, newest first.

    Raises:
        PostValidationError: If any post has a missing or unparsable date
    """
    posts = [post.to_display() for post in sort_posts_by_date(all_posts)]
    return _render(
        "writings",
        "/writings",
        site,
        registry,
        page_title="Writings",
        posts=posts,
    )


def compose_post_page(
    post: Post, site: SiteConfig, registry: TemplateRegistry = None
) -> ComposedPage:
    """Compose a single post page with its markdown body rendered to HTML."""
    return _render(
        "post",
        post.url,
        site,
        registry,
        page_title=post.title,
        description=post.description,
        post=post,
        content=Markup(markdown_to_html(post.body)),
    )
