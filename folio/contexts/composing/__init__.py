"""
Composing Context

Responsibilities:
- Loads static site metadata (identity, technologies, projects, uses) from YAML
- Manages the Jinja2 page templates and the technology icon table
- Binds recent posts and site metadata into rendered pages

Owns: Site metadata model, page templates, icon lookup
Never: Decides which posts are recent, or writes files
"""

from folio.contexts.composing.composer import (
    ComposedPage,
    compose_about_page,
    compose_home_page,
    compose_post_page,
    compose_projects_page,
    compose_writings_page,
)
from folio.contexts.composing.exceptions import InvalidSiteConfigError, TemplateRenderError
from folio.contexts.composing.registries import IconRegistry, TemplateRegistry
from folio.contexts.composing.site_config import load_site_config, site_config_from_dict
from folio.contexts.composing.site_data_structure import (
    Identity,
    Project,
    SiteConfig,
    SocialLink,
    Technology,
    UsesGroup,
)

__all__ = [
    # Page composition
    "ComposedPage",
    "compose_about_page",
    "compose_home_page",
    "compose_post_page",
    "compose_projects_page",
    "compose_writings_page",
    # Site metadata
    "load_site_config",
    "site_config_from_dict",
    "Identity",
    "Project",
    "SiteConfig",
    "SocialLink",
    "Technology",
    "UsesGroup",
    # Registries
    "IconRegistry",
    "TemplateRegistry",
    # Errors
    "InvalidSiteConfigError",
    "TemplateRenderError",
]
