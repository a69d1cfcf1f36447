"""
Site Data Structures

Defines data classes for the static site metadata: identity blurb, technology
grid, project cards and the uses list on the about page.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from folio.contexts.composing.defaults import DEFAULT_HOME_PROJECTS_LIMIT, DEFAULT_SITE_TITLE


@dataclass(frozen=True)
class SocialLink:
    """
    External profile link shown with the identity blurb.

    Attributes:
        name: Display label (e.g., "GitHub")
        url: Absolute URL
    """

    name: str
    url: str


@dataclass(frozen=True)
class Identity:
    """
    Who the site is about.

    Attributes:
        name: Full name
        tagline: One-line professional brand
        bio: Paragraphs of the bio blurb (markdown allowed)
        location: Optional location line
        email: Optional contact address
        social: External profile links
    """

    name: str
    tagline: str = ""
    bio: List[str] = field(default_factory=list)
    location: Optional[str] = None
    email: Optional[str] = None
    social: List[SocialLink] = field(default_factory=list)


@dataclass(frozen=True)
class Technology:
    """
    Entry in the technology grid.

    Attributes:
        name: Display name (e.g., "Python")
        icon: Icon identifier, resolved to markup by the IconRegistry
        link: Project homepage
    """

    name: str
    icon: str
    link: str


@dataclass(frozen=True)
class Project:
    """
    Project card.

    Attributes:
        title: Project name
        link: Where the project lives
        description: Short description for the card
        tags: Optional technology tags
    """

    title: str
    link: str
    description: str
    tags: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class UsesGroup:
    """
    Group of tools on the about/uses page (e.g., "Editor", "Hardware").

    Attributes:
        name: Group heading
        items: Entries in the group (markdown allowed)
    """

    name: str
    items: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class SiteConfig:
    """
    Complete static metadata for the site.

    Attributes:
        identity: Identity blurb
        technologies: Technology grid entries
        projects: Project cards, in display order
        uses: Groups shown on the about/uses page
        site_title: Title used in the page <title> and header
        description: Default page description
        base_url: Prefix for absolute links (empty for root-relative sites)
        home_projects_limit: Maximum project cards on the home page
    """

    identity: Identity
    technologies: List[Technology] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)
    uses: List[UsesGroup] = field(default_factory=list)
    site_title: str = DEFAULT_SITE_TITLE
    description: str = ""
    base_url: str = ""
    home_projects_limit: int = DEFAULT_HOME_PROJECTS_LIMIT
