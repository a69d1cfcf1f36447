"""
Site Config Loading

Reads the site YAML (identity, technologies, projects, uses) with OmegaConf and
turns it into a validated SiteConfig. Interpolations are resolved, so entries
such as `site_title: "${identity.name}"` work.

Example site.yaml:

    site_title: "${identity.name}"
    identity:
      name: Ada Lovelace
      tagline: Analyst of engines
      bio:
        - I write about computing machinery.
    technologies:
      - {name: Python, icon: python, link: "https://www.python.org"}
    projects:
      - title: Difference Engine notes
        link: https://example.com/notes
        description: Annotated translation
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from folio.contexts.composing.defaults import DEFAULT_HOME_PROJECTS_LIMIT, DEFAULT_SITE_TITLE
from folio.contexts.composing.exceptions import InvalidSiteConfigError
from folio.contexts.composing.site_data_structure import (
    Identity,
    Project,
    SiteConfig,
    SocialLink,
    Technology,
    UsesGroup,
)

load_dotenv()
SITE_CONFIG_PATH = Path(os.getenv("SITE_CONFIG_PATH", "config/site.yaml"))


def _require_str(entry: Dict[str, Any], key: str, where: str) -> str:
    value = entry.get(key)
    if value is None or not str(value).strip():
        raise InvalidSiteConfigError(f"Missing required field '{key}'", key=f"{where}.{key}")
    return str(value).strip()


def _optional_str(entry: Dict[str, Any], key: str) -> Optional[str]:
    value = entry.get(key)
    if value is None:
        return None
    return str(value).strip() or None


def _str_list(value: Any, where: str) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        raise InvalidSiteConfigError(
            f"Expected a list of strings, got {type(value).__name__}", key=where
        )
    return [str(item) for item in value]


def _entries(data: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    """Fetch a list of mappings, treating a missing key as empty."""
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise InvalidSiteConfigError(f"Expected a list, got {type(value).__name__}", key=key)

    for index, entry in enumerate(value):
        if not isinstance(entry, dict):
            raise InvalidSiteConfigError(
                f"Expected a mapping, got {type(entry).__name__}", key=f"{key}[{index}]"
            )
    return value


def _parse_identity(data: Dict[str, Any]) -> Identity:
    raw = data.get("identity")
    if not isinstance(raw, dict):
        raise InvalidSiteConfigError("Missing 'identity' section", key="identity")

    social = [
        SocialLink(
            name=_require_str(link, "name", f"identity.social[{i}]"),
            url=_require_str(link, "url", f"identity.social[{i}]"),
        )
        for i, link in enumerate(_entries(raw, "social"))
    ]

    return Identity(
        name=_require_str(raw, "name", "identity"),
        tagline=_optional_str(raw, "tagline") or "",
        bio=_str_list(raw.get("bio"), "identity.bio"),
        location=_optional_str(raw, "location"),
        email=_optional_str(raw, "email"),
        social=social,
    )


def site_config_from_dict(data: Dict[str, Any]) -> SiteConfig:
    """
    Build a SiteConfig from plain (already resolved) YAML data.

    Args:
        data: Mapping with at least an `identity.name`

    Returns:
        Validated SiteConfig

    Raises:
        InvalidSiteConfigError: If a required field is missing or has the wrong type
    """
    if not isinstance(data, dict):
        raise InvalidSiteConfigError(f"Site config must be a mapping, got {type(data).__name__}")

    technologies = [
        Technology(
            name=_require_str(entry, "name", f"technologies[{i}]"),
            icon=_require_str(entry, "icon", f"technologies[{i}]"),
            link=_require_str(entry, "link", f"technologies[{i}]"),
        )
        for i, entry in enumerate(_entries(data, "technologies"))
    ]

    projects = [
        Project(
            title=_require_str(entry, "title", f"projects[{i}]"),
            link=_require_str(entry, "link", f"projects[{i}]"),
            description=_require_str(entry, "description", f"projects[{i}]"),
            tags=_str_list(entry.get("tags"), f"projects[{i}].tags"),
        )
        for i, entry in enumerate(_entries(data, "projects"))
    ]

    uses = [
        UsesGroup(
            name=_require_str(entry, "name", f"uses[{i}]"),
            items=_str_list(entry.get("items"), f"uses[{i}].items"),
        )
        for i, entry in enumerate(_entries(data, "uses"))
    ]

    limit = data.get("home_projects_limit", DEFAULT_HOME_PROJECTS_LIMIT)
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
        raise InvalidSiteConfigError(
            f"home_projects_limit must be a non-negative integer, got {limit!r}",
            key="home_projects_limit",
        )

    return SiteConfig(
        identity=_parse_identity(data),
        technologies=technologies,
        projects=projects,
        uses=uses,
        site_title=_optional_str(data, "site_title") or DEFAULT_SITE_TITLE,
        description=_optional_str(data, "description") or "",
        base_url=(_optional_str(data, "base_url") or "").rstrip("/"),
        home_projects_limit=limit,
    )


def load_site_config(config_path: Path = None) -> SiteConfig:
    """
    Load and validate the site YAML.

    Args:
        config_path: Optional path to the YAML file (defaults to SITE_CONFIG_PATH env variable)

    Returns:
        Validated SiteConfig

    Raises:
        FileNotFoundError: If the config file doesn't exist
        InvalidSiteConfigError: If the YAML is malformed or missing required fields
    """
    if config_path is None:
        config_path = SITE_CONFIG_PATH
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Site config not found at {config_path}")

    try:
        data = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
    except (OmegaConfBaseException, yaml.YAMLError) as e:
        raise InvalidSiteConfigError(
            f"Could not read site config: {e}", config_path=config_path
        ) from e

    try:
        return site_config_from_dict(data)
    except InvalidSiteConfigError as e:
        raise InvalidSiteConfigError(e.message, key=e.key, config_path=config_path) from e
