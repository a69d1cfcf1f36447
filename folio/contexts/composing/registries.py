"""
Composing Registries

Centralized registries for loading and caching page templates and icon markup.
"""

import os
from pathlib import Path
from typing import Dict, List

from dotenv import load_dotenv
from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateNotFound,
    select_autoescape,
)
from markupsafe import Markup
from omegaconf import OmegaConf

from folio.contexts.composing.defaults import FALLBACK_ICON
from folio.contexts.composing.logger import _log_warning
from folio.utils.timestamp import format_post_date

load_dotenv()
TEMPLATES_PATH = Path(
    os.getenv("SITE_TEMPLATES_PATH", str(Path(__file__).resolve().parent / "templates"))
)

TEMPLATE_SUFFIX = ".html.jinja"
ICONS_FILE = "icons.yaml"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 page templates.

    Templates are stored as {templates_path}/{page_name}.html.jinja and may
    extend base.html.jinja. HTML autoescaping is on; values that are already
    markup (rendered post bodies, icons) are passed as Markup.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory holding page templates. Defaults to
                            SITE_TEMPLATES_PATH from environment
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=select_autoescape(enabled_extensions=("html", "jinja"), default=True),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["post_date"] = format_post_date

    def get_template(self, page_name: str) -> Template:
        """
        Get a template by page name, loading and caching it if necessary.

        Args:
            page_name: Name of the page (e.g., 'home')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if page_name in self._cache:
            return self._cache[page_name]

        template_name = f"{page_name}{TEMPLATE_SUFFIX}"

        try:
            template = self.env.get_template(template_name)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for page '{page_name}' at {self.templates_path / template_name}"
            ) from e

        self._cache[page_name] = template
        return template

    def get_template_path(self, page_name: str) -> Path:
        """
        Get the file path for a page's template.

        Args:
            page_name: Name of the page (e.g., 'home')

        Returns:
            Path to template file
        """
        return self.templates_path / f"{page_name}{TEMPLATE_SUFFIX}"


class IconRegistry:
    """
    Lookup table from technology icon identifiers to inline SVG markup.

    Icons are defined in {templates_path}/icons.yaml as `identifier: "<svg ...>"`.
    The table is loaded once on first lookup.
    """

    def __init__(self, icons_path: Path = None, fallback: str = FALLBACK_ICON):
        """
        Initialize the icon registry.

        Args:
            icons_path: Path to icons.yaml. Defaults to icons.yaml next to the templates
            fallback: Identifier used when a lookup misses
        """
        if icons_path is None:
            icons_path = TEMPLATES_PATH / ICONS_FILE

        self.icons_path = Path(icons_path)
        self.fallback = fallback
        self._icons: Dict[str, str] = None

    def _load(self) -> Dict[str, str]:
        if self._icons is None:
            if not self.icons_path.exists():
                raise FileNotFoundError(f"Icon table not found at {self.icons_path}")
            table = OmegaConf.to_container(OmegaConf.load(self.icons_path), resolve=True)
            self._icons = {str(key): str(value).strip() for key, value in table.items()}
        return self._icons

    def has_icon(self, identifier: str) -> bool:
        return identifier in self._load()

    def get_icon(self, identifier: str) -> Markup:
        """
        Resolve an icon identifier to SVG markup.

        Unknown identifiers resolve to the fallback icon (or empty markup when
        the fallback itself is missing) and log a warning.

        Args:
            identifier: Icon identifier from the site config (e.g., 'python')

        Returns:
            Markup safe to insert into templates
        """
        if self.has_icon(identifier):
            return Markup(self._load()[identifier])

        _log_warning(f"Unknown icon '{identifier}', using '{self.fallback}'")
        return Markup(self._load().get(self.fallback, ""))

    def identifiers(self) -> List[str]:
        return sorted(self._load())
