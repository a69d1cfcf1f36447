"""
Default values for FOLIO site composition.

Used by site_config.py when the site YAML leaves an optional field out, and
by the composer for navigation.
"""

DEFAULT_SITE_TITLE = "Portfolio"

# Project cards shown on the home page before the "view more" link
DEFAULT_HOME_PROJECTS_LIMIT = 4

# Icon used when a technology's icon identifier has no entry in icons.yaml
FALLBACK_ICON = "code"

# Header navigation, in display order: (label, route)
NAVIGATION = [
    ("Home", "/"),
    ("About", "/about"),
    ("Projects", "/projects"),
    ("Writings", "/writings"),
]
