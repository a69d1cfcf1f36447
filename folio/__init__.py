"""
FOLIO - Formatted Output of Longform Items and Overview

A small static-site builder for a personal portfolio and blog. Markdown writings
and a YAML site description are turned into a home page, an about/uses page, a
projects listing, a writings index and one page per post.

Architecture:
- Content Context: Markdown post collection, validation, recent-post selection
- Composing Context: Site metadata and Jinja2 page composition
- Rendering Context: Writing composed pages and static assets to disk
"""

__version__ = "0.1.0"
