"""
Shared utilities for FOLIO.

Common functionality used across contexts:
- Logger setup and build event logging
- Markdown rendering and read-time estimation
- Timestamp formatting
"""

from folio.utils.timestamp import format_post_date, now, now_exact, today

__all__ = ["format_post_date", "now", "now_exact", "today"]
