"""
Composing context logger.

Provides logging interface for composing context with automatic [compose] prefix.
All composing modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[compose]"


def _log_info(message: str) -> None:
    """Log info message with [compose] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [compose] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [compose] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [compose] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_page_composed(page_name: str, route: str, size: int) -> None:
    """Log a successfully rendered page."""
    _log_debug(f"Composed {page_name} page for {route} ({size} chars)")
