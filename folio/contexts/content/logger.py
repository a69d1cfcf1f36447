"""
Content context logger.

Provides logging interface for content context with automatic [content] prefix.
All content modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[content]"


def setup_content_logger(log_dir: Path, content_dir: Path) -> Path:
    """
    Setup logger for content context.

    Args:
        log_dir: Directory for this logging session
        content_dir: Directory being scanned, recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="content",
        log_dir=log_dir,
        extra_provenance={"Content directory": content_dir},
    )


# Wrapper functions with automatic [content] prefix


def _log_info(message: str) -> None:
    """Log info message with [content] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [content] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [content] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [content] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [content] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_collection_loaded(content_dir: Path, post_count: int, skipped_drafts: int) -> None:
    """Log the outcome of scanning a content directory."""
    _log_success(f"Loaded {post_count} posts from {content_dir}")
    if skipped_drafts:
        _log_info(f"  Skipped {skipped_drafts} drafts")
