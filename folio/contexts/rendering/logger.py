"""
Rendering context logger.

Provides logging interface for rendering context with automatic [build] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[build]"


def setup_rendering_logger(log_dir: Path, output_dir: Path) -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and the build's output directory.

    Args:
        log_dir: Directory for this build session
        output_dir: Directory the site is written to

    Returns:
        Path to log file

    Example:
        from folio.contexts.rendering.logger import setup_rendering_logger, _log_info

        log_file = setup_rendering_logger(log_dir, output_dir)
        _log_info("Starting build...")
    """
    return _setup_logger(
        context_name="build",
        log_dir=log_dir,
        extra_provenance={"Output directory": output_dir},
    )


# Wrapper functions with automatic [build] prefix


def _log_info(message: str) -> None:
    """Log info message with [build] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [build] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [build] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [build] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [build] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_build_start(content_dir: Path, site_config_path: Path, output_dir: Path) -> None:
    """Log start of a site build with its inputs."""
    _log_info(f"Building site into {output_dir}")
    _log_debug(f"  Content: {content_dir}")
    _log_debug(f"  Site config: {site_config_path}")


def log_build_result(result, elapsed_time: float, verbose: bool = False) -> None:
    """
    Log build result with diagnostics.

    Args:
        result: BuildResult from build_site()
        elapsed_time: Time taken to build
        verbose: List every written route (default: False)
    """
    if result.success:
        _log_success(
            f"Build succeeded: {len(result.pages)} pages, {result.post_count} posts "
            f"({elapsed_time:.2f}s)"
        )
        route_limit = len(result.pages) if verbose else 5
        for route in result.pages[:route_limit]:
            _log_debug(f"  Wrote {route}")
        if len(result.pages) > route_limit:
            _log_debug(f"  ... and {len(result.pages) - route_limit} more pages")
    else:
        _log_error(f"Build failed with {len(result.errors)} errors ({elapsed_time:.2f}s)")
        for i, err in enumerate(result.errors, 1):
            _log_error(f"  Error {i}: {err}")
