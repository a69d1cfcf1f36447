"""
Tier 1 logging setup shared by every context.

One log file per run plus a colourised console stream, both opened with a
provenance header so a build log can be traced back to the command and
package version that produced it. Prefixed wrappers live in
contexts/{context}/logger.py.
"""

import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from folio import __version__

load_dotenv()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"
RULE = "=" * 80


def setup_logger(context_name: str, log_dir: Path, extra_provenance: dict = None) -> Path:
    """
    Point loguru at a fresh {context_name}.log and the console.

    The file receives DEBUG and above; the console INFO and above. Any sinks
    from a previous run are removed first.

    Args:
        context_name: Log file stem (e.g., "build", "content")
        log_dir: Directory for this run, created if missing
        extra_provenance: Extra header lines, such as the output directory

    Returns:
        Path to log file
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.level("WARNING", color="<yellow>")
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance(extra_provenance)
    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """Write the run header: command, working directory, Python and FOLIO versions."""
    logger.info(RULE)
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]} | FOLIO: {__version__}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info(RULE)
