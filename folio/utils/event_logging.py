"""
Build event logging utilities for FOLIO (Tier 2 logging).

Provides uniform interfaces for logging build events to build_events.log in
JSON Lines format, one object per line. The CLI `history` command reads them back.

For detailed within-context logging (Tier 1), use folio.utils.logger instead.

Usage:
    from folio.utils.event_logging import log_build_event

    log_build_event(
        event_type="build_completed",
        source="rendering",
        page_count=9,
        post_count=5,
    )
"""

import json
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from folio.utils.timestamp import now_exact

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
BUILD_EVENTS_FILE = Path(os.getenv("BUILD_EVENTS_FILE", str(LOGS_PATH / "build_events.log")))


def log_build_event(
    event_type: str, source: str, events_file: Optional[Path] = None, **extra_fields
) -> None:
    """
    Append an event to the build event log.

    Args:
        event_type: Type of event (e.g., "build_started", "build_completed", "build_failed")
        source: Event source (e.g., "rendering", "cli")
        events_file: Override for the log location (defaults to BUILD_EVENTS_FILE)
        **extra_fields: Additional event-specific fields (must be JSON serializable)
    """
    events_file = Path(events_file) if events_file is not None else BUILD_EVENTS_FILE
    events_file.parent.mkdir(parents=True, exist_ok=True)

    event = {
        "timestamp": now_exact(),
        "event_type": event_type,
        "source": source,
        **extra_fields,
    }

    with open(events_file, "a", encoding="utf-8") as f:
        f.write(json.dumps(event) + "\n")


def get_recent_events(
    n: int = 10, event_type: Optional[str] = None, events_file: Optional[Path] = None
) -> list[dict]:
    """
    Get the last n events from the build log, optionally filtered by type.

    Args:
        n: Number of recent events to return (default: 10)
        event_type: Filter to only events of this type (optional)
        events_file: Override for the log location (defaults to BUILD_EVENTS_FILE)

    Returns:
        List of event dicts (most recent last)
    """
    events_file = Path(events_file) if events_file is not None else BUILD_EVENTS_FILE
    if not events_file.exists():
        return []

    events = []
    with open(events_file, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            try:
                events.append(json.loads(line))
            except json.JSONDecodeError:
                # Skip malformed lines
                continue

    if event_type:
        events = [e for e in events if e.get("event_type") == event_type]

    return events[-n:] if n > 0 else []
