"""Timestamp formatting utilities."""

from datetime import date, datetime


def now() -> str:
    """Compact local timestamp for directory names (e.g., "20251114_123456")."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def now_exact() -> str:
    """ISO 8601 local timestamp with microseconds, for event logs."""
    return datetime.now().isoformat()


def today() -> str:
    """Today's date as YYYY-MM-DD."""
    return date.today().isoformat()


def format_post_date(iso_date: str) -> str:
    """
    Format a post's ISO date for display.

    Args:
        iso_date: ISO 8601 date or datetime string

    Returns:
        Human-readable date (e.g., "Sep 6, 2024")

    Examples:
        format_post_date("2024-09-06")
        # "Sep 6, 2024"

        format_post_date("2024-09-06T08:30:00Z")
        # "Sep 6, 2024"
    """
    try:
        dt = datetime.fromisoformat(iso_date.replace("Z", "+00:00"))
    except (ValueError, AttributeError):
        # Return original if parsing fails
        return iso_date

    return f"{dt.strftime('%b')} {dt.day}, {dt.year}"


def format_timestamp(iso_timestamp: str, relative: bool = False) -> str:
    """
    Format ISO 8601 timestamp to readable format.

    Args:
        iso_timestamp: ISO 8601 formatted timestamp string
        relative: If True, show relative time (e.g., "2h ago")
                 If False, show absolute time (e.g., "2025-11-13 18:45:40")

    Returns:
        Human-readable timestamp

    Examples:
        format_timestamp("2025-11-13T18:45:40.572549")
        # "2025-11-13 18:45:40"

        format_timestamp("2025-11-13T18:45:40.572549", relative=True)
        # "2h ago"
    """
    try:
        dt = datetime.fromisoformat(iso_timestamp)

        if relative:
            return _format_relative_time(dt)
        else:
            return dt.strftime("%Y-%m-%d %H:%M:%S")

    except (ValueError, AttributeError):
        return iso_timestamp


def _format_relative_time(dt: datetime) -> str:
    """
    Format datetime as relative time in compact format (e.g., "2h ago").

    Args:
        dt: datetime object to format

    Returns:
        Compact relative time string
    """
    diff = datetime.now() - dt

    if diff.total_seconds() < 0:
        diff = -diff
        suffix = "from now"
    else:
        suffix = "ago"

    seconds = int(diff.total_seconds())
    minutes = seconds // 60
    hours = minutes // 60
    days = diff.days

    if seconds < 60:
        return f"{seconds}s {suffix}"
    elif minutes < 60:
        return f"{minutes}m {suffix}"
    elif hours < 24:
        return f"{hours}h {suffix}"
    else:
        return f"{days}d {suffix}"
