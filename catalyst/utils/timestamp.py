"""Timestamp formatting utilities."""

from datetime import date, datetime
from typing import Optional, Union

DISPLAY_DATE_FORMAT = "%b %d, %Y"


def now() -> str:
    """Compact timestamp for directory names (e.g., "20261019_134501")."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def now_exact() -> str:
    """ISO 8601 timestamp with microseconds, used in event logs."""
    return datetime.now().isoformat()


def today() -> str:
    """Current date as YYYY-MM-DD."""
    return date.today().isoformat()


def format_display_date(value: Optional[Union[date, datetime]], default: str = "Not set") -> str:
    """
    Format a date for display (e.g., "Oct 19, 2026").

    Args:
        value: Date or datetime to format
        default: Returned when value is None

    Returns:
        Human-readable date
    """
    if value is None:
        return default
    return value.strftime(DISPLAY_DATE_FORMAT)


# (seconds per unit, suffix), largest first
_RELATIVE_UNITS = ((86400, "d"), (3600, "h"), (60, "m"), (1, "s"))


def format_timestamp(iso_timestamp: str, relative: bool = False) -> str:
    """
    Format an event-log timestamp for the console.

    Absolute times drop the microseconds ("2026-10-19 18:45:40"); relative
    times use the largest whole unit ("45s ago", "2h ago", "3d from now").
    Anything that does not parse as ISO 8601 is returned unchanged.
    """
    try:
        moment = datetime.fromisoformat(iso_timestamp)
    except (TypeError, ValueError):
        return iso_timestamp

    if not relative:
        return moment.strftime("%Y-%m-%d %H:%M:%S")

    seconds = int((datetime.now() - moment).total_seconds())
    suffix = "ago" if seconds >= 0 else "from now"
    seconds = abs(seconds)
    for unit_seconds, unit in _RELATIVE_UNITS:
        if seconds >= unit_seconds or unit == "s":
            return f"{seconds // unit_seconds}{unit} {suffix}"
