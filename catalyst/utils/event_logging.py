"""
Pipeline event logging utilities for CareerCatalyst (Tier 2 logging).

Appends one JSON object per line to the event log so that exports and
reminders can be audited across runs.

For detailed within-context logging (Tier 1), use catalyst.utils.logger instead.

Usage:
    from catalyst.utils.event_logging import log_event

    log_event(
        event_type="export_completed",
        subject="jane@example.com",
        source="rendering",
        page_count=2,
    )
"""

import json
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from catalyst.utils.timestamp import now_exact

load_dotenv()
EVENTS_FILE = Path(os.getenv("CATALYST_EVENTS_FILE", "outs/logs/catalyst_events.log"))


def log_event(event_type: str, subject: str, source: str, **extra_fields) -> None:
    """
    Log an event to the event log.

    Args:
        event_type: Type of event (e.g., "export_completed", "deadline_reminder")
        subject: What the event is about (user email, resume id, job id)
        source: Event source (e.g., "rendering", "tracking", "cli")
        **extra_fields: Additional JSON-serializable event-specific fields
    """
    EVENTS_FILE.parent.mkdir(parents=True, exist_ok=True)

    event = {
        "timestamp": now_exact(),
        "event_type": event_type,
        "subject": subject,
        "source": source,
        **extra_fields,
    }

    with open(EVENTS_FILE, "a", encoding="utf-8") as f:
        f.write(json.dumps(event, default=str) + "\n")


def get_recent_events(
    n: int = 10, subject: Optional[str] = None, event_type: Optional[str] = None
) -> list[dict]:
    """
    Get the last n events from the event log, optionally filtered.

    Args:
        n: Number of recent events to return (default: 10)
        subject: Filter to only events for this subject (optional)
        event_type: Filter to only events of this type (optional)

    Returns:
        List of event dicts (most recent last)
    """
    if not EVENTS_FILE.exists():
        return []

    events = []
    with open(EVENTS_FILE, "r", encoding="utf-8") as f:
        for line in f:
            try:
                events.append(json.loads(line.strip()))
            except json.JSONDecodeError:
                # Skip malformed lines
                continue

    if subject:
        events = [e for e in events if e.get("subject") == subject]

    if event_type:
        events = [e for e in events if e.get("event_type") == event_type]

    return events[-n:] if len(events) > n else events
