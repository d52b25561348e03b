"""Unit tests for the event log."""

import json

import pytest

from catalyst.utils import event_logging
from catalyst.utils.event_logging import get_recent_events, log_event


@pytest.fixture(autouse=True)
def events_file(tmp_path, monkeypatch):
    path = tmp_path / "logs" / "events.log"
    monkeypatch.setattr(event_logging, "EVENTS_FILE", path)
    return path


@pytest.mark.unit
def test_log_event_appends_json_lines(events_file):
    log_event("export_completed", "jane@example.com", "rendering", page_count=2)
    log_event("export_failed", "joe@example.com", "rendering")

    lines = events_file.read_text().splitlines()
    assert len(lines) == 2

    event = json.loads(lines[0])
    assert event["event_type"] == "export_completed"
    assert event["subject"] == "jane@example.com"
    assert event["source"] == "rendering"
    assert event["page_count"] == 2
    assert "timestamp" in event


@pytest.mark.unit
def test_no_log_file():
    assert get_recent_events() == []


@pytest.mark.unit
def test_recent_events_filters():
    for i in range(5):
        log_event("export_completed", f"user{i % 2}@example.com", "rendering", index=i)
    log_event("deadline_reminder", "user0@example.com", "tracking")

    assert [e["index"] for e in get_recent_events(n=2, event_type="export_completed")] == [3, 4]
    assert len(get_recent_events(subject="user0@example.com")) == 4
    assert get_recent_events(n=1)[0]["event_type"] == "deadline_reminder"


@pytest.mark.unit
def test_malformed_lines_are_skipped(events_file):
    log_event("export_completed", "jane@example.com", "rendering")
    with open(events_file, "a", encoding="utf-8") as f:
        f.write("not json\n")

    assert len(get_recent_events()) == 1
