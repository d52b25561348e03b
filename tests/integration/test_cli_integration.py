"""
Integration tests for the command-line scripts, run through Typer's test runner.
"""

import json
from datetime import date, timedelta

import pytest
from typer.testing import CliRunner

from catalyst.contexts.tracking.models import Job, Resource, ResourceType
from catalyst.contexts.tracking.store import DEMO_EMAIL, CareerDataStore
from catalyst.utils import event_logging
from scripts import career_tracker, export_resume

runner = CliRunner()


@pytest.fixture(autouse=True)
def events_file(tmp_path, monkeypatch):
    path = tmp_path / "events.log"
    monkeypatch.setattr(event_logging, "EVENTS_FILE", path)
    return path


@pytest.fixture
def data_dir(tmp_path):
    """Data directory holding the demo account and two resources."""
    path = tmp_path / "data"
    store = CareerDataStore(path)
    user = store.demo_user()
    user.job_applications.append(
        Job("Globex", "Analyst", "Remote", application_deadline=date.today() + timedelta(days=3))
    )
    store.save_users()
    store.add_resource(Resource("Java Programming Masterclass", ResourceType.COURSE, rating=4.6))
    store.add_resource(Resource("Public Speaking", ResourceType.BOOK, rating=3.0))
    return path


@pytest.mark.integration
def test_export_command(data_dir, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    output = tmp_path / "demo.pdf"

    result = runner.invoke(
        export_resume.app, ["export", DEMO_EMAIL, "-d", str(data_dir), "-o", str(output)]
    )

    assert result.exit_code == 0, result.output
    assert "Export succeeded" in result.output
    assert output.exists()


@pytest.mark.integration
def test_inspect_command(data_dir, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    output = tmp_path / "demo.pdf"
    runner.invoke(export_resume.app, ["export", DEMO_EMAIL, "-d", str(data_dir), "-o", str(output)])

    listing = runner.invoke(export_resume.app, ["inspect", str(output)])
    found = runner.invoke(export_resume.app, ["inspect", str(output), "-f", "demo user"])
    missing = runner.invoke(export_resume.app, ["inspect", str(output), "-f", "Side Projects"])

    assert listing.exit_code == 0, listing.output
    assert "--- Page 1 ---" in listing.output
    assert "Email: demo@example.com" in listing.output
    assert found.exit_code == 0
    assert "page 1, line 1" in found.output
    assert missing.exit_code == 1


@pytest.mark.integration
def test_inspect_missing_pdf(tmp_path):
    result = runner.invoke(export_resume.app, ["inspect", str(tmp_path / "none.pdf")])

    assert result.exit_code == 1


@pytest.mark.integration
def test_export_unknown_user(data_dir):
    result = runner.invoke(export_resume.app, ["export", "nobody@example.com", "-d", str(data_dir)])

    assert result.exit_code == 1


@pytest.mark.integration
def test_layout_command(data_dir):
    result = runner.invoke(
        export_resume.app, ["layout", DEMO_EMAIL, "-d", str(data_dir), "-p", "page_letter"]
    )

    assert result.exit_code == 0, result.output
    assert "Layout: Demo User" in result.output
    assert "Professional Summary" in result.output


@pytest.mark.integration
def test_layout_unknown_preset(data_dir):
    result = runner.invoke(export_resume.app, ["layout", "--demo", "-d", str(data_dir), "-p", "nope"])

    assert result.exit_code == 1


@pytest.mark.integration
def test_validate_command(data_dir):
    result = runner.invoke(export_resume.app, ["validate", "--demo", "-d", str(data_dir)])

    assert result.exit_code == 0, result.output
    assert "Layout valid" in result.output


@pytest.mark.integration
def test_jobs_command(data_dir):
    result = runner.invoke(career_tracker.app, ["jobs", DEMO_EMAIL, "-d", str(data_dir), "-q", "remote"])

    assert result.exit_code == 0, result.output
    assert "Globex" in result.output
    assert "ABC Tech Solutions" not in result.output
    assert "1 of 2 application(s)" in result.output


@pytest.mark.integration
def test_jobs_invalid_status(data_dir):
    result = runner.invoke(career_tracker.app, ["jobs", DEMO_EMAIL, "-d", str(data_dir), "-s", "hired"])

    assert result.exit_code == 1


@pytest.mark.integration
def test_jobs_unreadable_data_file(tmp_path):
    bad_dir = tmp_path / "bad"
    bad_dir.mkdir()
    (bad_dir / "users.json").write_bytes(b"[\xff]")

    result = runner.invoke(career_tracker.app, ["jobs", DEMO_EMAIL, "-d", str(bad_dir)])

    assert result.exit_code == 1
    assert not isinstance(result.exception, UnicodeDecodeError)


@pytest.mark.integration
def test_deadlines_command(data_dir, events_file):
    result = runner.invoke(career_tracker.app, ["deadlines", DEMO_EMAIL, "-d", str(data_dir)])

    assert result.exit_code == 0, result.output
    assert "Analyst at Globex" in result.output
    assert "ABC Tech Solutions" not in result.output


@pytest.mark.integration
def test_recommend_command(data_dir):
    result = runner.invoke(career_tracker.app, ["recommend", DEMO_EMAIL, "-d", str(data_dir)])

    assert result.exit_code == 0, result.output
    assert "Java Programming Masterclass" in result.output


@pytest.mark.integration
def test_dashboard_command(data_dir):
    result = runner.invoke(career_tracker.app, ["dashboard", DEMO_EMAIL, "-d", str(data_dir)])

    assert result.exit_code == 0, result.output
    assert "Welcome, Demo User!" in result.output
    assert "Deadline soon: Analyst at Globex" in result.output


@pytest.mark.integration
def test_events_command(data_dir, events_file):
    result = runner.invoke(career_tracker.app, ["events", "-c", "-e", "user_registered"])

    assert result.exit_code == 0, result.output
    (line,) = [text for text in result.output.splitlines() if text.startswith("{")]
    assert json.loads(line)["subject"] == DEMO_EMAIL


@pytest.mark.integration
def test_events_command_with_timestamps(data_dir, events_file):
    result = runner.invoke(career_tracker.app, ["events", "-s", DEMO_EMAIL])

    assert result.exit_code == 0, result.output
    assert "Showing last 1 event(s):" in result.output
    assert '"event_type": "user_registered"' in result.output


@pytest.mark.integration
def test_events_command_empty_log():
    result = runner.invoke(career_tracker.app, ["events"])

    assert result.exit_code == 1
