"""
Integration tests for resume export - lays out real users and reads the PDF back.
"""

import json
from datetime import date

import pdfplumber
import pytest

from catalyst.contexts.layout.config_resolver import presets_for_template
from catalyst.contexts.layout.metrics import FixedWidthMetrics
from catalyst.contexts.rendering import export_resume
from catalyst.contexts.tracking.models import Experience, ResumeTemplate
from catalyst.contexts.tracking.store import build_demo_user
from catalyst.utils import event_logging
from catalyst.utils.pdf_processing import extract_page_lines, find_line

TODAY = date(2026, 10, 19)


@pytest.fixture(autouse=True)
def events_file(tmp_path, monkeypatch):
    path = tmp_path / "events.log"
    monkeypatch.setattr(event_logging, "EVENTS_FILE", path)
    return path


@pytest.fixture
def demo_user():
    return build_demo_user(TODAY)


def export(user, tmp_path, **kwargs):
    return export_resume(
        user, output_path=tmp_path / "resume.pdf", log_dir=tmp_path / "logs", **kwargs
    )


def read_events(events_file):
    return [json.loads(line) for line in events_file.read_text().splitlines()]


@pytest.mark.integration
def test_demo_resume_exports_to_one_page(demo_user, tmp_path, events_file):
    """Demo profile fits on one A4 page with sections in print order."""
    result = export(demo_user, tmp_path)

    assert result.success, f"Export failed with errors: {result.errors}"
    assert result.pdf_path.exists()
    assert result.page_count == 1
    assert result.diagnostics.page_count == 1
    assert (tmp_path / "logs" / "render.log").exists()

    pages = extract_page_lines(result.pdf_path)
    assert find_line("Demo User", pages) == (1, 0)
    assert find_line("Email: demo@example.com", pages) == (1, 1)

    positions = [
        find_line(heading, pages)
        for heading in [
            "Professional Summary",
            "Skills",
            "Education",
            "Work Experience",
            "Projects",
            "Languages",
        ]
    ]
    assert None not in positions
    assert positions == sorted(positions)
    assert find_line("References", pages) is None
    assert find_line("Additional Information", pages) is None

    (event,) = read_events(events_file)
    assert event["event_type"] == "export_completed"
    assert event["subject"] == "demo@example.com"
    assert event["page_count"] == 1


@pytest.mark.integration
def test_pdf_metadata(demo_user, tmp_path):
    result = export(demo_user, tmp_path)

    with pdfplumber.open(result.pdf_path) as pdf:
        assert pdf.metadata.get("Title") == "Java Developer Resume"
        assert pdf.metadata.get("Author") == "Demo User"


@pytest.mark.integration
def test_long_resume_spans_pages(demo_user, tmp_path):
    demo_user.resume.work_experience_list = [
        Experience(
            f"Engineer {i}",
            f"Company {i}",
            start_date="Jan 2010",
            end_date="Dec 2011",
            description="Worked on distributed systems and developer tooling.",
            responsibilities=["Shipped features", "Reviewed code", "Mentored interns"],
        )
        for i in range(30)
    ]

    result = export(demo_user, tmp_path)

    assert result.success, f"Export failed with errors: {result.errors}"
    assert result.page_count > 1
    assert result.page_count == result.diagnostics.page_count

    pages = extract_page_lines(result.pdf_path)
    assert len(pages) == result.page_count
    assert all(lines for lines in pages.values())


@pytest.mark.integration
def test_letter_preset_page_size(demo_user, tmp_path):
    presets = presets_for_template("PROFESSIONAL") + ["page_letter"]

    result = export(demo_user, tmp_path, presets=presets)

    with pdfplumber.open(result.pdf_path) as pdf:
        page = pdf.pages[0]
        assert (page.width, page.height) == (612, 792)


@pytest.mark.integration
def test_academic_template_uses_times(demo_user, tmp_path):
    demo_user.resume.template = ResumeTemplate.ACADEMIC

    result = export(demo_user, tmp_path)

    assert result.success
    with pdfplumber.open(result.pdf_path) as pdf:
        fonts = {char["fontname"] for char in pdf.pages[0].chars}
    assert any("Times" in font for font in fonts)
    assert not any("Helvetica" in font for font in fonts)


@pytest.mark.integration
def test_unknown_preset_fails_without_pdf(demo_user, tmp_path, events_file):
    result = export(demo_user, tmp_path, presets=["page_tabloid"])

    assert result.success is False
    assert result.pdf_path is None
    assert "page_tabloid" in result.errors[0]
    assert not (tmp_path / "resume.pdf").exists()

    (event,) = read_events(events_file)
    assert event["event_type"] == "export_failed"


@pytest.mark.integration
def test_unknown_font_fails_without_pdf(demo_user, tmp_path):
    result = export(demo_user, tmp_path, metrics=FixedWidthMetrics(fonts=["Helvetica"]))

    assert result.success is False
    assert result.commands == []
    assert "Unknown font: Helvetica-Bold" in result.errors[0]
    assert not (tmp_path / "resume.pdf").exists()


@pytest.mark.integration
def test_overlong_word_is_a_warning(demo_user, tmp_path):
    demo_user.resume.summary = "x" * 200

    result = export(demo_user, tmp_path)

    assert result.success
    assert any("past the right margin" in warning for warning in result.warnings)


@pytest.mark.integration
def test_event_can_be_skipped(demo_user, tmp_path, events_file):
    export(demo_user, tmp_path, record_event=False)

    assert not events_file.exists()
