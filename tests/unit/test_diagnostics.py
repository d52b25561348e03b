"""Unit tests for layout diagnostics."""

import pytest

from catalyst.contexts.layout.blocks import Heading, Paragraph
from catalyst.contexts.layout.diagnostics import analyze_layout
from catalyst.contexts.layout.metrics import FixedWidthMetrics
from catalyst.contexts.layout.pagination import (
    DrawLine,
    DrawText,
    NewPage,
    PageGeometry,
    layout_document,
)

GEOMETRY = PageGeometry(width=200, height=400, margin=50)


def text(value, y, x=50):
    return DrawText(value, "Helvetica", 10, x, y)


@pytest.mark.unit
def test_layout_output_is_valid():
    """Commands produced by layout_document pass every check."""
    metrics = FixedWidthMetrics(10)
    blocks = [Heading("Work"), Paragraph(" ".join(f"word{i:04d}" for i in range(50)))]
    commands = layout_document(blocks, GEOMETRY, metrics)

    diagnostics = analyze_layout(commands, GEOMETRY, metrics)

    assert diagnostics.is_valid
    assert diagnostics.page_count == 3
    assert diagnostics.command_count == len(commands)
    assert diagnostics.get_inherited_warnings() == []


@pytest.mark.unit
def test_empty_command_list():
    diagnostics = analyze_layout([], GEOMETRY)

    assert diagnostics.page_count == 0
    assert diagnostics.is_valid


@pytest.mark.unit
def test_below_bottom_margin():
    diagnostics = analyze_layout([text("low", 40)], GEOMETRY)

    (issue,) = diagnostics.get_inherited_issues()
    assert "below the bottom margin" in issue
    assert "'low'" in issue


@pytest.mark.unit
def test_above_top_margin():
    diagnostics = analyze_layout([text("high", 351)], GEOMETRY)

    (issue,) = diagnostics.get_inherited_issues()
    assert "above the top margin" in issue


@pytest.mark.unit
def test_baseline_moving_up_within_page():
    diagnostics = analyze_layout([text("a", 300), text("b", 320)], GEOMETRY)

    (issue,) = diagnostics.get_inherited_issues()
    assert "above the previous baseline (300.00)" in issue


@pytest.mark.unit
def test_baseline_resets_across_pages():
    """A new page starts back at the top without being reported."""
    diagnostics = analyze_layout([text("a", 100), NewPage(), text("b", 350)], GEOMETRY)

    assert diagnostics.is_valid
    assert diagnostics.page_count == 2


@pytest.mark.unit
def test_empty_page():
    diagnostics = analyze_layout([text("a", 300), NewPage(), NewPage(), text("b", 300)], GEOMETRY)

    assert diagnostics.get_inherited_issues() == ["Page 2 has no content"]


@pytest.mark.unit
def test_right_overflow_is_a_warning_only():
    metrics = FixedWidthMetrics(10)
    commands = [text("x" * 12, 300)]

    diagnostics = analyze_layout(commands, GEOMETRY, metrics)

    assert diagnostics.is_valid
    (warning,) = diagnostics.get_inherited_warnings()
    assert "20.00pt past the right margin" in warning


@pytest.mark.unit
def test_overflow_needs_metrics():
    diagnostics = analyze_layout([text("x" * 12, 300)], GEOMETRY)

    assert diagnostics.get_inherited_warnings() == []


@pytest.mark.unit
def test_rules_are_checked():
    diagnostics = analyze_layout([DrawLine(50, 30, 150, 30)], GEOMETRY)

    (issue,) = diagnostics.get_inherited_issues()
    assert "'<rule>'" in issue


@pytest.mark.unit
def test_long_text_is_shortened_in_messages():
    diagnostics = analyze_layout([text("y" * 60, 10)], GEOMETRY)

    (issue,) = diagnostics.get_inherited_issues()
    assert "y" * 30 + "..." in issue
    assert "y" * 31 not in issue
