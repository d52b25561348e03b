"""Unit tests for plain-text report tables."""

import pytest

from catalyst.utils.report_formatter import Column, TableFormatter, format_percentage


@pytest.mark.unit
def test_table_layout():
    table = TableFormatter([Column("Name", 6), Column("Count", 5, ">")], total_width=12)
    table.add_section_header("Jobs").add_table_header().add_separator()
    table.add_row(["Acme", 3])

    assert table.render().splitlines() == [
        "=" * 12,
        "Jobs",
        "=" * 12,
        "Name   Count",
        "-" * 12,
        "Acme       3",
    ]


@pytest.mark.unit
def test_long_values_are_truncated():
    column = Column("Title", 5)

    assert column.format_value("Kubernetes") == "Kube…"
    assert column.format_value(None) == "     "


@pytest.mark.unit
def test_row_length_must_match_columns():
    table = TableFormatter([Column("A", 3)])

    with pytest.raises(ValueError, match="Expected 1 values, got 2"):
        table.add_row(["x", "y"])


@pytest.mark.unit
def test_trailing_spaces_are_stripped():
    table = TableFormatter([Column("A", 3), Column("B", 3)])
    table.add_row(["x", ""])

    assert table.render() == "x"


@pytest.mark.unit
@pytest.mark.parametrize(
    "count, total, expected",
    [(3, 4, "75.0%"), (0, 0, "0.0%"), (1, 3, "33.3%")],
)
def test_format_percentage(count, total, expected):
    assert format_percentage(count, total) == expected
