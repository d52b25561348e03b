"""
Plain-text table formatting for command-line reports.

Used by the tracker CLI for job lists, recommendations and dashboard summaries.
"""

from typing import Any, List


class Column:
    """Column definition with fixed width; overlong values are truncated with '…'."""

    def __init__(self, name: str, width: int, align: str = "<"):
        """
        Args:
            name: Column header name
            width: Column width in characters
            align: Alignment ('<' left, '>' right, '^' center)
        """
        self.name = name
        self.width = width
        self.align = align

    def _fit(self, value: Any) -> str:
        text = "" if value is None else str(value)
        if len(text) > self.width:
            return text[: self.width - 1] + "…"
        return text

    def format_header(self) -> str:
        return f"{self._fit(self.name):{self.align}{self.width}}"

    def format_value(self, value: Any) -> str:
        return f"{self._fit(value):{self.align}{self.width}}"


class TableFormatter:
    """Builder for formatted text tables with aligned columns."""

    def __init__(self, columns: List[Column], total_width: int = 100):
        self.columns = columns
        self.total_width = total_width
        self.lines: List[str] = []

    def add_section_header(self, title: str) -> "TableFormatter":
        """Add section title framed by separator lines."""
        self.lines.append("=" * self.total_width)
        self.lines.append(title)
        self.lines.append("=" * self.total_width)
        return self

    def add_table_header(self) -> "TableFormatter":
        self.lines.append(" ".join(col.format_header() for col in self.columns))
        return self

    def add_separator(self, char: str = "-") -> "TableFormatter":
        self.lines.append(char * self.total_width)
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Add data row with column values.

        Raises:
            ValueError: If number of values doesn't match columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")

        self.lines.append(
            " ".join(col.format_value(val) for col, val in zip(self.columns, values)).rstrip()
        )
        return self

    def add_text(self, text: str) -> "TableFormatter":
        self.lines.append(text)
        return self

    def render(self) -> str:
        return "\n".join(self.lines)


def format_percentage(count: int, total: int, decimal_places: int = 1) -> str:
    """
    Format count as percentage of total (e.g., "75.0%").

    A zero total yields "0.0%" rather than raising.
    """
    if total == 0:
        return f"{0:.{decimal_places}f}%"
    percent = (count / total) * 100
    return f"{percent:.{decimal_places}f}%"
