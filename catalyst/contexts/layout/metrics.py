"""
Text metrics providers.

The layout engine never measures text itself; it asks a provider that
satisfies the MetricsProvider protocol. Providers must raise MetricsError for
an unknown font or a non-positive size, even when asked to measure "".
"""

from typing import Dict, Iterable, Optional, Protocol

from reportlab.pdfbase import pdfmetrics

from catalyst.contexts.layout.exceptions import MetricsError


class MetricsProvider(Protocol):
    def measure(self, text: str, font: str, size: float) -> float:
        """Return the rendered width of text in points."""
        ...


def _check_size(font: str, size: float) -> None:
    if size is None or size <= 0:
        raise MetricsError("Font size must be positive", font=font, size=size)


class StandardFontMetrics:
    """
    Widths from ReportLab's font registry.

    Covers the 14 standard PDF Type1 fonts out of the box (Helvetica, Times,
    Courier and their variants) plus any font registered with
    reportlab.pdfbase.pdfmetrics.registerFont.

    Example:
        >>> metrics = StandardFontMetrics()
        >>> metrics.measure("Experience", "Helvetica-Bold", 12)
        63.36
    """

    def __init__(self):
        self._fonts: Dict[str, object] = {}

    def _font(self, font: str):
        cached = self._fonts.get(font)
        if cached is not None:
            return cached
        try:
            resolved = pdfmetrics.getFont(font)
        except KeyError as e:
            raise MetricsError(f"Unknown font: {font}", font=font) from e
        self._fonts[font] = resolved
        return resolved

    def measure(self, text: str, font: str, size: float) -> float:
        _check_size(font, size)
        return self._font(font).stringWidth(text, size)


class FixedWidthMetrics:
    """
    Every character is char_width points wide, whatever the font or size.

    Args:
        char_width: Width of one character in points
        fonts: Known font names (None accepts any font)
    """

    def __init__(self, char_width: float = 10.0, fonts: Optional[Iterable[str]] = None):
        self.char_width = char_width
        self.fonts = set(fonts) if fonts is not None else None

    def measure(self, text: str, font: str, size: float) -> float:
        if self.fonts is not None and font not in self.fonts:
            raise MetricsError(f"Unknown font: {font}", font=font)
        _check_size(font, size)
        return len(text) * self.char_width
