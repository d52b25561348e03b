"""
Greedy word-boundary line wrapping.

wrap_text is a pure function: it keeps no state between calls and only
depends on the metrics provider for widths.
"""

from typing import List

from catalyst.contexts.layout.metrics import MetricsProvider


def wrap_text(
    text: str,
    font: str,
    size: float,
    max_width: float,
    metrics: MetricsProvider,
) -> List[str]:
    """
    Split text into lines that fit within max_width.

    Newlines are hard breaks: each segment is wrapped on its own. Within a
    segment, words (runs of non-space characters) are packed greedily,
    joined by single spaces. A word that is wider than max_width on its own
    is emitted verbatim on its own line; words are never split.

    Args:
        text: Text to wrap (already trimmed by the caller)
        font: Font name passed to the metrics provider
        size: Font size in points
        max_width: Maximum line width in points
        metrics: Width provider

    Returns:
        Wrapped lines in order. Empty text gives an empty list; a segment of
        only spaces gives one line holding those spaces unchanged; an empty
        segment (blank line) gives no line.

    Example:
        >>> wrap_text("The quick brown fox", "Helvetica", 10, 90, FixedWidthMetrics(10))
        ['The quick', 'brown fox']
    """
    lines: List[str] = []
    if not text:
        return lines

    for segment in text.split("\n"):
        words = [word for word in segment.split(" ") if word]
        if not words:
            if segment:
                lines.append(segment)
            continue

        line = ""
        for word in words:
            candidate = f"{line} {word}" if line else word
            if metrics.measure(candidate, font, size) <= max_width:
                line = candidate
            elif line:
                # Break before the word that overflowed
                lines.append(line)
                line = word
            else:
                # Lone word wider than the line: accept the overflow
                lines.append(candidate)
                line = ""

        if line:
            lines.append(line)

    return lines
