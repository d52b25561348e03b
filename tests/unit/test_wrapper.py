"""Unit tests for greedy line wrapping."""

import pytest

from catalyst.contexts.layout.metrics import FixedWidthMetrics
from catalyst.contexts.layout.wrapper import wrap_text

FONT = "Helvetica"
SIZE = 10


@pytest.fixture
def metrics():
    """10pt per character, any font."""
    return FixedWidthMetrics(char_width=10)


def wrap(text, max_width, metrics):
    return wrap_text(text, FONT, SIZE, max_width, metrics)


@pytest.mark.unit
def test_three_words_per_line(metrics):
    """Breaks fall before the word that would push a line past 150pt."""
    lines = wrap("The quick brown fox jumps over the lazy dog", 150, metrics)

    assert lines == ["The quick brown", "fox jumps over", "the lazy dog"]


@pytest.mark.unit
def test_line_exactly_at_max_width_fits(metrics):
    assert wrap("abcde fghij", 110, metrics) == ["abcde fghij"]
    assert wrap("abcde fghij", 109, metrics) == ["abcde", "fghij"]


@pytest.mark.unit
def test_single_overflowing_word_is_emitted_verbatim(metrics):
    """A lone word wider than the line is kept whole and does not raise."""
    word = "Supercalifragilisticexpialidocious"

    assert wrap(word, 50, metrics) == [word]


@pytest.mark.unit
def test_overflowing_word_between_short_words(metrics):
    lines = wrap("a bb Supercalifragilistic cc", 50, metrics)

    assert lines == ["a bb", "Supercalifragilistic", "cc"]


@pytest.mark.unit
def test_empty_text_gives_no_lines(metrics):
    assert wrap("", 100, metrics) == []


@pytest.mark.unit
def test_whitespace_only_text_is_kept_as_one_line(metrics):
    assert wrap("   ", 100, metrics) == ["   "]


@pytest.mark.unit
def test_newlines_are_hard_breaks(metrics):
    lines = wrap("first line\nsecond", 1000, metrics)

    assert lines == ["first line", "second"]


@pytest.mark.unit
def test_blank_segment_produces_no_line(metrics):
    assert wrap("one\n\ntwo", 1000, metrics) == ["one", "two"]


@pytest.mark.unit
def test_repeated_spaces_collapse_between_words(metrics):
    assert wrap("alpha    beta", 1000, metrics) == ["alpha beta"]


@pytest.mark.unit
@pytest.mark.parametrize("max_width", [40, 90, 150, 260])
def test_lines_fit_unless_single_word(metrics, max_width):
    text = "Designed and implemented desktop applications for retail inventory management"
    for line in wrap(text, max_width, metrics):
        if " " in line:
            assert metrics.measure(line, FONT, SIZE) <= max_width


@pytest.mark.unit
@pytest.mark.parametrize("max_width", [40, 90, 150, 260])
def test_wrapping_keeps_every_word_in_order(metrics, max_width):
    text = "Collaborated with cross-functional teams to deliver high-quality software"
    lines = wrap(text, max_width, metrics)

    assert " ".join(lines).split() == text.split()


@pytest.mark.unit
@pytest.mark.parametrize("max_width", [40, 90, 150, 260])
def test_rewrapping_wrapped_text_is_stable(metrics, max_width):
    text = "Mentored junior developers on testing practices and code review"
    lines = wrap(text, max_width, metrics)

    assert wrap(" ".join(lines), max_width, metrics) == lines
