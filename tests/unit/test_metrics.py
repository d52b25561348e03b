"""Unit tests for metrics providers."""

import pytest

from catalyst.contexts.layout.exceptions import MetricsError
from catalyst.contexts.layout.metrics import FixedWidthMetrics, StandardFontMetrics


@pytest.mark.unit
def test_standard_metrics_measures_helvetica():
    metrics = StandardFontMetrics()

    width = metrics.measure("Experience", "Helvetica-Bold", 12)

    assert width > 0
    assert metrics.measure("", "Helvetica", 10) == 0


@pytest.mark.unit
def test_standard_metrics_width_scales_with_size():
    metrics = StandardFontMetrics()

    small = metrics.measure("Resume", "Times-Roman", 10)
    large = metrics.measure("Resume", "Times-Roman", 20)

    assert large == pytest.approx(2 * small)


@pytest.mark.unit
def test_standard_metrics_unknown_font():
    with pytest.raises(MetricsError) as exc_info:
        StandardFontMetrics().measure("text", "NoSuchFont-Bold", 10)

    assert exc_info.value.font == "NoSuchFont-Bold"
    assert "NoSuchFont-Bold" in str(exc_info.value)


@pytest.mark.unit
@pytest.mark.parametrize("size", [0, -3])
def test_non_positive_size_is_rejected(size):
    with pytest.raises(MetricsError):
        StandardFontMetrics().measure("", "Helvetica", size)
    with pytest.raises(MetricsError):
        FixedWidthMetrics().measure("", "Helvetica", size)


@pytest.mark.unit
def test_fixed_width_metrics():
    metrics = FixedWidthMetrics(char_width=7.5)

    assert metrics.measure("abcd", "AnyFont", 10) == 30.0


@pytest.mark.unit
def test_fixed_width_metrics_font_whitelist():
    metrics = FixedWidthMetrics(fonts=["Helvetica"])

    assert metrics.measure("ab", "Helvetica", 10) == 20.0
    with pytest.raises(MetricsError):
        metrics.measure("", "Helvetica-Bold", 10)


@pytest.mark.unit
def test_metrics_error_is_value_error():
    assert issubclass(MetricsError, ValueError)
