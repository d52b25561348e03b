"""Unit tests for layout preset resolution."""

import pytest

from catalyst.contexts.layout.config_resolver import (
    load_layout_presets,
    presets_for_template,
    resolve_layout,
)
from catalyst.contexts.layout.pagination import LayoutStyle


@pytest.mark.unit
def test_presets_are_flattened():
    presets = load_layout_presets()

    assert {"page_a4", "page_letter", "style_standard", "style_compact"} <= set(presets)
    for template in ["professional", "creative", "minimalist", "academic", "technical"]:
        assert f"template_{template}" in presets


@pytest.mark.unit
def test_defaults_are_a4_standard():
    geometry, style = resolve_layout([])

    assert geometry.width == pytest.approx(595.27563)
    assert geometry.height == pytest.approx(841.8898)
    assert geometry.margin == 50
    assert style == LayoutStyle()


@pytest.mark.unit
def test_later_presets_override_earlier():
    geometry, style = resolve_layout(["page_letter", "style_compact", "template_academic"])

    assert (geometry.width, geometry.height) == (612, 792)
    assert style.body_size == 9
    assert style.line_height == 12
    assert style.body_font == "Times-Roman"
    assert style.bold_font == "Times-Bold"


@pytest.mark.unit
@pytest.mark.parametrize(
    "template, accent",
    [
        ("PROFESSIONAL", "#0066CC"),
        ("CREATIVE", "#27AE60"),
        ("MINIMALIST", "#000000"),
        ("ACADEMIC", "#2C3E50"),
        ("TECHNICAL", "#0066CC"),
    ],
)
def test_template_accent_colors(template, accent):
    _, style = resolve_layout(presets_for_template(template))

    assert style.accent_color == accent


@pytest.mark.unit
def test_minimalist_drops_underlines():
    _, style = resolve_layout(presets_for_template("MINIMALIST"))

    assert style.underline_headings is False


@pytest.mark.unit
def test_presets_for_template():
    assert presets_for_template("Creative") == ["page_a4", "style_standard", "template_creative"]


@pytest.mark.unit
def test_unknown_preset():
    with pytest.raises(ValueError, match="Preset 'page_tabloid' not found"):
        resolve_layout(["page_tabloid"])


@pytest.mark.unit
def test_unknown_key_in_custom_presets(tmp_path):
    config = tmp_path / "presets.yaml"
    config.write_text(
        "page:\n"
        "  a4: {width: 595, height: 842, margin: 50}\n"
        "style:\n"
        "  standard: {body_size: 10}\n"
        "  broken: {body_sise: 11}\n"
    )

    with pytest.raises(ValueError, match="body_sise"):
        resolve_layout(["style_broken"], config_path=config)


@pytest.mark.unit
def test_custom_presets_file(tmp_path):
    config = tmp_path / "presets.yaml"
    config.write_text(
        "page:\n"
        "  a4: {width: 595, height: 842, margin: 50}\n"
        "  card: {width: 300, height: 200, margin: 10}\n"
        "style:\n"
        "  standard: {body_size: 10}\n"
    )

    geometry, style = resolve_layout(["page_card"], config_path=config)

    assert (geometry.width, geometry.height, geometry.margin) == (300.0, 200.0, 10.0)
    assert style.body_size == 10
