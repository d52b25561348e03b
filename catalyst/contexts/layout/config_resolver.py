"""
Layout preset resolution.

Turns named presets from layout_presets.yaml into the PageGeometry and
LayoutStyle used by the page flow controller. Presets are composable and
later presets override earlier ones.

Examples:
    >>> geometry, style = resolve_layout(["page_a4", "style_standard", "template_creative"])

    >>> geometry, style = resolve_layout(presets_for_template("ACADEMIC") + ["style_compact"])
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from dotenv import load_dotenv
from omegaconf import OmegaConf

from catalyst.contexts.layout.pagination import LayoutStyle, PageGeometry

load_dotenv()
LAYOUT_PRESETS_PATH = Path(
    os.getenv("CATALYST_LAYOUT_PRESETS", Path(__file__).parent / "layout_presets.yaml")
)

GEOMETRY_FIELDS = ("width", "height", "margin")
DEFAULT_PAGE_PRESET = "page_a4"
DEFAULT_STYLE_PRESET = "style_standard"


def load_layout_presets(config_path: Optional[Path] = None) -> Dict[str, Dict[str, Any]]:
    """
    Load the presets file and flatten it to a single-level dict.

    Collapses nested structure: page.a4 -> page_a4

    Args:
        config_path: Optional path to presets file (defaults to CATALYST_LAYOUT_PRESETS)

    Returns:
        Flattened dict mapping preset names to configs
        Example: {"page_a4": {...}, "template_creative": {...}}
    """
    if config_path is None:
        config_path = LAYOUT_PRESETS_PATH

    nested = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

    flattened = {}
    for category, presets in nested.items():
        for name, config in presets.items():
            flattened[f"{category}_{name}"] = config

    return flattened


def presets_for_template(template: str) -> List[str]:
    """
    Default preset chain for a resume template name (e.g., "PROFESSIONAL").

    Returns:
        ["page_a4", "style_standard", "template_<name>"]
    """
    return [DEFAULT_PAGE_PRESET, DEFAULT_STYLE_PRESET, f"template_{template.lower()}"]


def resolve_layout(
    preset_names: List[str],
    config_path: Optional[Path] = None,
) -> Tuple[PageGeometry, LayoutStyle]:
    """
    Merge presets in order into page geometry and layout style.

    Starts from the A4 page and the standard style, then applies each named
    preset on top.

    Args:
        preset_names: Preset names to apply (e.g., ["page_letter", "template_minimalist"])
        config_path: Optional path to presets file

    Returns:
        (PageGeometry, LayoutStyle)

    Raises:
        ValueError: If a preset is not found or sets an unknown key
    """
    presets = load_layout_presets(config_path)

    merged: Dict[str, Any] = {}
    for preset_name in [DEFAULT_PAGE_PRESET, DEFAULT_STYLE_PRESET, *preset_names]:
        if preset_name not in presets:
            available = sorted(presets.keys())
            raise ValueError(f"Preset '{preset_name}' not found. Available presets: {available}")
        merged.update(presets[preset_name])

    style_fields = set(LayoutStyle.field_names())
    unknown = sorted(key for key in merged if key not in style_fields and key not in GEOMETRY_FIELDS)
    if unknown:
        raise ValueError(f"Unknown layout keys in presets {preset_names}: {unknown}")

    geometry = PageGeometry(**{key: float(merged[key]) for key in GEOMETRY_FIELDS})
    style = LayoutStyle(**{key: value for key, value in merged.items() if key in style_fields})
    return geometry, style
