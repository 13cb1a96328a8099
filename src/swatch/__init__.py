"""Public entrypoint for the swatch palette library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``swatch`` instead of individual
submodules.
"""

from .color_types import HSL, RGB, Hex
from .engine import (
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    is_valid_hex,
    normalize_hex,
    normalize_hue,
    random_color,
    rgb_to_hex,
    rgb_to_hsl,
)
from .harmony import (
    HarmonyRule,
    compute_hues,
    get_analogous,
    get_complementary,
    get_split_complementary,
    get_tetradic,
    get_triadic,
    harmony_colors,
)
from .shades import SHADE_LABELS, SHADE_LIGHTNESS, generate_shades
from .contrast import relative_luminance, should_use_light_text, text_color_for
from .palette import Palette, PaletteColor
from .api import generate_palette
from .export import (
    ExportFormat,
    export_palette,
    export_to_css_variables,
    export_to_json,
    export_to_scss,
    export_to_tailwind,
)
from .ui_helpers import EXPORT_FORMAT_OPTIONS, HARMONY_OPTIONS

__all__ = [
    "Hex",
    "RGB",
    "HSL",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hex_to_hsl",
    "hsl_to_hex",
    "normalize_hue",
    "is_valid_hex",
    "normalize_hex",
    "random_color",
    "HarmonyRule",
    "compute_hues",
    "get_complementary",
    "get_analogous",
    "get_triadic",
    "get_split_complementary",
    "get_tetradic",
    "harmony_colors",
    "SHADE_LABELS",
    "SHADE_LIGHTNESS",
    "generate_shades",
    "relative_luminance",
    "should_use_light_text",
    "text_color_for",
    "Palette",
    "PaletteColor",
    "generate_palette",
    "ExportFormat",
    "export_palette",
    "export_to_css_variables",
    "export_to_tailwind",
    "export_to_json",
    "export_to_scss",
    "HARMONY_OPTIONS",
    "EXPORT_FORMAT_OPTIONS",
]
