from __future__ import annotations

"""Palette serializers.

Each exporter renders a palette (anything exposing ``colors`` whose
items carry ``name`` and ``shades``) into one text format. Output is
deterministic, joined with ``\\n`` and has no trailing newline. Writing
the text anywhere is left to the caller.
"""

import json
import logging
from enum import Enum
from typing import Dict, List

from .palette import Palette

logger = logging.getLogger(__name__)


class ExportFormat(Enum):
    """Supported text export formats."""

    CSS = "css"
    TAILWIND = "tailwind"
    JSON = "json"
    SCSS = "scss"

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown export format: {value}")


FORMAT_FILE_EXTENSIONS: Dict[ExportFormat, str] = {
    ExportFormat.CSS: ".css",
    ExportFormat.TAILWIND: ".js",
    ExportFormat.JSON: ".json",
    ExportFormat.SCSS: ".scss",
}


def export_to_css_variables(palette: Palette) -> str:
    """Render ``:root { --<name>-<shade>: <hex>; ... }``."""
    lines: List[str] = [":root {"]
    for color in palette.colors:
        for shade, hex_value in color.shades.items():
            lines.append(f"  --{color.name}-{shade}: {hex_value};")
    lines.append("}")
    return "\n".join(lines)


def export_to_tailwind(palette: Palette) -> str:
    """Render a Tailwind ``colors: {...}`` block without trailing commas."""
    lines: List[str] = ["colors: {"]
    n_colors = len(palette.colors)
    for i, color in enumerate(palette.colors):
        lines.append(f"  '{color.name}': {{")
        shades = list(color.shades.items())
        for j, (shade, hex_value) in enumerate(shades):
            sep = "" if j == len(shades) - 1 else ","
            lines.append(f"    '{shade}': '{hex_value}'{sep}")
        lines.append("  }" if i == n_colors - 1 else "  },")
    lines.append("}")
    return "\n".join(lines)


def export_to_json(palette: Palette) -> str:
    """Render ``{name: {shade: hex}}`` as 2-space indented JSON."""
    data: Dict[str, Dict[str, str]] = {}
    for color in palette.colors:
        data[color.name] = dict(color.shades)
    return json.dumps(data, indent=2)


def export_to_scss(palette: Palette) -> str:
    """Render one ``$<name>-<shade>: <hex>;`` line per shade."""
    lines: List[str] = []
    for color in palette.colors:
        for shade, hex_value in color.shades.items():
            lines.append(f"${color.name}-{shade}: {hex_value};")
    return "\n".join(lines)


_EXPORTERS = {
    ExportFormat.CSS: export_to_css_variables,
    ExportFormat.TAILWIND: export_to_tailwind,
    ExportFormat.JSON: export_to_json,
    ExportFormat.SCSS: export_to_scss,
}


def export_palette(palette: Palette, fmt: ExportFormat | str) -> str:
    """Render ``palette`` in the requested format."""
    export_fmt = fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)
    logger.debug("exporting %d colors as %s", len(palette.colors), export_fmt.value)
    return _EXPORTERS[export_fmt](palette)


__all__ = [
    "ExportFormat",
    "FORMAT_FILE_EXTENSIONS",
    "export_to_css_variables",
    "export_to_tailwind",
    "export_to_json",
    "export_to_scss",
    "export_palette",
]
