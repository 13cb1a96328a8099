from __future__ import annotations

"""Container types for generated palettes.

This module defines :class:`PaletteColor` and :class:`Palette`, the
value shape consumed by the exporters.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .harmony import HarmonyRule


@dataclass(frozen=True)
class PaletteColor:
    """One named palette entry.

    Attributes
    ----------
    name:
        Positional name such as ``"color-1"``.
    hex:
        The harmony color itself, ``#RRGGBB``.
    shades:
        Shade label -> hex, in ramp order (``"50"`` ... ``"950"``).
    """

    name: str
    hex: str
    shades: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Palette:
    """Generated palette.

    Attributes
    ----------
    base_color:
        Normalized base color the palette was generated from.
    harmony:
        Rule used to derive the hues.
    colors:
        Colors in harmony order; index 0 is the primary color.
    """

    base_color: str
    harmony: HarmonyRule
    colors: Tuple[PaletteColor, ...]

    @property
    def primary(self) -> PaletteColor:
        return self.colors[0]

    @property
    def secondary(self) -> PaletteColor:
        """Second color, or the primary for single-color palettes."""
        return self.colors[1] if len(self.colors) > 1 else self.colors[0]

    def hex_colors(self) -> List[str]:
        return [c.hex for c in self.colors]

    def to_mapping(self) -> Dict[str, Dict[str, str]]:
        """Return ``{name: {shade: hex}}`` preserving palette and ramp order."""
        return {c.name: dict(c.shades) for c in self.colors}


__all__ = ["PaletteColor", "Palette"]
