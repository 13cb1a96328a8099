from __future__ import annotations

"""High-level public API for generating palettes.

This module provides :func:`generate_palette`, which coordinates input
validation, hue harmony, color conversion and shade expansion to
produce a :class:`swatch.palette.Palette`.
"""

import logging

from .engine import is_valid_hex, normalize_hex
from .harmony import HarmonyRule, harmony_colors
from .palette import Palette, PaletteColor
from .shades import generate_shades

logger = logging.getLogger(__name__)


def generate_palette(base_color: str, harmony: HarmonyRule | str) -> Palette:
    """Generate a palette from a base color.

    Parameters
    ----------
    base_color:
        Hex color, ``#RGB`` / ``#RRGGBB`` with or without ``#``.
    harmony:
        HarmonyRule, or one of its names (see :meth:`HarmonyRule.from_value`).

    Returns
    -------
    Palette
        Colors named ``color-1``, ``color-2``, ... in harmony order, each
        with its 11-step shade ramp.

    Raises
    ------
    ValueError
        If ``base_color`` is not a valid hex string or ``harmony`` is not
        a known rule.
    """
    if not is_valid_hex(base_color.strip()):
        raise ValueError(f"Invalid hex color: {base_color!r}")
    rule = HarmonyRule.from_value(harmony)
    base = normalize_hex(base_color)

    colors = tuple(
        PaletteColor(name=f"color-{i}", hex=hex_value, shades=generate_shades(hex_value))
        for i, hex_value in enumerate(harmony_colors(base, rule), start=1)
    )
    logger.debug("generated %s palette from %s: %s", rule.value, base, [c.hex for c in colors])
    return Palette(base_color=base, harmony=rule, colors=colors)


__all__ = ["generate_palette"]
