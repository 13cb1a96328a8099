from __future__ import annotations

"""Tonal shade ramps.

A ramp keeps the hue and saturation of one color and walks lightness
through a fixed table, from the near-white ``50`` to the near-black
``950``.
"""

from typing import Dict, Tuple

from .engine import hex_to_hsl, hsl_to_hex


# label -> lightness percent, lightest first
SHADE_LIGHTNESS: Dict[str, int] = {
    "50": 95,
    "100": 90,
    "200": 80,
    "300": 70,
    "400": 60,
    "500": 50,
    "600": 40,
    "700": 30,
    "800": 20,
    "900": 10,
    "950": 5,
}

SHADE_LABELS: Tuple[str, ...] = tuple(SHADE_LIGHTNESS)


def generate_shades(hex_str: str) -> Dict[str, str]:
    """Return the 11-step ramp for ``hex_str`` keyed by shade label.

    The original lightness of the color is discarded; keys follow
    :data:`SHADE_LABELS` order.
    """
    h, s, _ = hex_to_hsl(hex_str)
    return {label: hsl_to_hex(h, s, lightness) for label, lightness in SHADE_LIGHTNESS.items()}


__all__ = ["SHADE_LIGHTNESS", "SHADE_LABELS", "generate_shades"]
