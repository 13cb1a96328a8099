from __future__ import annotations

"""Color space conversions between hex, RGB and HSL.

This module is the numeric core of swatch. Every function here is pure
and never raises: malformed input produces malformed (or ``nan``-bearing)
output, so callers are expected to validate hex strings with
:func:`is_valid_hex` at their own input boundary.

HSL values are rounded to integer degrees/percents, which makes
RGB -> HSL -> RGB accurate to within one unit per channel rather than
bit-exact.
"""

import math
import re

import numpy as np

from .color_types import HSL, RGB


_HEX_PATTERN = re.compile(r"#?([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})")


def _round_half_up(x: float) -> int:
    # Python's round() is banker's rounding; 127.5 must become 128.
    if not math.isfinite(x):
        return x  # type: ignore[return-value]
    return int(math.floor(x + 0.5))


def _parse_byte(digits: str) -> int:
    try:
        return int(digits, 16)
    except ValueError:
        return math.nan  # type: ignore[return-value]


def _to_hex_byte(n: float) -> str:
    v = _round_half_up(n)
    if not isinstance(v, int):
        return "NAN"
    return f"{v:02X}"


def normalize_hue(h: float) -> float:
    """Normalize hue angle into [0, 360)."""
    return (h % 360 + 360) % 360


def hex_to_rgb(hex_str: str) -> RGB:
    """Parse ``#RRGGBB`` into an :class:`RGB` triple.

    The input is not validated; a channel that is not two hex digits
    comes back as ``nan``.
    """
    cleaned = hex_str.replace("#", "")
    return RGB(
        _parse_byte(cleaned[0:2]),
        _parse_byte(cleaned[2:4]),
        _parse_byte(cleaned[4:6]),
    )


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Format channels as uppercase ``#RRGGBB``.

    Channels are rounded to the nearest integer but not clamped; callers
    must pass values in [0, 255].
    """
    return f"#{_to_hex_byte(r)}{_to_hex_byte(g)}{_to_hex_byte(b)}"


def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """Convert 0-255 channels to an integer :class:`HSL` triple."""
    r, g, b = r / 255, g / 255, b / 255
    c_max = max(r, g, b)
    c_min = min(r, g, b)
    h = 0.0
    s = 0.0
    l = (c_max + c_min) / 2  # noqa: E741

    if c_max != c_min:
        d = c_max - c_min
        s = d / (2 - c_max - c_min) if l > 0.5 else d / (c_max + c_min)
        if c_max == r:
            h = ((g - b) / d + (6 if g < b else 0)) / 6
        elif c_max == g:
            h = ((b - r) / d + 2) / 6
        else:
            h = ((r - g) / d + 4) / 6

    # h just below 1.0 rounds up to 360 degrees.
    hue = normalize_hue(_round_half_up(h * 360))
    return HSL(hue, _round_half_up(s * 100), _round_half_up(l * 100))


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:  # noqa: E741
    """Convert HSL (degrees, percent, percent) to 0-255 :class:`RGB`."""
    h = h / 360
    s = s / 100
    l = l / 100  # noqa: E741

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return RGB(_round_half_up(r * 255), _round_half_up(g * 255), _round_half_up(b * 255))


def hex_to_hsl(hex_str: str) -> HSL:
    """Convert ``#RRGGBB`` to :class:`HSL`."""
    return rgb_to_hsl(*hex_to_rgb(hex_str))


def hsl_to_hex(h: float, s: float, l: float) -> str:  # noqa: E741
    """Convert HSL to uppercase ``#RRGGBB``."""
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def is_valid_hex(value: str) -> bool:
    """Return True if ``value`` is 3 or 6 hex digits, optionally ``#``-prefixed."""
    return _HEX_PATTERN.fullmatch(value) is not None


def normalize_hex(value: str) -> str:
    """Canonicalize a hex string to ``#RRGGBB`` uppercase.

    Trims whitespace, adds a missing ``#`` and expands ``#RGB`` shorthand.
    No validation is performed; check :func:`is_valid_hex` first.
    """
    cleaned = value.strip()
    if not cleaned.startswith("#"):
        cleaned = "#" + cleaned
    if len(cleaned) == 4:
        cleaned = "#" + "".join(ch * 2 for ch in cleaned[1:])
    return cleaned.upper()


def random_color(rng: np.random.Generator | None = None) -> str:
    """Return a random, reasonably saturated mid-lightness color.

    Hue is drawn from [0, 360), saturation from [60, 100) and lightness
    from [40, 70) so that the result is neither grayish nor extreme.

    Parameters
    ----------
    rng:
        Optional NumPy generator for reproducible draws. A fresh
        ``default_rng()`` is used when omitted.
    """
    if rng is None:
        rng = np.random.default_rng()
    h = int(rng.integers(0, 360))
    s = int(rng.integers(60, 100))
    l = int(rng.integers(40, 70))  # noqa: E741
    return hsl_to_hex(h, s, l)


__all__ = [
    "normalize_hue",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hex_to_hsl",
    "hsl_to_hex",
    "is_valid_hex",
    "normalize_hex",
    "random_color",
]
