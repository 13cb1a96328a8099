from __future__ import annotations

"""Core color value types used by the swatch engine.

Colors travel through the engine in three shapes: a ``#RRGGBB`` hex
string, an integer :class:`RGB` triple, and an integer :class:`HSL`
triple. All of them are plain immutable values.
"""

from typing import NamedTuple


Hex = str


class RGB(NamedTuple):
    """Integer sRGB triple, each channel in [0, 255]."""

    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """HSL triple with integer degrees and percents.

    Attributes
    ----------
    h:
        Hue in degrees, [0, 360).
    s:
        Saturation in percent, [0, 100].
    l:
        Lightness in percent, [0, 100].
    """

    h: int
    s: int
    l: int  # noqa: E741


__all__ = ["Hex", "RGB", "HSL"]
