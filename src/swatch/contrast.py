from __future__ import annotations

"""Readability helpers based on WCAG relative luminance.

:func:`should_use_light_text` is a simple threshold heuristic used to
pick between two fixed text colors; it does not compute a contrast ratio
against a particular foreground.
"""

from .engine import hex_to_rgb


LIGHT_TEXT = "#FFFFFF"
DARK_TEXT = "#1F2937"
LIGHT_MUTED_TEXT = "#D1D5DB"
DARK_MUTED_TEXT = "#6B7280"


def _channel_to_linear(v: float) -> float:
    v = v / 255
    if v <= 0.03928:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def relative_luminance(hex_str: str) -> float:
    """WCAG relative luminance of ``hex_str`` in [0, 1]."""
    r, g, b = (_channel_to_linear(c) for c in hex_to_rgb(hex_str))
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def should_use_light_text(background: str) -> bool:
    """True when text over ``background`` should be light."""
    return relative_luminance(background) < 0.5


def text_color_for(background: str, light: str = LIGHT_TEXT, dark: str = DARK_TEXT) -> str:
    """Pick ``light`` or ``dark`` for body text over ``background``."""
    return light if should_use_light_text(background) else dark


def muted_text_color_for(
    background: str,
    light: str = LIGHT_MUTED_TEXT,
    dark: str = DARK_MUTED_TEXT,
) -> str:
    """Same decision as :func:`text_color_for`, with secondary-text colors."""
    return text_color_for(background, light=light, dark=dark)


__all__ = [
    "LIGHT_TEXT",
    "DARK_TEXT",
    "LIGHT_MUTED_TEXT",
    "DARK_MUTED_TEXT",
    "relative_luminance",
    "should_use_light_text",
    "text_color_for",
    "muted_text_color_for",
]
