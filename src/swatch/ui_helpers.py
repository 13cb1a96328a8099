from __future__ import annotations

"""Helper utilities for integrating swatch into external UIs.

This module exposes label/enum pairs for harmony rules and export
formats, plus the input-boundary helpers that form fields need before
handing values to the engine: channel clamping for free-text RGB entry
and keep-previous handling for partially typed hex input.
"""

from typing import Dict, List, Tuple

from .engine import is_valid_hex, normalize_hex
from .export import ExportFormat
from .harmony import HarmonyRule


# (label, rule, description) in display order
HARMONY_OPTIONS: List[Tuple[str, HarmonyRule, str]] = [
    ("Complementary", HarmonyRule.COMPLEMENTARY, "Opposite color (180°)"),
    ("Analogous", HarmonyRule.ANALOGOUS, "Adjacent colors (±30°)"),
    ("Triadic", HarmonyRule.TRIADIC, "3 evenly spaced colors"),
    ("Split-Comp", HarmonyRule.SPLIT_COMPLEMENTARY, "Complement and its neighbours"),
    ("Tetradic", HarmonyRule.TETRADIC, "4 evenly spaced colors"),
]
EXPORT_FORMAT_OPTIONS: List[Tuple[str, ExportFormat]] = [
    ("CSS Variables", ExportFormat.CSS),
    ("Tailwind Config", ExportFormat.TAILWIND),
    ("JSON", ExportFormat.JSON),
    ("SCSS Variables", ExportFormat.SCSS),
]

HARMONY_LABEL_MAP: Dict[str, HarmonyRule] = {label: rule for label, rule, _ in HARMONY_OPTIONS}
EXPORT_FORMAT_LABEL_MAP: Dict[str, ExportFormat] = {
    label: fmt for label, fmt in EXPORT_FORMAT_OPTIONS
}


def harmony_description(rule: HarmonyRule) -> str:
    for _, value, description in HARMONY_OPTIONS:
        if value is rule:
            return description
    return ""


def clamp_channel(text: str | int | float) -> int:
    """Parse a free-text RGB channel and clamp it to [0, 255].

    Leading integer digits are used (``"12px"`` -> 12); anything
    unparsable becomes 0.
    """
    if isinstance(text, (int, float)):
        try:
            value = int(text)
        except (OverflowError, ValueError):
            value = 0
    else:
        s = str(text).strip()
        digits = ""
        for i, ch in enumerate(s):
            if ch.isdigit() or (i == 0 and ch in "+-"):
                digits += ch
            else:
                break
        try:
            value = int(digits)
        except ValueError:
            value = 0
    return max(0, min(255, value))


def accept_hex_input(text: str, previous: str) -> str:
    """Return the normalized color for ``text``, or ``previous`` if invalid.

    Lets a form field keep showing the last good color while the user is
    still typing.
    """
    if is_valid_hex(text.strip()):
        return normalize_hex(text)
    return previous


__all__ = [
    "HARMONY_OPTIONS",
    "EXPORT_FORMAT_OPTIONS",
    "HARMONY_LABEL_MAP",
    "EXPORT_FORMAT_LABEL_MAP",
    "harmony_description",
    "clamp_channel",
    "accept_hex_input",
]
