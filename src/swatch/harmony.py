from __future__ import annotations

"""Hue harmony rules.

This module defines :class:`HarmonyRule` and the pure angle arithmetic
that maps one base hue to the ordered hue set of each rule. The order of
the returned hues matters downstream: index 0 is treated as the primary
color and index 1 as the secondary color.
"""

from enum import Enum
from typing import Callable, Dict, List

from .engine import hex_to_hsl, hsl_to_hex, normalize_hue


class HarmonyRule(Enum):
    """Classical color-wheel relationships."""

    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    SPLIT_COMPLEMENTARY = "split-complementary"
    TETRADIC = "tetradic"

    @classmethod
    def from_value(cls, value: "HarmonyRule | str") -> "HarmonyRule":
        """Resolve a rule from an enum member or a name.

        Names are matched case-insensitively; ``_`` and ``-`` are
        interchangeable and ``"split"`` is accepted for
        :attr:`SPLIT_COMPLEMENTARY`.
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("_", "-")
        if key == "split":
            return cls.SPLIT_COMPLEMENTARY
        for rule in cls:
            if rule.value == key:
                return rule
        raise ValueError(f"Unknown harmony rule: {value}")


def get_complementary(h: float) -> List[float]:
    """Base hue and its opposite (180 degrees)."""
    return [normalize_hue(h), normalize_hue(h + 180)]


def get_analogous(h: float) -> List[float]:
    """Neighbours at -30 and +30 degrees, base hue in the middle."""
    return [normalize_hue(h - 30), normalize_hue(h), normalize_hue(h + 30)]


def get_triadic(h: float) -> List[float]:
    return [normalize_hue(h), normalize_hue(h + 120), normalize_hue(h + 240)]


def get_split_complementary(h: float) -> List[float]:
    """Base hue plus the two neighbours of its complement."""
    return [normalize_hue(h), normalize_hue(h + 150), normalize_hue(h + 210)]


def get_tetradic(h: float) -> List[float]:
    return [
        normalize_hue(h),
        normalize_hue(h + 90),
        normalize_hue(h + 180),
        normalize_hue(h + 270),
    ]


# One entry per HarmonyRule member; tests keep this table exhaustive.
HUE_RULES: Dict[HarmonyRule, Callable[[float], List[float]]] = {
    HarmonyRule.COMPLEMENTARY: get_complementary,
    HarmonyRule.ANALOGOUS: get_analogous,
    HarmonyRule.TRIADIC: get_triadic,
    HarmonyRule.SPLIT_COMPLEMENTARY: get_split_complementary,
    HarmonyRule.TETRADIC: get_tetradic,
}


def compute_hues(rule: HarmonyRule, h: float) -> List[float]:
    """Compute the ordered hue angles of ``rule`` for base hue ``h``."""
    try:
        fn = HUE_RULES[rule]
    except KeyError:
        raise ValueError(f"Unsupported HarmonyRule: {rule}") from None
    return fn(h)


def harmony_colors(base_hex: str, rule: HarmonyRule) -> List[str]:
    """Turn the rule's hues back into hex colors.

    Every color keeps the saturation and lightness of ``base_hex``.
    """
    h, s, l = hex_to_hsl(base_hex)  # noqa: E741
    return [hsl_to_hex(hue, s, l) for hue in compute_hues(rule, h)]


__all__ = [
    "HarmonyRule",
    "HUE_RULES",
    "get_complementary",
    "get_analogous",
    "get_triadic",
    "get_split_complementary",
    "get_tetradic",
    "compute_hues",
    "harmony_colors",
]
