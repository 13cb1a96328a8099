from __future__ import annotations

"""Shade ramp tests."""

from swatch.engine import hex_to_hsl, is_valid_hex
from swatch.shades import SHADE_LABELS, SHADE_LIGHTNESS, generate_shades


def test_labels_and_order() -> None:
    assert SHADE_LABELS == ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950")
    shades = generate_shades("#FF0000")
    assert tuple(shades) == SHADE_LABELS


def test_red_ramp() -> None:
    shades = generate_shades("#FF0000")
    assert all(is_valid_hex(v) for v in shades.values())
    assert shades["500"] == "#FF0000"
    lightness = [hex_to_hsl(shades[label]).l for label in SHADE_LABELS]
    assert abs(lightness[SHADE_LABELS.index("500")] - 50) <= 1
    assert all(a > b for a, b in zip(lightness, lightness[1:]))


def test_ramp_keeps_hue_and_ignores_input_lightness() -> None:
    dark = generate_shades("#330000")
    light = generate_shades("#FFCCCC")
    assert dark == light
    for label, value in dark.items():
        h, s, l = hex_to_hsl(value)  # noqa: E741
        assert h == 0
        assert abs(l - SHADE_LIGHTNESS[label]) <= 1


def test_gray_ramp_is_achromatic() -> None:
    for value in generate_shades("#808080").values():
        assert value[1:3] == value[3:5] == value[5:7]
