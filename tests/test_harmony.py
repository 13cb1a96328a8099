from __future__ import annotations

"""Harmony rule tests."""

import pytest

from swatch.harmony import (
    HUE_RULES,
    HarmonyRule,
    compute_hues,
    get_analogous,
    get_complementary,
    get_split_complementary,
    get_tetradic,
    get_triadic,
    harmony_colors,
)


def test_reference_angles() -> None:
    assert get_complementary(0) == [0, 180]
    assert get_analogous(10) == [340, 10, 40]
    assert get_triadic(0) == [0, 120, 240]
    assert get_split_complementary(0) == [0, 150, 210]
    assert get_tetradic(0) == [0, 90, 180, 270]


def test_angles_wrap_into_range() -> None:
    assert get_complementary(270) == [270, 90]
    assert get_tetradic(300) == [300, 30, 120, 210]
    assert get_analogous(350.5) == [320.5, 350.5, 20.5]
    for fn in HUE_RULES.values():
        assert all(0 <= h < 360 for h in fn(-725))


def test_base_hue_position() -> None:
    """The base hue is first, except for analogous where it sits in the middle."""
    for rule in HarmonyRule:
        hues = compute_hues(rule, 42)
        expected_index = 1 if rule is HarmonyRule.ANALOGOUS else 0
        assert hues[expected_index] == 42


def test_rule_table_is_exhaustive() -> None:
    assert set(HUE_RULES) == set(HarmonyRule)


def test_compute_hues_rejects_non_rule() -> None:
    with pytest.raises(ValueError):
        compute_hues("complementary", 0)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "name, rule",
    [
        ("complementary", HarmonyRule.COMPLEMENTARY),
        ("Analogous", HarmonyRule.ANALOGOUS),
        (" TRIADIC ", HarmonyRule.TRIADIC),
        ("split-complementary", HarmonyRule.SPLIT_COMPLEMENTARY),
        ("split_complementary", HarmonyRule.SPLIT_COMPLEMENTARY),
        ("split", HarmonyRule.SPLIT_COMPLEMENTARY),
        ("tetradic", HarmonyRule.TETRADIC),
        (HarmonyRule.TETRADIC, HarmonyRule.TETRADIC),
    ],
)
def test_from_value(name, rule) -> None:
    assert HarmonyRule.from_value(name) is rule


def test_from_value_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown harmony rule"):
        HarmonyRule.from_value("monochrome")


def test_harmony_colors_keep_saturation_and_lightness() -> None:
    assert harmony_colors("#FF0000", HarmonyRule.COMPLEMENTARY) == ["#FF0000", "#00FFFF"]
    assert harmony_colors("#FF0000", HarmonyRule.TRIADIC) == ["#FF0000", "#00FF00", "#0000FF"]
    assert len(harmony_colors("#8B5CF6", HarmonyRule.TETRADIC)) == 4
