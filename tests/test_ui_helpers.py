from __future__ import annotations

"""Collaborator-facing helper tests."""

import pytest

from swatch.export import ExportFormat
from swatch.harmony import HarmonyRule
from swatch.ui_helpers import (
    EXPORT_FORMAT_LABEL_MAP,
    EXPORT_FORMAT_OPTIONS,
    HARMONY_LABEL_MAP,
    HARMONY_OPTIONS,
    accept_hex_input,
    clamp_channel,
    harmony_description,
)


def test_options_cover_every_enum_member() -> None:
    assert [rule for _, rule, _ in HARMONY_OPTIONS] == list(HarmonyRule)
    assert [fmt for _, fmt in EXPORT_FORMAT_OPTIONS] == list(ExportFormat)
    assert HARMONY_LABEL_MAP["Split-Comp"] is HarmonyRule.SPLIT_COMPLEMENTARY
    assert EXPORT_FORMAT_LABEL_MAP["JSON"] is ExportFormat.JSON


def test_harmony_description() -> None:
    assert "180" in harmony_description(HarmonyRule.COMPLEMENTARY)


@pytest.mark.parametrize(
    "text, expected",
    [("0", 0), ("128", 128), ("300", 255), ("-5", 0), ("abc", 0), ("", 0), ("12px", 12), (128.7, 128), (999, 255)],
)
def test_clamp_channel(text, expected) -> None:
    assert clamp_channel(text) == expected


def test_accept_hex_input_keeps_previous_while_typing() -> None:
    assert accept_hex_input("#8B", "#000000") == "#000000"
    assert accept_hex_input("#8B5CF", "#000000") == "#000000"
    assert accept_hex_input("abc", "#000000") == "#AABBCC"
    assert accept_hex_input(" #8b5cf6", "#000000") == "#8B5CF6"
