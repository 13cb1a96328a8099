from __future__ import annotations

"""Luminance and text-color decision tests."""

import pytest

from swatch.contrast import (
    DARK_MUTED_TEXT,
    DARK_TEXT,
    LIGHT_MUTED_TEXT,
    LIGHT_TEXT,
    muted_text_color_for,
    relative_luminance,
    should_use_light_text,
    text_color_for,
)


def test_luminance_extremes() -> None:
    assert relative_luminance("#000000") == 0.0
    assert relative_luminance("#FFFFFF") == pytest.approx(1.0)


def test_luminance_weights() -> None:
    assert relative_luminance("#FF0000") == pytest.approx(0.2126)
    assert relative_luminance("#00FF00") == pytest.approx(0.7152)
    assert relative_luminance("#0000FF") == pytest.approx(0.0722)
    assert relative_luminance("#808080") == pytest.approx(0.2159, abs=1e-3)


def test_should_use_light_text() -> None:
    assert should_use_light_text("#000000") is True
    assert should_use_light_text("#FFFFFF") is False
    assert should_use_light_text("#808080") is True
    assert should_use_light_text("#00FF00") is False


def test_text_color_choices() -> None:
    assert text_color_for("#000000") == LIGHT_TEXT
    assert text_color_for("#FFFFFF") == DARK_TEXT
    assert muted_text_color_for("#000000") == LIGHT_MUTED_TEXT
    assert muted_text_color_for("#FFFFFF") == DARK_MUTED_TEXT
    assert text_color_for("#FFFFFF", light="#EEEEEE", dark="#111111") == "#111111"
