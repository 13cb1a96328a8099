"""Shared fixtures.

- fixed random seeds
- a small hand-built palette for exporter tests
"""

from __future__ import annotations

import numpy as np
import pytest

from swatch import HarmonyRule, Palette, PaletteColor


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """Fix NumPy's legacy global seed."""
    np.random.seed(12345)


@pytest.fixture()
def rng() -> np.random.Generator:
    return np.random.default_rng(12345)


@pytest.fixture()
def small_palette() -> Palette:
    return Palette(
        base_color="#FFFFFF",
        harmony=HarmonyRule.COMPLEMENTARY,
        colors=(
            PaletteColor(name="a", hex="#FFFFFF", shades={"50": "#FFFFFF", "100": "#000000"}),
            PaletteColor(name="b", hex="#111111", shades={"50": "#111111"}),
        ),
    )
