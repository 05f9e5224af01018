"""
Regression tests: engine-wide invariants over sampled inputs.

Property-style checks driven by random.Random with fixed seeds so every
run sees the same samples.
"""

from __future__ import annotations

import random

import pytest

from src.components.C1_ColorSpace import (
    contrast_ratio,
    hex_to_hsl,
    hsl_to_hex,
    relative_luminance,
    rgb_to_hex,
)
from src.components.contrast import fix_contrast_to_target, repair_foreground
from src.components.palette import generate_base_palette
from src.components.typography import optimize_typography
from src.domain.entities import (
    SIZE_ORDER,
    ColorLocks,
    ColorSet,
    TextStyle,
    TypographyTokens,
    size_index,
)


def _hue_distance(a: float, b: float) -> float:
    diff = abs(a - b) % 360
    return min(diff, 360 - diff)


def _random_hex(rng: random.Random) -> str:
    return rgb_to_hex(rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255))


class TestColorRoundTrip:
    """HSL -> hex -> HSL recovers the input within one unit."""

    def test_saturated_mid_lightness(self) -> None:
        rng = random.Random(1)
        for _ in range(1000):
            h = rng.uniform(0, 360)
            s = rng.uniform(70, 100)
            l = rng.uniform(40, 60)  # noqa: E741
            back = hex_to_hsl(hsl_to_hex(h, s, l))
            assert _hue_distance(back.h, h) <= 1.0
            assert back.s == pytest.approx(s, abs=1.0)
            assert back.l == pytest.approx(l, abs=1.0)

    def test_lightness_full_range(self) -> None:
        rng = random.Random(2)
        for _ in range(1000):
            l = rng.uniform(0, 100)  # noqa: E741
            back = hex_to_hsl(hsl_to_hex(rng.uniform(0, 360), rng.uniform(0, 100), l))
            assert back.l == pytest.approx(l, abs=1.0)


class TestContrastMath:
    def test_symmetry(self) -> None:
        rng = random.Random(3)
        for _ in range(200):
            a, b = _random_hex(rng), _random_hex(rng)
            assert contrast_ratio(a, b) == pytest.approx(contrast_ratio(b, a))

    def test_extremes(self) -> None:
        assert contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0, rel=0.001)
        rng = random.Random(4)
        for _ in range(50):
            x = _random_hex(rng)
            assert contrast_ratio(x, x) == pytest.approx(1.0)


class TestPaletteInvariants:
    def test_determinism(self, catalog) -> None:
        locks = ColorLocks(primary=True)
        for preset in catalog.vibes:
            first = generate_base_palette(preset, 0.4217, None, locks)
            assert generate_base_palette(preset, 0.4217, None, locks) == first

    def test_lock_fidelity(self, vibe) -> None:
        rng = random.Random(5)
        preset = vibe("gradient-bloom")
        previous = generate_base_palette(preset, 0.123)
        for _ in range(200):
            colors = generate_base_palette(
                preset, rng.uniform(-1000, 1000), previous, ColorLocks(primary=True)
            )
            assert colors.primary == previous.primary


class TestContrastRepairMonotonic:
    def test_never_lowers_ratio(self) -> None:
        rng = random.Random(6)
        for _ in range(300):
            fg, bg = _random_hex(rng), _random_hex(rng)
            original = contrast_ratio(fg, bg)
            for target in (4.5, 7.0):
                repaired = repair_foreground(fg, bg, target)
                assert contrast_ratio(repaired, bg) >= original - 1e-9

    def test_saturated_reaches_aa_on_white(self) -> None:
        """Muted colours search a narrower window and may stop short."""
        rng = random.Random(7)
        for _ in range(300):
            fg = _random_hex(rng)
            if hex_to_hsl(fg).s < 20 or contrast_ratio(fg, "#ffffff") >= 4.5:
                continue
            repaired = repair_foreground(fg, "#ffffff", 4.5)
            assert contrast_ratio(repaired, "#ffffff") >= 4.5

    def test_saturated_reaches_aa_on_any_background(self) -> None:
        """Black or white always clears 4.5:1, so a full window always can."""
        rng = random.Random(9)
        checked = 0
        while checked < 300:
            fg, bg = _random_hex(rng), _random_hex(rng)
            if hex_to_hsl(fg).s < 20 or contrast_ratio(fg, bg) >= 4.5:
                continue
            checked += 1
            repaired = repair_foreground(fg, bg, 4.5)
            assert contrast_ratio(repaired, bg) >= 4.5, (fg, bg, repaired)

    def test_dark_pair_moves_toward_white(self) -> None:
        colors = ColorSet(
            primary="#3b5bdb",
            secondary="#e8590c",
            accent="#12b886",
            background="#222222",
            text="#111111",
        )
        fixed = fix_contrast_to_target(colors, "aa")
        assert relative_luminance(fixed.text) > relative_luminance(colors.text)
        assert contrast_ratio(fixed.text, fixed.background) >= 4.5


class TestTypographyInvariants:
    def test_randomised_inputs(self, catalog) -> None:
        rng = random.Random(8)
        weights = list(range(100, 1000, 100))

        def style() -> TextStyle:
            return TextStyle(
                size=rng.choice(SIZE_ORDER),
                weight=rng.choice(weights),
                style=rng.choice(["normal", "italic"]),
                transform=rng.choice(["none", "uppercase"]),
            )

        for _ in range(500):
            tokens = TypographyTokens(
                heading=style(),
                subheading=style() if rng.random() < 0.5 else None,
                body=style(),
                accent=style(),
            )
            colors = ColorSet(
                primary=_random_hex(rng),
                secondary=_random_hex(rng),
                accent=_random_hex(rng),
                background=_random_hex(rng),
                text=_random_hex(rng),
            )
            preset = rng.choice(catalog.vibes)
            result = optimize_typography(tokens, preset, colors, seed=rng.uniform(0, 100))

            assert result.subheading is not None
            assert size_index(result.heading.size) - size_index(result.body.size) >= 2
            assert size_index(result.subheading.size) == size_index(result.heading.size) - 1
            assert result.heading.weight - result.body.weight >= 200
            assert result.accent.weight <= result.heading.weight
            for slot in (result.heading, result.subheading, result.body, result.accent):
                assert 100 <= slot.weight <= 900

    def test_brutalist_seed(self, vibe, light_colors) -> None:
        tokens = TypographyTokens(
            heading=TextStyle(size="md", weight=400),
            body=TextStyle(size="sm", weight=400),
            accent=TextStyle(size="xs", weight=400),
        )
        result = optimize_typography(tokens, vibe("brutalist"), light_colors, seed=0.1)
        assert result.heading.weight >= 700
        assert size_index(result.heading.size) >= size_index("xl")
