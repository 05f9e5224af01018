"""Harmony palette tests."""

from __future__ import annotations

import pytest

from src.components.C1_ColorSpace import hex_to_hsl
from src.components.harmony import (
    HarmonyOptions,
    generate_harmony,
    generate_harmony_palette,
    random_harmony_type,
)
from src.components.palette import background_for_vibe, draw_primary_hsl
from src.domain.entities import HARMONY_TYPES, ColorLocks, ColorSet


def _hue_distance(a: float, b: float) -> float:
    diff = abs(a - b) % 360
    return min(diff, 360 - diff)


class TestGenerateHarmony:
    """Colour-wheel relationships."""

    def test_triadic_hues(self) -> None:
        harmony = generate_harmony(10, 60, 50, "triadic", 0.4217)
        assert _hue_distance(hex_to_hsl(harmony.primary).h, 10) < 2
        assert _hue_distance(hex_to_hsl(harmony.secondary).h, 130) < 2
        assert _hue_distance(hex_to_hsl(harmony.accent).h, 250) < 2

    def test_tetradic_hues(self) -> None:
        harmony = generate_harmony(200, 60, 50, "tetradic", 1.7)
        assert _hue_distance(hex_to_hsl(harmony.secondary).h, 290) < 2
        assert _hue_distance(hex_to_hsl(harmony.accent).h, 20) < 2

    def test_analogous_stays_close(self) -> None:
        harmony = generate_harmony(100, 60, 50, "analogous", 0.9)
        assert _hue_distance(hex_to_hsl(harmony.secondary).h, 120) <= 7
        assert _hue_distance(hex_to_hsl(harmony.accent).h, 75) <= 7

    @pytest.mark.parametrize("harmony_type", HARMONY_TYPES)
    def test_bounds(self, harmony_type) -> None:
        """Saturation is capped at 95 and lightness kept in [8, 92]."""
        harmony = generate_harmony(300, 100, 98, harmony_type, 2.2)
        for color in (harmony.primary, harmony.secondary, harmony.accent):
            hsl = hex_to_hsl(color)
            assert hsl.s <= 98
            assert 7 <= hsl.l <= 93

    def test_zero_variation_is_exact(self) -> None:
        options = HarmonyOptions(saturation_variation=0, lightness_variation=0)
        harmony = generate_harmony(0, 100, 50, "triadic", 0.3, options)
        assert harmony.primary == "#f90606"

    def test_unknown_type_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown harmony type"):
            generate_harmony(0, 50, 50, "pentadic", 0.1)  # type: ignore[arg-type]


class TestRandomHarmonyType:
    @pytest.mark.parametrize("seed", [0.0, 0.1, 0.4217, 5.5, -12.25, 1e6])
    def test_returns_known_type(self, seed: float) -> None:
        assert random_harmony_type(seed) in HARMONY_TYPES

    def test_deterministic(self) -> None:
        assert random_harmony_type(0.4217) == random_harmony_type(0.4217)

    def test_covers_several_types(self) -> None:
        seen = {random_harmony_type(i * 0.137) for i in range(200)}
        assert len(seen) >= 3


class TestHarmonyPalette:
    def test_uses_vibe_background(self, vibe) -> None:
        preset = vibe("dark-tech")
        colors = generate_harmony_palette(preset, 0.5, harmony_type="complementary")
        assert colors.background == background_for_vibe(preset)
        assert colors.text == "#ffffff"

    def test_explicit_type_is_used(self, vibe) -> None:
        preset = vibe("modern-saas")
        hue, saturation, lightness = draw_primary_hsl(preset, 0.6)
        expected = generate_harmony(hue, saturation, lightness, "triadic", 0.6)
        colors = generate_harmony_palette(preset, 0.6, harmony_type="triadic")
        assert colors.primary == expected.primary
        assert colors.secondary == expected.secondary
        assert colors.accent == expected.accent

    def test_deterministic(self, vibe) -> None:
        preset = vibe("gradient-bloom")
        assert generate_harmony_palette(preset, 3.14) == generate_harmony_palette(preset, 3.14)

    def test_locks(self, vibe, light_colors: ColorSet) -> None:
        colors = generate_harmony_palette(
            vibe("pastel"), 0.8, light_colors, ColorLocks(secondary=True, text=True)
        )
        assert colors.secondary == light_colors.secondary
        assert colors.text == light_colors.text
