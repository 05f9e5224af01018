"""
Colour-space utility tests.

Covers hex parsing, HSL conversion, blending and WCAG contrast.
"""

from __future__ import annotations

import pytest

from src.components.C1_ColorSpace import (
    InvalidHexColorError,
    adjust_lightness,
    contrast_ratio,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    is_light_color,
    mix_hex,
    normalize_hex,
    relative_luminance,
    rgb_to_hex,
    validate_color_token,
)


class TestHexParsing:
    """Hex normalisation and validation."""

    def test_expands_short_form(self) -> None:
        """#RGB expands to lower-case #rrggbb."""
        assert normalize_hex("#FFF") == "#ffffff"
        assert normalize_hex("#a1C") == "#aa11cc"

    def test_hash_is_optional(self) -> None:
        assert normalize_hex("abc") == "#aabbcc"
        assert normalize_hex("  #12AB34 ") == "#12ab34"

    @pytest.mark.parametrize("value", ["#FFFF", "#GGGGGG", "", "#1234567", "red"])
    def test_malformed_raises(self, value: str) -> None:
        with pytest.raises(InvalidHexColorError):
            normalize_hex(value)

    def test_non_string_raises(self) -> None:
        with pytest.raises(InvalidHexColorError):
            normalize_hex(123)  # type: ignore[arg-type]

    def test_error_is_value_error(self) -> None:
        """Callers catching ValueError still see malformed colours."""
        with pytest.raises(ValueError, match="Invalid hex color"):
            hex_to_rgb("#zzz")

    def test_validate_reports_instead_of_raising(self) -> None:
        result = validate_color_token("#GGGGGG")
        assert not result.is_valid
        assert "Invalid hex color" in result.violations[0]

    def test_validate_warns_on_missing_hash(self) -> None:
        result = validate_color_token("FFFFFF")
        assert result.is_valid
        assert result.warnings

    def test_validate_clean_token(self) -> None:
        result = validate_color_token("#FFFFFF")
        assert result.is_valid
        assert not result.violations
        assert not result.warnings


class TestRgbConversion:
    """RGB channel conversion."""

    def test_hex_to_rgb(self) -> None:
        assert hex_to_rgb("#ff8000") == (255, 128, 0)

    def test_rounds_half_up(self) -> None:
        assert rgb_to_hex(127.5, 0, 0) == "#800000"

    def test_clamps_channels(self) -> None:
        assert rgb_to_hex(300, -5, 0) == "#ff0000"


class TestHslConversion:
    """HSL conversion both ways."""

    def test_primaries(self) -> None:
        assert hsl_to_hex(0, 100, 50) == "#ff0000"
        assert hsl_to_hex(120, 100, 50) == "#00ff00"
        assert hsl_to_hex(240, 100, 50) == "#0000ff"

    def test_hue_wraps(self) -> None:
        """Negative and >360 hues wrap."""
        assert hsl_to_hex(-120, 100, 50) == "#0000ff"
        assert hsl_to_hex(480, 100, 50) == "#00ff00"

    def test_clamps_saturation_and_lightness(self) -> None:
        assert hsl_to_hex(0, 150, 50) == "#ff0000"
        assert hsl_to_hex(0, 50, 120) == "#ffffff"
        assert hsl_to_hex(0, 50, -5) == "#000000"

    def test_hex_to_hsl_red(self) -> None:
        hsl = hex_to_hsl("#ff0000")
        assert hsl.h == pytest.approx(0.0)
        assert hsl.s == pytest.approx(100.0)
        assert hsl.l == pytest.approx(50.0)

    def test_achromatic_has_zero_hue_and_saturation(self) -> None:
        hsl = hex_to_hsl("#808080")
        assert hsl.h == 0.0
        assert hsl.s == 0.0
        assert hsl.l == pytest.approx(50.2, abs=0.1)

    def test_hue_stays_below_360(self) -> None:
        assert 0 <= hex_to_hsl("#ff0001").h < 360

    def test_adjust_lightness(self) -> None:
        assert adjust_lightness("#808080", 100) == "#ffffff"
        assert adjust_lightness("#808080", -100) == "#000000"


class TestMixing:
    """Channel-wise blending."""

    def test_midpoint(self) -> None:
        assert mix_hex("#000000", "#ffffff", 0.5) == "#808080"

    def test_endpoints(self) -> None:
        assert mix_hex("#123456", "#abcdef", 0) == "#123456"
        assert mix_hex("#123456", "#abcdef", 1) == "#abcdef"

    def test_weight_is_clamped(self) -> None:
        assert mix_hex("#123456", "#abcdef", 2) == "#abcdef"


class TestContrast:
    """WCAG relative luminance and contrast ratio."""

    def test_luminance_extremes(self) -> None:
        assert relative_luminance("#ffffff") == pytest.approx(1.0)
        assert relative_luminance("#000000") == pytest.approx(0.0)

    def test_black_on_white_max_contrast(self) -> None:
        assert contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0, rel=0.001)

    def test_same_colour_is_one(self) -> None:
        assert contrast_ratio("#3b5bdb", "#3b5bdb") == pytest.approx(1.0)

    def test_symmetric(self) -> None:
        assert contrast_ratio("#777777", "#ffffff") == contrast_ratio("#ffffff", "#777777")

    def test_known_grey(self) -> None:
        """#777 on white sits just under AA."""
        assert contrast_ratio("#777777", "#ffffff") == pytest.approx(4.48, abs=0.01)

    def test_is_light_color(self) -> None:
        assert is_light_color("#ffffff")
        assert not is_light_color("#000000")
        assert not is_light_color("#3b5bdb")
