"""
C1-ColorSpace Functional Core: Pure colour-space functions.

No I/O operations - all functions are pure and deterministic.
Hex <-> RGB <-> HSL conversion, WCAG relative luminance and contrast ratio,
plus the small blending helpers the generators build on.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import NamedTuple


class InvalidHexColorError(ValueError):
    """
    Raised when a colour string cannot be parsed as hex.

    Malformed hex indicates an upstream data bug, so the utilities fail fast
    instead of guessing.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid hex color: {value!r}. Expected #RGB or #RRGGBB")


@dataclass
class ValidationResult:
    """Result of a colour token validation check."""

    is_valid: bool
    violations: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


class HSL(NamedTuple):
    """Hue in [0, 360), saturation and lightness in [0, 100]."""

    h: float
    s: float
    l: float  # noqa: E741


# ═══════════════════════════════════════════════════════════════════════════
# HEX PARSING
# Accepts #RGB, #RRGGBB, with or without the leading hash
# ═══════════════════════════════════════════════════════════════════════════

HEX_COLOR_PATTERN = re.compile(r"^#?([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$")


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return min(high, max(low, value))


def normalize_hex(value: str) -> str:
    """
    Normalize a hex colour to lower-case #rrggbb.

    Args:
        value: Colour in #RGB / #RRGGBB form, hash optional

    Returns:
        Canonical 7-character hex string

    Raises:
        InvalidHexColorError: If the value is not a hex colour
    """
    if not isinstance(value, str):
        raise InvalidHexColorError(value)

    match = HEX_COLOR_PATTERN.match(value.strip())
    if match is None:
        raise InvalidHexColorError(value)

    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)

    return "#" + digits.lower()


def validate_color_token(value: str) -> ValidationResult:
    """
    Validate a hex colour token without raising.

    Used at the outer surfaces (API, CLI) where a report is more useful
    than an exception.
    """
    try:
        normalize_hex(value)
    except InvalidHexColorError as e:
        return ValidationResult(is_valid=False, violations=[str(e)])

    warnings = []
    if not value.strip().startswith("#"):
        warnings.append(f"Color {value} has no leading '#'")

    return ValidationResult(is_valid=True, warnings=warnings)


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Convert hex color to RGB tuple."""
    digits = normalize_hex(hex_color)[1:]

    return (
        int(digits[0:2], 16),
        int(digits[2:4], 16),
        int(digits[4:6], 16),
    )


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert 0-255 channels to #rrggbb, rounding half up and clamping."""
    channels = (int(clamp(_round_half_up(c), 0, 255)) for c in (r, g, b))
    return "#" + "".join(f"{c:02x}" for c in channels)


# ═══════════════════════════════════════════════════════════════════════════
# HSL
# ═══════════════════════════════════════════════════════════════════════════


def hex_to_hsl(hex_color: str) -> HSL:
    """
    Convert hex to HSL.

    Returns unrounded floats: h in [0, 360), s and l in [0, 100].
    Achromatic colours report hue 0.
    """
    r, g, b = (c / 255 for c in hex_to_rgb(hex_color))
    high = max(r, g, b)
    low = min(r, g, b)
    delta = high - low

    lightness = (high + low) / 2

    if delta == 0:
        return HSL(0.0, 0.0, lightness * 100)

    saturation = delta / (1 - abs(2 * lightness - 1))

    if high == r:
        hue = 60 * (((g - b) / delta) % 6)
    elif high == g:
        hue = 60 * (((b - r) / delta) + 2)
    else:
        hue = 60 * (((r - g) / delta) + 4)

    return HSL(hue % 360, clamp(saturation * 100, 0, 100), lightness * 100)


def hsl_to_hex(h: float, s: float, l: float) -> str:  # noqa: E741
    """
    Convert HSL to hex.

    Hue wraps modulo 360 (negative hues included); saturation and lightness
    are clamped to [0, 100].
    """
    hue = h % 360
    sat = clamp(s, 0, 100) / 100
    light = clamp(l, 0, 100) / 100

    chroma = (1 - abs(2 * light - 1)) * sat
    x = chroma * (1 - abs((hue / 60) % 2 - 1))
    m = light - chroma / 2

    if hue < 60:
        r, g, b = chroma, x, 0.0
    elif hue < 120:
        r, g, b = x, chroma, 0.0
    elif hue < 180:
        r, g, b = 0.0, chroma, x
    elif hue < 240:
        r, g, b = 0.0, x, chroma
    elif hue < 300:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return rgb_to_hex((r + m) * 255, (g + m) * 255, (b + m) * 255)


def adjust_lightness(hex_color: str, delta: float) -> str:
    """Shift HSL lightness by delta, holding hue and saturation."""
    hsl = hex_to_hsl(hex_color)
    return hsl_to_hex(hsl.h, hsl.s, clamp(hsl.l + delta, 0, 100))


def mix_hex(color_a: str, color_b: str, weight: float) -> str:
    """
    Blend two colours channel by channel.

    weight 0 returns color_a, weight 1 returns color_b.
    """
    w = clamp(weight, 0, 1)
    a = hex_to_rgb(color_a)
    b = hex_to_rgb(color_b)
    return rgb_to_hex(*(a[i] * (1 - w) + b[i] * w for i in range(3)))


# ═══════════════════════════════════════════════════════════════════════════
# WCAG
# WCAG 2.1 AA: 4.5:1 for normal text, AAA: 7:1
# ═══════════════════════════════════════════════════════════════════════════


def _linearize(channel: int) -> float:
    c_srgb = channel / 255
    if c_srgb <= 0.04045:
        return c_srgb / 12.92
    return float(((c_srgb + 0.055) / 1.055) ** 2.4)


def relative_luminance(hex_color: str) -> float:
    """
    Calculate relative luminance per WCAG 2.1.

    Formula: L = 0.2126 * R + 0.7152 * G + 0.0722 * B
    Where R, G, B are sRGB values normalized and linearized.
    """
    r, g, b = hex_to_rgb(hex_color)
    return 0.2126 * _linearize(r) + 0.7152 * _linearize(g) + 0.0722 * _linearize(b)


def contrast_ratio(color_a: str, color_b: str) -> float:
    """
    Calculate WCAG contrast ratio between two colors.

    Symmetric in its arguments.

    Returns:
        Contrast ratio (1.0 to 21.0)
    """
    l1 = relative_luminance(color_a)
    l2 = relative_luminance(color_b)

    lighter = max(l1, l2)
    darker = min(l1, l2)

    return (lighter + 0.05) / (darker + 0.05)


def is_light_color(hex_color: str) -> bool:
    """True when relative luminance is above 0.5."""
    return relative_luminance(hex_color) > 0.5
