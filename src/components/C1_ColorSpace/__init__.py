"""
C1-ColorSpace: Colour-space foundations component.

Hex/RGB/HSL conversion, WCAG relative luminance and contrast ratio.
Every other component builds on these functions.
"""

from src.components.C1_ColorSpace.fc import (
    HEX_COLOR_PATTERN,
    HSL,
    InvalidHexColorError,
    ValidationResult,
    adjust_lightness,
    clamp,
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

__all__ = [
    "HSL",
    "HEX_COLOR_PATTERN",
    "InvalidHexColorError",
    "ValidationResult",
    "adjust_lightness",
    "clamp",
    "contrast_ratio",
    "hex_to_hsl",
    "hex_to_rgb",
    "hsl_to_hex",
    "is_light_color",
    "mix_hex",
    "normalize_hex",
    "relative_luminance",
    "rgb_to_hex",
    "validate_color_token",
]
