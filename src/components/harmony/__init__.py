"""
Harmony component - Colour-wheel palettes for the alternate creative mode.
"""

from ._impl import (
    DEFAULT_OPTIONS,
    HarmonyOptions,
    HarmonyPalette,
    generate_harmony,
    generate_harmony_palette,
    random_harmony_type,
)

__all__ = [
    "DEFAULT_OPTIONS",
    "HarmonyOptions",
    "HarmonyPalette",
    "generate_harmony",
    "generate_harmony_palette",
    "random_harmony_type",
]
