"""
Harmony palette generation.

Colour-wheel relationships (analogous, triadic, ...) used by the alternate
creative mode. Every output colour gets a small seeded saturation/lightness
variation so harmonies don't look mechanical.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from src.components.C1_ColorSpace import clamp, hsl_to_hex
from src.components.C2_SeededRandom import jitter
from src.components.palette import (
    apply_locks,
    background_for_vibe,
    draw_primary_hsl,
    pick_text_color,
)
from src.domain.entities import (
    HARMONY_TYPES,
    ColorLocks,
    ColorSet,
    HarmonyType,
    VibePreset,
)

SAT_BOUNDS = (15.0, 95.0)
LIGHT_BOUNDS = (8.0, 92.0)


@dataclass(frozen=True)
class HarmonyOptions:
    """Jitter spans applied to every harmony colour."""

    saturation_variation: float = 10.0
    lightness_variation: float = 8.0


DEFAULT_OPTIONS = HarmonyOptions()


@dataclass(frozen=True)
class HarmonyPalette:
    primary: str
    secondary: str
    accent: str


# --- Hue offsets ---
# (secondary offset, secondary jitter, accent offset, accent jitter)
_HUE_OFFSETS: dict[str, tuple[float, float, float, float]] = {
    "analogous": (20.0, 5.0, -25.0, 5.0),
    "split-complementary": (150.0, 6.0, -150.0, 6.0),
    "triadic": (120.0, 0.0, 240.0, 0.0),
    "tetradic": (90.0, 0.0, 180.0, 0.0),
    "complementary": (180.0, 0.0, 30.0, 10.0),
}


def _vary(
    hue: float,
    saturation: float,
    lightness: float,
    seed: float,
    offset: float,
    options: HarmonyOptions,
) -> str:
    s = clamp(saturation + jitter(options.saturation_variation, seed, offset), *SAT_BOUNDS)
    l = clamp(  # noqa: E741
        lightness + jitter(options.lightness_variation, seed, offset + 0.05), *LIGHT_BOUNDS
    )
    return hsl_to_hex(hue % 360, s, l)


def generate_harmony(
    hue: float,
    saturation: float,
    lightness: float,
    harmony_type: HarmonyType,
    seed: float,
    options: HarmonyOptions | None = None,
) -> HarmonyPalette:
    """
    Build primary/secondary/accent from a colour-wheel relationship.

    Raises:
        ValueError: If harmony_type is not a known harmony
    """
    if harmony_type not in _HUE_OFFSETS:
        raise ValueError(f"Unknown harmony type: {harmony_type!r}")

    opts = options or DEFAULT_OPTIONS
    sec_offset, sec_jitter, acc_offset, acc_jitter = _HUE_OFFSETS[harmony_type]

    secondary_hue = hue + sec_offset + jitter(sec_jitter, seed, 0.71)
    accent_hue = hue + acc_offset + jitter(acc_jitter, seed, 0.83)

    return HarmonyPalette(
        primary=_vary(hue, saturation, lightness, seed, 0.11, opts),
        secondary=_vary(secondary_hue, saturation, lightness, seed, 0.29, opts),
        accent=_vary(accent_hue, saturation, lightness, seed, 0.47, opts),
    )


def random_harmony_type(seed: float) -> HarmonyType:
    """Pick a harmony type deterministically from a seed."""
    # fmod keeps the sign of negative seeds
    mixed = math.fmod(seed * 9301 + 49297, 233280)
    frac = abs(math.sin(mixed) * 0.5 + math.sin(seed * 1.3) * 0.5)
    index = int(math.floor(frac * len(HARMONY_TYPES))) % len(HARMONY_TYPES)
    return HARMONY_TYPES[index]


def generate_harmony_palette(
    vibe: VibePreset,
    seed: float,
    prev_palette: ColorSet | None = None,
    locks: ColorLocks | None = None,
    harmony_type: HarmonyType | None = None,
    options: HarmonyOptions | None = None,
) -> ColorSet:
    """Harmony-mode counterpart of generate_base_palette."""
    hue, saturation, lightness = draw_primary_hsl(vibe, seed)
    chosen = harmony_type or random_harmony_type(seed)
    harmony = generate_harmony(hue, saturation, lightness, chosen, seed, options)

    background = background_for_vibe(vibe)
    values = {
        "primary": harmony.primary,
        "secondary": harmony.secondary,
        "accent": harmony.accent,
        "background": background,
        "text": pick_text_color(background),
    }

    return ColorSet(**apply_locks(values, prev_palette, locks))
