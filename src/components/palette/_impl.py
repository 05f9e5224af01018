"""
Palette generation: base palette, derived palette tokens, dark-mode inversion.

All functions are pure; randomness flows through C2_SeededRandom so a stored
seed always replays the same palette.
"""

from __future__ import annotations

from src.components.C1_ColorSpace import (
    clamp,
    contrast_ratio,
    hex_to_hsl,
    hsl_to_hex,
    is_light_color,
    mix_hex,
)
from src.components.C2_SeededRandom import random_in_range
from src.domain.entities import (
    BASE_COLOR_KEYS,
    ColorLocks,
    ColorSet,
    FullPalette,
    VibePreset,
)

# --- Constants ---

TEXT_DARK = "#0a0a0a"
TEXT_LIGHT = "#ffffff"
PURE_BLACK = "#000000"
PURE_WHITE = "#ffffff"

TEXT_CONTRAST_FLOOR = 4.0
READABLE_TARGET = 4.5

DARK_BG_SATURATION = 15.0
LIGHT_BG_SATURATION = 8.0


# --- Text selection ---


def pick_text_color(background: str) -> str:
    """
    Choose near-black or white body text for a background.

    The higher-contrast candidate wins; near-black is kept on ties and
    whenever it clears the floor at least as well as white.
    """
    dark_ratio = contrast_ratio(background, TEXT_DARK)
    light_ratio = contrast_ratio(background, TEXT_LIGHT)

    if dark_ratio >= TEXT_CONTRAST_FLOOR and dark_ratio >= light_ratio:
        return TEXT_DARK
    if light_ratio >= TEXT_CONTRAST_FLOOR:
        return TEXT_LIGHT
    return TEXT_DARK if dark_ratio >= light_ratio else TEXT_LIGHT


def ensure_readable_text(background: str, preferred: str) -> str:
    """Keep preferred when it reaches 4.5:1, otherwise fall back to black or white."""
    if contrast_ratio(background, preferred) >= READABLE_TARGET:
        return preferred

    black = contrast_ratio(background, PURE_BLACK)
    white = contrast_ratio(background, PURE_WHITE)

    if black >= READABLE_TARGET and white < READABLE_TARGET:
        return PURE_BLACK
    if white >= READABLE_TARGET and black < READABLE_TARGET:
        return PURE_WHITE
    if black >= READABLE_TARGET and white >= READABLE_TARGET:
        return PURE_BLACK if is_light_color(background) else PURE_WHITE

    return PURE_BLACK if black >= white else PURE_WHITE


# --- Base palette ---


def apply_locks(
    generated: dict[str, str],
    prev_palette: ColorSet | None,
    locks: ColorLocks | None,
) -> dict[str, str]:
    # Locks only mean something relative to a previous palette
    if prev_palette is None or locks is None:
        return generated

    for key in BASE_COLOR_KEYS:
        if locks.is_locked(key):
            generated[key] = getattr(prev_palette, key)
    return generated


def background_for_vibe(vibe: VibePreset) -> str:
    saturation = DARK_BG_SATURATION if vibe.is_dark_ui else LIGHT_BG_SATURATION
    return hsl_to_hex(vibe.primary_hue, saturation, vibe.bg_lightness)


def draw_primary_hsl(vibe: VibePreset, seed: float) -> tuple[float, float, float]:
    """Draw the primary hue/saturation/lightness inside the vibe's ranges."""
    hue_low, hue_high = vibe.hue_range()
    hue = random_in_range(hue_low, hue_high, seed * 0.9) % 360
    saturation = random_in_range(*vibe.primary_sat_range, seed * 1.1)
    lightness = random_in_range(*vibe.primary_light_range, seed * 1.3)
    return hue, saturation, lightness


def generate_base_palette(
    vibe: VibePreset,
    seed: float,
    prev_palette: ColorSet | None = None,
    locks: ColorLocks | None = None,
) -> ColorSet:
    """
    Generate the five base colours for a vibe.

    Args:
        vibe: Vibe preset supplying hue/saturation/lightness ranges
        seed: Any float; identical inputs always give the identical palette
        prev_palette: Palette being regenerated, source for locked keys
        locks: Keys to copy forward from prev_palette

    Returns:
        ColorSet with normalised hex values
    """
    hue, saturation, lightness = draw_primary_hsl(vibe, seed)
    primary = hsl_to_hex(hue, saturation, lightness)

    secondary_hue = vibe.primary_hue + 180 + random_in_range(-20, 20, seed * 1.7)
    secondary = hsl_to_hex(
        secondary_hue,
        clamp(saturation + random_in_range(-10, 10, seed * 1.9), 0, 100),
        clamp(lightness + random_in_range(-10, 10, seed * 2.3), 0, 100),
    )

    accent_hue = vibe.primary_hue + random_in_range(40, 120, seed * 2.9)
    accent = hsl_to_hex(
        accent_hue,
        min(100.0, saturation + 10),
        clamp(lightness + 10, 30, 80),
    )

    background = background_for_vibe(vibe)
    text = pick_text_color(background)

    generated = apply_locks(
        {
            "primary": primary,
            "secondary": secondary,
            "accent": accent,
            "background": background,
            "text": text,
        },
        prev_palette,
        locks,
    )
    return ColorSet(**generated)


# --- Derived palette ---


def _is_dark_background(background: str) -> bool:
    return hex_to_hsl(background).l < 50


def derive_full_palette(colors: ColorSet) -> FullPalette:
    """Expand a base colour set into surface, border and on-colour tokens."""
    if isinstance(colors, FullPalette):
        return colors

    dark = _is_dark_background(colors.background)

    surface_base = mix_hex(colors.background, colors.secondary, 0.06)
    surface_alt_base = mix_hex(colors.background, colors.accent, 0.12)
    if dark:
        surface = mix_hex(surface_base, PURE_WHITE, 0.06)
        surface_alt = mix_hex(surface_alt_base, PURE_WHITE, 0.12)
    else:
        surface = mix_hex(surface_base, PURE_WHITE, 0.5)
        surface_alt = mix_hex(surface_alt_base, PURE_WHITE, 0.3)

    return FullPalette(
        **colors.base().model_dump(),
        on_primary=ensure_readable_text(colors.primary, colors.text),
        on_secondary=ensure_readable_text(colors.secondary, colors.text),
        on_accent=ensure_readable_text(colors.accent, colors.text),
        surface=surface,
        surface_alt=surface_alt,
        text_muted=mix_hex(colors.text, colors.background, 0.4),
        border_subtle=mix_hex(surface, colors.text, 0.12),
        border_strong=mix_hex(colors.primary, colors.text, 0.35),
    )


# --- Dark mode ---


def _invert(hex_color: str, is_text: bool = False) -> str:
    hsl = hex_to_hsl(hex_color)
    floor = 80.0 if is_text else 5.0
    return hsl_to_hex(hsl.h, max(0.0, hsl.s - 5), max(floor, 100 - hsl.l))


def invert_for_dark_mode(colors: ColorSet) -> ColorSet:
    """Flip a light palette to a dark one; text stays light (l >= 80)."""
    return ColorSet(
        primary=_invert(colors.primary),
        secondary=_invert(colors.secondary),
        accent=_invert(colors.accent),
        background=_invert(colors.background),
        text=_invert(colors.text, is_text=True),
    )
