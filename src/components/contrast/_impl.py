"""
Contrast reporting and repair.

Reports WCAG ratios over the semantic colour pairs of a palette and repairs
failing foregrounds by searching HSL lightness with hue and saturation held.

Key behaviors:
- Compliant pairs are never touched, so repair is idempotent
- A repaired ratio is never lower than the unrepaired one
- Unreachable targets degrade to the best value inside the search window
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from src.components.C1_ColorSpace import (
    clamp,
    contrast_ratio,
    hex_to_hsl,
    hsl_to_hex,
    is_light_color,
    relative_luminance,
)
from src.components.palette import derive_full_palette
from src.domain.entities import ColorSet, ContrastTarget, FullPalette

from .models import ContrastCheck, ContrastPair, ContrastViolations, Severity

logger = logging.getLogger(__name__)

# WCAG 2.1 normal text thresholds
AA_RATIO = 4.5
AAA_RATIO = 7.0

TARGET_RATIOS: dict[str, float] = {"aa": AA_RATIO, "aaa": AAA_RATIO}


@dataclass(frozen=True)
class ContrastConfig:
    """Tuning values for the lightness search."""

    muted_saturation_threshold: float = 20.0
    muted_window_light_bg: tuple[float, float] = (40.0, 70.0)
    muted_window_dark_bg: tuple[float, float] = (30.0, 60.0)
    search_iterations: int = 20


DEFAULT_CONFIG = ContrastConfig()


SEMANTIC_PAIRS: tuple[ContrastPair, ...] = (
    ContrastPair("Body text on background", "text", "background"),
    ContrastPair("Body text on surface", "text", "surface"),
    ContrastPair("Muted text on background", "text_muted", "background"),
    ContrastPair("Text on primary color", "on_primary", "primary"),
    ContrastPair("Text on secondary color", "on_secondary", "secondary"),
    ContrastPair("Text on accent color", "on_accent", "accent"),
)

# (foreground field, background field), repaired in this order
BASE_REPAIR_ROLES: tuple[tuple[str, str], ...] = (("text", "background"),)
FULL_REPAIR_ROLES: tuple[tuple[str, str], ...] = BASE_REPAIR_ROLES + (
    ("text_muted", "background"),
    ("on_primary", "primary"),
    ("on_secondary", "secondary"),
    ("on_accent", "accent"),
)


# ═══════════════════════════════════════════════════════════════════════════
# REPORTING
# ═══════════════════════════════════════════════════════════════════════════


def is_aa_compliant(ratio: float) -> bool:
    return ratio >= AA_RATIO


def is_aaa_compliant(ratio: float) -> bool:
    return ratio >= AAA_RATIO


def get_contrast_severity(ratio: float) -> Severity:
    """pass = AAA, warn = AA only, fail = neither."""
    if is_aaa_compliant(ratio):
        return "pass"
    if is_aa_compliant(ratio):
        return "warn"
    return "fail"


def check_pair(foreground: str, background: str, label: str) -> ContrastCheck:
    ratio = contrast_ratio(foreground, background)
    return ContrastCheck(
        foreground=foreground,
        background=background,
        ratio=ratio,
        aa_compliant=is_aa_compliant(ratio),
        aaa_compliant=is_aaa_compliant(ratio),
        label=label,
        severity=get_contrast_severity(ratio),
    )


def check_palette_contrast(
    palette: ColorSet,
    extra_pairs: Iterable[ContrastPair] = (),
) -> list[ContrastCheck]:
    """
    Measure every semantic pair of a palette.

    A bare ColorSet is expanded with derive_full_palette first.

    Raises:
        AttributeError: If an extra pair names a field the palette lacks
    """
    full = derive_full_palette(palette)
    pairs = list(SEMANTIC_PAIRS) + list(extra_pairs)
    return [
        check_pair(
            getattr(full, pair.foreground_field),
            getattr(full, pair.background_field),
            pair.label,
        )
        for pair in pairs
    ]


def count_violations(checks: Iterable[ContrastCheck]) -> ContrastViolations:
    aa = 0
    aaa = 0
    for check in checks:
        if not check.aa_compliant:
            aa += 1
        if not check.aaa_compliant:
            aaa += 1
    return ContrastViolations(aa=aa, aaa=aaa)


# ═══════════════════════════════════════════════════════════════════════════
# REPAIR
# Lightness search with hue/saturation fixed. The predicate is evaluated on
# the quantised hex, so an accepted lightness never loses the target to
# rounding.
# ═══════════════════════════════════════════════════════════════════════════


def _search_window(
    saturation: float, light_bg: bool, config: ContrastConfig
) -> tuple[float, float]:
    if saturation < config.muted_saturation_threshold:
        return config.muted_window_light_bg if light_bg else config.muted_window_dark_bg
    return (0.0, 100.0)


def repair_foreground(
    foreground: str,
    background: str,
    target_ratio: float,
    config: ContrastConfig = DEFAULT_CONFIG,
) -> str:
    """
    Return the foreground nearest in lightness that reaches target_ratio.

    A light background is searched toward darker text first and a dark one
    toward lighter text; when that side of the window cannot reach the
    target the opposite side is searched. If neither side can, the window
    extreme with the higher ratio is used when it improves on the original,
    otherwise the original is kept.
    """
    original_ratio = contrast_ratio(foreground, background)
    if original_ratio >= target_ratio:
        return foreground

    hsl = hex_to_hsl(foreground)
    light_bg = is_light_color(background)
    bg_luminance = relative_luminance(background)
    low, high = _search_window(hsl.s, light_bg, config)
    start = clamp(hsl.l, low, high)

    def candidate(lightness: float) -> str:
        return hsl_to_hex(hsl.h, hsl.s, lightness)

    def meets(lightness: float, darker: bool) -> bool:
        color = candidate(lightness)
        luminance = relative_luminance(color)
        on_side = luminance < bg_luminance if darker else luminance > bg_luminance
        return on_side and contrast_ratio(color, background) >= target_ratio

    def search(darker: bool) -> str | None:
        # Darker: passing lightnesses are [low, L*]; lighter: [L*, high]
        extreme = low if darker else high
        if not meets(extreme, darker):
            return None
        if meets(start, darker):
            return candidate(start)
        passing, failing = extreme, start
        for _ in range(config.search_iterations):
            mid = (passing + failing) / 2
            if meets(mid, darker):
                passing = mid
            else:
                failing = mid
        return candidate(passing)

    for darker in (light_bg, not light_bg):
        repaired = search(darker)
        if repaired is not None:
            return repaired

    logger.debug(
        "Contrast target %.1f unreachable for %s on %s", target_ratio, foreground, background
    )
    fallback = max(candidate(low), candidate(high), key=lambda c: contrast_ratio(c, background))
    if contrast_ratio(fallback, background) > original_ratio:
        return fallback
    return foreground


def fix_contrast_to_target(
    colors: ColorSet,
    target: ContrastTarget,
    config: ContrastConfig | None = None,
) -> ColorSet:
    """
    Repair every failing foreground role of a palette.

    Returns the same type it was given: a FullPalette also has its muted
    text and on-colour roles repaired, a bare ColorSet only its text.

    Raises:
        ValueError: If target is not "aa" or "aaa"
    """
    if target not in TARGET_RATIOS:
        raise ValueError(f"Unknown contrast target: {target!r}")

    cfg = config or DEFAULT_CONFIG
    target_ratio = TARGET_RATIOS[target]
    roles = FULL_REPAIR_ROLES if isinstance(colors, FullPalette) else BASE_REPAIR_ROLES

    updates: dict[str, str] = {}
    for fg_field, bg_field in roles:
        foreground = getattr(colors, fg_field)
        repaired = repair_foreground(foreground, getattr(colors, bg_field), target_ratio, cfg)
        if repaired != foreground:
            updates[fg_field] = repaired

    if not updates:
        return colors
    return colors.model_copy(update=updates)
