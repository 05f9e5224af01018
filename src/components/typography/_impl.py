"""
Typography hierarchy optimizer.

Repairs the ordering invariants between heading, subheading, body and accent
text styles, layers vibe-specific rules on top, then adds seeded weight
jitter and re-validates so jitter can never break the hierarchy.

Invariants on every output:
- index(heading.size) - index(body.size) >= 2
- subheading.size is exactly one step below heading.size
- heading.weight - body.weight >= 200
- accent.weight <= heading.weight
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from src.components.C1_ColorSpace import hex_to_hsl, hsl_to_hex
from src.components.C2_SeededRandom import jitter, roll
from src.domain.entities import (
    SIZE_ORDER,
    ColorSet,
    SizeToken,
    TextStyle,
    TypographyColors,
    TypographyTokens,
    TypographyTrendHints,
    VibePreset,
    size_index,
)

MIN_WEIGHT = 100
MAX_WEIGHT = 900
MIN_SIZE_GAP = 2
MIN_WEIGHT_GAP = 200
SUBHEADING_WEIGHT_GAP = 100
BODY_WEIGHT_FLOOR = 300
ACCENT_WEIGHT_CEILING = 700

LOW_CONTRAST_LIGHTNESS_DIFF = 40
LOW_SATURATION = 40
TREND_BIAS_PROBABILITY = 0.25

_LARGEST = len(SIZE_ORDER) - 1


@dataclass(frozen=True)
class TypographyRule:
    """Per-vibe overrides applied on top of the hierarchy repair."""

    min_heading_weight: int | None = None
    max_heading_weight: int | None = None
    max_body_weight: int | None = None
    min_heading_size: SizeToken | None = None
    heading_italic_chance: float = 0.0
    subheading_italic_chance: float = 0.0


NO_RULE = TypographyRule()

DEFAULT_TYPOGRAPHY_RULES: dict[str, TypographyRule] = {
    "brutalist": TypographyRule(min_heading_weight=700, min_heading_size="xl"),
    "magazine-brutalism": TypographyRule(min_heading_weight=700, min_heading_size="xl"),
    "luxury": TypographyRule(heading_italic_chance=0.5, subheading_italic_chance=0.4),
    "minimal": TypographyRule(max_heading_weight=600, max_body_weight=500),
}


# --- Working state ---


@dataclass
class _Slot:
    size: int
    weight: int
    style: str
    transform: str

    @classmethod
    def from_style(cls, style: TextStyle) -> _Slot:
        return cls(size_index(style.size), style.weight, style.style, style.transform)

    def to_style(self) -> TextStyle:
        return TextStyle(
            size=SIZE_ORDER[self.size],
            weight=self.weight,
            style=self.style,  # type: ignore[arg-type]
            transform=self.transform,  # type: ignore[arg-type]
        )


@dataclass
class _Working:
    heading: _Slot
    subheading: _Slot
    body: _Slot
    accent: _Slot


def _clamp_weight(weight: float) -> int:
    return int(min(MAX_WEIGHT, max(MIN_WEIGHT, weight)))


def _heading_cap(rule: TypographyRule) -> int:
    cap = MAX_WEIGHT if rule.max_heading_weight is None else rule.max_heading_weight
    # Leave room for a body weight at the floor
    return max(cap, MIN_WEIGHT + MIN_WEIGHT_GAP)


def _start(current: TypographyTokens) -> _Working:
    heading = _Slot.from_style(current.heading)
    if current.subheading is not None:
        subheading = _Slot.from_style(current.subheading)
    else:
        subheading = _Slot(
            max(0, heading.size - 1),
            heading.weight - SUBHEADING_WEIGHT_GAP,
            current.heading.style,
            current.heading.transform,
        )
    return _Working(
        heading=heading,
        subheading=subheading,
        body=_Slot.from_style(current.body),
        accent=_Slot.from_style(current.accent),
    )


# ═══════════════════════════════════════════════════════════════════════════
# HIERARCHY REPAIR
# ═══════════════════════════════════════════════════════════════════════════


def _repair_sizes(w: _Working) -> None:
    if w.heading.size - w.body.size < MIN_SIZE_GAP:
        w.heading.size = min(w.body.size + MIN_SIZE_GAP, _LARGEST)
        if w.heading.size - w.body.size < MIN_SIZE_GAP:
            w.body.size = w.heading.size - MIN_SIZE_GAP


def _lock_subheading_size(w: _Working) -> None:
    w.subheading.size = w.heading.size - 1


def _repair_weights(w: _Working, rule: TypographyRule, body_floor: int) -> None:
    cap = _heading_cap(rule)
    w.heading.weight = min(w.heading.weight, cap)
    if w.heading.weight - w.body.weight >= MIN_WEIGHT_GAP:
        return

    w.heading.weight = min(w.body.weight + MIN_WEIGHT_GAP, cap)
    if w.heading.weight - w.body.weight < MIN_WEIGHT_GAP:
        w.body.weight = max(body_floor, w.heading.weight - MIN_WEIGHT_GAP)
    if w.heading.weight - w.body.weight < MIN_WEIGHT_GAP:
        w.body.weight = w.heading.weight - MIN_WEIGHT_GAP


def _set_subheading_weight(w: _Working) -> None:
    midpoint = (w.body.weight + w.heading.weight) // 2
    target = max(midpoint, w.body.weight + SUBHEADING_WEIGHT_GAP)
    w.subheading.weight = min(target, w.heading.weight - SUBHEADING_WEIGHT_GAP)


def _cap_subheading_weight(w: _Working) -> None:
    w.subheading.weight = min(w.subheading.weight, w.heading.weight - SUBHEADING_WEIGHT_GAP)


def _cap_accent_weight(w: _Working) -> None:
    if w.accent.weight > w.heading.weight:
        w.accent.weight = min(w.heading.weight, ACCENT_WEIGHT_CEILING)


def _revalidate(w: _Working, rule: TypographyRule, body_floor: int = BODY_WEIGHT_FLOOR) -> None:
    _repair_sizes(w)
    _lock_subheading_size(w)
    _repair_weights(w, rule, body_floor)
    _cap_subheading_weight(w)
    _cap_accent_weight(w)


# ═══════════════════════════════════════════════════════════════════════════
# ADJUSTMENTS
# ═══════════════════════════════════════════════════════════════════════════


def _contrast_bump(w: _Working, colors: ColorSet) -> None:
    diff = abs(hex_to_hsl(colors.text).l - hex_to_hsl(colors.background).l)
    if diff >= LOW_CONTRAST_LIGHTNESS_DIFF:
        return
    if w.body.size < size_index("md"):
        w.body.size = size_index("md")
    if w.body.weight < 500:
        w.body.weight = min(w.body.weight + 100, 600)


def _apply_vibe_limits(w: _Working, rule: TypographyRule) -> None:
    if rule.min_heading_weight is not None:
        w.heading.weight = max(w.heading.weight, rule.min_heading_weight)
    if rule.max_heading_weight is not None:
        w.heading.weight = min(w.heading.weight, _heading_cap(rule))
    if rule.max_body_weight is not None:
        w.body.weight = min(w.body.weight, rule.max_body_weight)
    if rule.min_heading_size is not None:
        w.heading.size = max(w.heading.size, size_index(rule.min_heading_size))


def _apply_vibe_style(w: _Working, rule: TypographyRule, seed: float) -> None:
    if roll(rule.heading_italic_chance, seed, 0.17):
        w.heading.style = "italic"
    if roll(rule.subheading_italic_chance, seed, 0.19):
        w.subheading.style = "italic"


def _apply_trend_bias(w: _Working, hints: TypographyTrendHints | None, seed: float) -> None:
    if hints is None or not hints.trends:
        return
    if not roll(TREND_BIAS_PROBABILITY, seed, 0.53):
        return
    pairs = hints.trends[0].recommended_weight_pairs
    if pairs:
        w.body.weight = _clamp_weight(pairs[0].body)
        w.heading.weight = _clamp_weight(pairs[0].heading)


def _compensate_saturation(w: _Working, colors: ColorSet, rule: TypographyRule) -> None:
    average = (hex_to_hsl(colors.primary).s + hex_to_hsl(colors.secondary).s) / 2
    if average < LOW_SATURATION:
        w.heading.weight = min(w.heading.weight + 100, _heading_cap(rule))


def _jitter_weight(weight: int, seed: float, offset: float) -> int:
    span = math.floor(weight * 0.1)
    return _clamp_weight(math.floor(weight + jitter(span, seed, offset) + 0.5))


def _apply_jitter(w: _Working, seed: float) -> None:
    w.heading.weight = _jitter_weight(w.heading.weight, seed, 0.61)
    w.subheading.weight = _jitter_weight(w.subheading.weight, seed, 0.67)
    w.body.weight = _jitter_weight(w.body.weight, seed, 0.73)
    w.accent.weight = _jitter_weight(w.accent.weight, seed, 0.79)


def _finalize(w: _Working, rule: TypographyRule) -> None:
    _apply_vibe_limits(w, rule)
    _revalidate(w, rule, body_floor=MIN_WEIGHT)
    w.accent.weight = min(w.accent.weight, w.heading.weight)
    w.subheading.weight = _clamp_weight(w.subheading.weight)


# ═══════════════════════════════════════════════════════════════════════════
# ENTRY POINTS
# ═══════════════════════════════════════════════════════════════════════════


def optimize_typography(
    current: TypographyTokens,
    vibe: VibePreset,
    colors: ColorSet,
    trend_hints: TypographyTrendHints | None = None,
    *,
    seed: float = 0.0,
    rules: dict[str, TypographyRule] | None = None,
) -> TypographyTokens:
    """
    Repair and stylise typography tokens for a vibe and palette.

    Args:
        current: Starting tokens; subheading may be omitted
        vibe: Vibe whose rule (if any) is layered on top
        colors: Palette used for the contrast and saturation adjustments
        trend_hints: Optional trend data supplying weight pairs
        seed: Style seed driving the italic, trend and jitter rolls
        rules: Vibe id -> TypographyRule table; defaults to the built-in one

    Returns:
        TypographyTokens satisfying the hierarchy invariants, subheading filled
    """
    table = DEFAULT_TYPOGRAPHY_RULES if rules is None else rules
    rule = table.get(vibe.id, NO_RULE)
    w = _start(current)

    _repair_sizes(w)
    _revalidate(w, rule)

    _lock_subheading_size(w)
    _revalidate(w, rule)

    _repair_weights(w, rule, BODY_WEIGHT_FLOOR)
    _revalidate(w, rule)

    _set_subheading_weight(w)
    _revalidate(w, rule)

    _cap_accent_weight(w)
    _revalidate(w, rule)

    _contrast_bump(w, colors)
    _revalidate(w, rule)

    _apply_vibe_limits(w, rule)
    _apply_vibe_style(w, rule, seed)
    _revalidate(w, rule)

    _apply_trend_bias(w, trend_hints, seed)
    _revalidate(w, rule)

    _compensate_saturation(w, colors, rule)
    _revalidate(w, rule)

    _apply_jitter(w, seed)
    _finalize(w, rule)

    return TypographyTokens(
        heading=w.heading.to_style(),
        subheading=w.subheading.to_style(),
        body=w.body.to_style(),
        accent=w.accent.to_style(),
    )


def optimize_typography_colors(colors: ColorSet) -> TypographyColors:
    """
    Text colours per slot: lighter subheading, punchier accent.

    Dark backgrounds (lightness < 50) lift the accent instead of darkening it.
    """
    text = hex_to_hsl(colors.text)
    accent = hex_to_hsl(colors.accent)

    if hex_to_hsl(colors.background).l < 50:
        subheading = hsl_to_hex(text.h, max(text.s - 10, 10), min(text.l + 15, 90))
        accent_color = hsl_to_hex(accent.h, min(accent.s + 12, 100), min(accent.l + 12, 90))
    else:
        subheading = hsl_to_hex(text.h, max(text.s - 15, 15), min(text.l + 18, 85))
        accent_color = hsl_to_hex(accent.h, min(accent.s + 10, 100), max(accent.l - 8, 25))

    return TypographyColors(
        heading=colors.text,
        subheading=subheading,
        body=colors.text,
        accent=accent_color,
    )
