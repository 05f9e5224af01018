"""
Component shapes and style typography.

Per-vibe candidate lists are sampled with the seeded generator; each draw
has its own offset so radius, shadow and border vary independently.
Vibes without a configured rule fall back to the generic rule.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from src.components.C2_SeededRandom import pick_option, seeded_random
from src.domain.entities import (
    SIZE_ORDER,
    BorderToken,
    ComponentShape,
    ComponentShapes,
    FontStyle,
    RadiusToken,
    ShadowToken,
    SizeToken,
    TextStyle,
    TextTransform,
    TypographyTokens,
    VibePreset,
    size_index,
)

# ═══════════════════════════════════════════════════════════════════════════
# RULES
# ═══════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class ComponentRule:
    radius_options: tuple[RadiusToken, ...] = ()
    shadow_options: tuple[ShadowToken, ...] = ()
    border_options: tuple[BorderToken, ...] = ()


@dataclass(frozen=True)
class ShapeRule:
    """Candidate lists for each component class of one vibe."""

    button_primary: ComponentRule = field(default_factory=ComponentRule)
    button_secondary: ComponentRule = field(default_factory=ComponentRule)
    card: ComponentRule = field(default_factory=ComponentRule)


@dataclass(frozen=True)
class StyleTypographyRule:
    """Candidate sizes/weights and style chances for one vibe."""

    heading_sizes: tuple[SizeToken, ...] = ()
    subheading_sizes: tuple[SizeToken, ...] = ()
    body_sizes: tuple[SizeToken, ...] = ()
    accent_sizes: tuple[SizeToken, ...] = ()
    heading_weights: tuple[int, ...] = ()
    subheading_weights: tuple[int, ...] = ()
    body_weights: tuple[int, ...] = ()
    accent_weights: tuple[int, ...] = ()
    heading_italic_chance: float = 0.0
    subheading_italic_chance: float = 0.0
    body_italic_chance: float = 0.0
    accent_italic_chance: float = 0.0
    heading_uppercase_chance: float = 0.0
    subheading_uppercase_chance: float = 0.0
    body_uppercase_chance: float = 0.0
    accent_uppercase_chance: float = 0.0


DEFAULT_BASE_SHAPES = ComponentShapes(
    button_primary=ComponentShape(radius="md", shadow="sm", border="none"),
    button_secondary=ComponentShape(radius="md", shadow="none", border="subtle"),
    card=ComponentShape(radius="lg", shadow="sm", border="subtle"),
)

DEFAULT_SHAPE_RULE = ShapeRule(
    button_primary=ComponentRule(("md", "lg", "xl", "full"), ("none", "sm"), ("none", "subtle")),
    button_secondary=ComponentRule(("md", "lg", "xl"), ("none",), ("subtle", "strong")),
    card=ComponentRule(("lg", "xl"), ("none", "sm"), ("subtle",)),
)

DEFAULT_BASE_TYPOGRAPHY = TypographyTokens(
    heading=TextStyle(size="lg", weight=600),
    body=TextStyle(size="md", weight=400),
    accent=TextStyle(size="sm", weight=500),
)

DEFAULT_STYLE_TYPOGRAPHY_RULE = StyleTypographyRule(
    heading_sizes=("lg", "xl", "2xl"),
    subheading_sizes=("md", "lg", "xl"),
    body_sizes=("sm", "md"),
    accent_sizes=("xs", "sm"),
    heading_weights=(500, 600, 700),
    subheading_weights=(500, 600),
    body_weights=(400, 500),
    accent_weights=(400, 500, 600),
    heading_italic_chance=0.12,
    subheading_italic_chance=0.1,
    body_italic_chance=0.05,
    accent_italic_chance=0.3,
)

# Base draw offsets per component; shadow and border add fixed steps
_COMPONENT_OFFSETS = {"button_primary": 0.11, "button_secondary": 0.23, "card": 0.37}
_SHADOW_STEP = 0.13
_BORDER_STEP = 0.31

# (size, weight, style, transform) draw offsets per slot
_SLOT_OFFSETS = {
    "heading": (0.11, 0.21, 0.31, 0.35),
    "subheading": (0.33, 0.37, 0.39, 0.43),
    "body": (0.41, 0.51, 0.61, 0.63),
    "accent": (0.71, 0.81, 0.91, 0.95),
}

# A base that already carries a style keeps it at least this often
_STICKY_CHANCE = 0.65


# ═══════════════════════════════════════════════════════════════════════════
# SHAPES
# ═══════════════════════════════════════════════════════════════════════════


def _build_shape(
    base: ComponentShape, rule: ComponentRule, seed: float, offset: float
) -> ComponentShape:
    return ComponentShape(
        radius=pick_option(rule.radius_options, base.radius, seed, offset),
        shadow=pick_option(rule.shadow_options, base.shadow, seed, offset + _SHADOW_STEP),
        border=pick_option(rule.border_options, base.border, seed, offset + _BORDER_STEP),
    )


def pick_component_shapes(
    vibe: VibePreset,
    seed: float,
    *,
    rules: dict[str, ShapeRule] | None = None,
    base: ComponentShapes | None = None,
) -> ComponentShapes:
    """
    Draw radius/shadow/border for each component class.

    Args:
        vibe: Vibe whose candidate lists are sampled
        seed: Style seed
        rules: Vibe id -> ShapeRule; unknown vibes use the generic rule
        base: Fallback values for empty candidate lists

    Returns:
        ComponentShapes for button_primary, button_secondary and card
    """
    rule = (rules or {}).get(vibe.id, DEFAULT_SHAPE_RULE)
    fallback = base or DEFAULT_BASE_SHAPES

    shapes = {
        key: _build_shape(getattr(fallback, key), getattr(rule, key), seed, offset)
        for key, offset in _COMPONENT_OFFSETS.items()
    }
    return ComponentShapes(**shapes)


# ═══════════════════════════════════════════════════════════════════════════
# STYLE TYPOGRAPHY
# ═══════════════════════════════════════════════════════════════════════════


def _pick_style(base: FontStyle, chance: float, seed: float, offset: float) -> FontStyle:
    draw = seeded_random(seed, offset)
    if base == "italic":
        return "italic" if draw < max(_STICKY_CHANCE, chance) else "normal"
    return "italic" if draw < chance else "normal"


def _pick_transform(
    base: TextTransform, chance: float, seed: float, offset: float
) -> TextTransform:
    if chance <= 0:
        return base
    draw = seeded_random(seed, offset)
    if base == "uppercase":
        return "uppercase" if draw < max(_STICKY_CHANCE, chance) else "none"
    return "uppercase" if draw < chance else "none"


def _subheading_base(base: TypographyTokens) -> TextStyle:
    if base.subheading is not None:
        return base.subheading
    # One step below heading, kept within sm..xl
    index = min(size_index("xl"), max(size_index("sm"), size_index(base.heading.size) - 1))
    return TextStyle(
        size=SIZE_ORDER[index],
        weight=max(base.body.weight, base.heading.weight - 100),
        style=base.heading.style,
        transform=base.heading.transform,
    )


def _build_slot(
    slot: str,
    base: TextStyle,
    sizes: Sequence[SizeToken],
    weights: Sequence[int],
    italic_chance: float,
    uppercase_chance: float,
    seed: float,
) -> TextStyle:
    size_off, weight_off, style_off, transform_off = _SLOT_OFFSETS[slot]
    return TextStyle(
        size=pick_option(sizes, base.size, seed, size_off),
        weight=pick_option(weights, base.weight, seed, weight_off),
        style=_pick_style(base.style, italic_chance, seed, style_off),
        transform=_pick_transform(base.transform, uppercase_chance, seed, transform_off),
    )


def generate_style_typography(
    vibe: VibePreset,
    seed: float,
    base: TypographyTokens | None = None,
    *,
    rules: dict[str, StyleTypographyRule] | None = None,
) -> TypographyTokens:
    """Seeded starting typography for a vibe; feeds the optimizer."""
    rule = (rules or {}).get(vibe.id, DEFAULT_STYLE_TYPOGRAPHY_RULE)
    start = base or DEFAULT_BASE_TYPOGRAPHY
    sub_base = _subheading_base(start)

    return TypographyTokens(
        heading=_build_slot(
            "heading",
            start.heading,
            rule.heading_sizes,
            rule.heading_weights,
            rule.heading_italic_chance,
            rule.heading_uppercase_chance,
            seed,
        ),
        subheading=_build_slot(
            "subheading",
            sub_base,
            rule.subheading_sizes,
            rule.subheading_weights,
            rule.subheading_italic_chance,
            rule.subheading_uppercase_chance,
            seed,
        ),
        body=_build_slot(
            "body",
            start.body,
            rule.body_sizes,
            rule.body_weights,
            rule.body_italic_chance,
            rule.body_uppercase_chance,
            seed,
        ),
        accent=_build_slot(
            "accent",
            start.accent,
            rule.accent_sizes,
            rule.accent_weights,
            rule.accent_italic_chance,
            rule.accent_uppercase_chance,
            seed,
        ),
    )
