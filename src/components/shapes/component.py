"""
Shapes component - Seeded component shapes and style typography.
"""

from __future__ import annotations

from typing import Any

from ._impl import (
    ComponentRule,
    ShapeRule,
    StyleTypographyRule,
    generate_style_typography,
    pick_component_shapes,
)
from .models import PickShapesInput, StyleOutput
from .ports import ShapeRulesPort

_COMPONENT_KEYS = ("button_primary", "button_secondary", "card")


def _component_rule(data: dict[str, Any] | None) -> ComponentRule:
    data = data or {}
    return ComponentRule(
        radius_options=tuple(data.get("radius_options", ())),
        shadow_options=tuple(data.get("shadow_options", ())),
        border_options=tuple(data.get("border_options", ())),
    )


def build_shape_rules(rules: ShapeRulesPort | None) -> dict[str, ShapeRule]:
    """Build vibe id -> ShapeRule from rules port."""
    if rules is None:
        return {}
    return {
        vibe_id: ShapeRule(**{key: _component_rule(data.get(key)) for key in _COMPONENT_KEYS})
        for vibe_id, data in rules.get_shape_rules().items()
    }


def build_style_typography_rules(
    rules: ShapeRulesPort | None,
) -> dict[str, StyleTypographyRule]:
    """Build vibe id -> StyleTypographyRule from rules port."""
    if rules is None:
        return {}
    table: dict[str, StyleTypographyRule] = {}
    for vibe_id, data in rules.get_style_typography_rules().items():
        fields = {
            key: tuple(value) if isinstance(value, list) else value for key, value in data.items()
        }
        table[vibe_id] = StyleTypographyRule(**fields)
    return table


# --- Component Entry Points ---


def run_pick(
    inp: PickShapesInput,
    *,
    rules: ShapeRulesPort | None = None,
) -> StyleOutput:
    """
    Draw component shapes and starting typography for a vibe.

    Args:
        inp: Vibe, style seed and optional base typography.
        rules: Optional rules port supplying per-vibe candidate lists.

    Returns:
        StyleOutput with shapes and typography.
    """
    shapes = pick_component_shapes(inp.vibe, inp.seed, rules=build_shape_rules(rules))
    typography = generate_style_typography(
        inp.vibe,
        inp.seed,
        inp.base_typography,
        rules=build_style_typography_rules(rules),
    )
    return StyleOutput(shapes=shapes, typography=typography)
