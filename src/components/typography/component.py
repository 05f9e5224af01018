"""
Typography component - Hierarchy repair, vibe rules and seeded jitter.

Invariants:
- index(heading.size) - index(body.size) >= 2
- heading.weight - body.weight >= 200
- accent.weight <= heading.weight
"""

from __future__ import annotations

from ._impl import (
    DEFAULT_TYPOGRAPHY_RULES,
    TypographyRule,
    optimize_typography,
    optimize_typography_colors,
)
from .models import OptimizeTypographyInput, TypographyOutput
from .ports import TypographyRulesPort


def build_typography_rules(rules: TypographyRulesPort | None) -> dict[str, TypographyRule]:
    """Build the vibe rule table from rules port."""
    if rules is None:
        return DEFAULT_TYPOGRAPHY_RULES

    table = dict(DEFAULT_TYPOGRAPHY_RULES)
    for vibe_id, fields in rules.get_typography_rules().items():
        table[vibe_id] = TypographyRule(**fields)
    return table


# --- Component Entry Points ---


def run_optimize(
    inp: OptimizeTypographyInput,
    *,
    rules: TypographyRulesPort | None = None,
) -> TypographyOutput:
    """
    Optimize typography tokens for a vibe and palette.

    Args:
        inp: Starting tokens, vibe, palette, style seed and trend hints.
        rules: Optional rules port overriding per-vibe rules.

    Returns:
        TypographyOutput with tokens and per-slot text colours.
    """
    typography = optimize_typography(
        inp.current,
        inp.vibe,
        inp.colors,
        inp.trend_hints,
        seed=inp.seed,
        rules=build_typography_rules(rules),
    )
    return TypographyOutput(
        typography=typography,
        colors=optimize_typography_colors(inp.colors),
    )
