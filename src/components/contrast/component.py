"""
Contrast component - WCAG contrast report and repair.

Invariants:
- Report rows follow the fixed semantic pair order
- Repair never lowers a pair's ratio
- Repair leaves compliant pairs untouched
"""

from __future__ import annotations

from typing import Any

from src.components.palette import derive_full_palette

from ._impl import (
    DEFAULT_CONFIG,
    ContrastConfig,
    check_palette_contrast,
    count_violations,
    fix_contrast_to_target,
)
from .models import (
    CheckContrastInput,
    ContrastReportOutput,
    FixContrastInput,
    FixContrastOutput,
)
from .ports import ContrastRulesPort


def build_contrast_config(rules: ContrastRulesPort | None) -> ContrastConfig:
    """Build contrast config from rules port."""
    if rules is None:
        return DEFAULT_CONFIG

    data: dict[str, Any] = rules.get_contrast_config() or {}
    return ContrastConfig(
        muted_saturation_threshold=float(
            data.get("muted_saturation_threshold", DEFAULT_CONFIG.muted_saturation_threshold)
        ),
        muted_window_light_bg=tuple(  # type: ignore[arg-type]
            data.get("muted_window_light_bg", DEFAULT_CONFIG.muted_window_light_bg)
        ),
        muted_window_dark_bg=tuple(  # type: ignore[arg-type]
            data.get("muted_window_dark_bg", DEFAULT_CONFIG.muted_window_dark_bg)
        ),
        search_iterations=int(data.get("search_iterations", DEFAULT_CONFIG.search_iterations)),
    )


# --- Component Entry Points ---


def run_check(inp: CheckContrastInput) -> ContrastReportOutput:
    """
    Report contrast over the expanded palette.

    Args:
        inp: Palette plus optional extra pairs.

    Returns:
        ContrastReportOutput with checks and violation counts.
    """
    palette = derive_full_palette(inp.palette)
    checks = check_palette_contrast(palette, inp.extra_pairs)
    return ContrastReportOutput(
        palette=palette,
        checks=checks,
        violations=count_violations(checks),
    )


def run_fix(
    inp: FixContrastInput,
    *,
    rules: ContrastRulesPort | None = None,
) -> FixContrastOutput:
    """
    Repair a palette toward AA or AAA.

    Args:
        inp: Palette and target standard.
        rules: Optional rules port overriding the search tuning.

    Returns:
        FixContrastOutput with the repaired palette, the names of the
        adjusted fields and the post-repair report.
    """
    config = build_contrast_config(rules)
    fixed = fix_contrast_to_target(inp.colors, inp.target, config)

    adjusted = [
        name
        for name in type(inp.colors).model_fields
        if getattr(fixed, name) != getattr(inp.colors, name)
    ]
    checks = check_palette_contrast(fixed)
    return FixContrastOutput(
        colors=fixed,
        adjusted=adjusted,
        checks=checks,
        violations=count_violations(checks),
    )
