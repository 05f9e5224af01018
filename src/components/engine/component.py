"""
Engine component - One-call design generation.

Palette first, then contrast and typography (both consume the palette),
then shapes and token export. Capability refusals are reported in the
output's errors and the affected step is skipped. A pro vibe on a tier
without pro_vibes is reported the same way; the API and CLI refuse it
before generating.
"""

from __future__ import annotations

import logging

from src.components.capabilities import is_feature_enabled, is_vibe_available
from src.components.contrast import (
    build_contrast_config,
    check_palette_contrast,
    count_violations,
    fix_contrast_to_target,
)
from src.components.harmony import generate_harmony_palette
from src.components.palette import derive_full_palette, generate_base_palette, invert_for_dark_mode
from src.components.shapes import (
    build_shape_rules,
    build_style_typography_rules,
    generate_style_typography,
    pick_component_shapes,
)
from src.components.tokens import build_design_tokens
from src.components.typography import (
    build_typography_rules,
    optimize_typography,
    optimize_typography_colors,
)
from src.domain.entities import ColorSet

from .models import DesignError, DesignOutput, GenerateDesignInput
from .ports import DesignRulesPort

logger = logging.getLogger(__name__)


def _feature_locked(feature: str, step: str) -> DesignError:
    return DesignError(
        code="feature_locked",
        message=f"{step} requires the '{feature}' capability",
        feature=feature,
    )


def _generate_colors(inp: GenerateDesignInput, errors: list[DesignError]) -> ColorSet:
    if inp.mode == "harmony":
        if is_feature_enabled(inp.capabilities, "harmony_mode"):
            return generate_harmony_palette(
                inp.vibe, inp.seed, inp.prev_palette, inp.locks, inp.harmony_type
            )
        logger.info("Harmony mode refused for tier %s", inp.capabilities.tier)
        errors.append(_feature_locked("harmony_mode", "Harmony palette mode"))

    return generate_base_palette(inp.vibe, inp.seed, inp.prev_palette, inp.locks)


def generate_design(
    inp: GenerateDesignInput,
    *,
    rules: DesignRulesPort | None = None,
) -> DesignOutput:
    """
    Generate palette, contrast report, typography, shapes and tokens.

    Args:
        inp: Vibe, seeds, locks, mode and capabilities.
        rules: Optional catalogue rules forwarded to each component.

    Returns:
        DesignOutput; success is False when a requested step was refused.
    """
    errors: list[DesignError] = []
    style_seed = inp.seed if inp.style_seed is None else inp.style_seed

    if rules is not None and not is_vibe_available(inp.vibe.id, rules, inp.capabilities):
        logger.info("Pro vibe %s refused for tier %s", inp.vibe.id, inp.capabilities.tier)
        errors.append(_feature_locked("pro_vibes", f"Vibe '{inp.vibe.id}'"))

    fonts = inp.fonts
    if fonts is not None and not is_feature_enabled(inp.capabilities, "custom_fonts"):
        logger.info("Custom fonts refused for tier %s", inp.capabilities.tier)
        errors.append(_feature_locked("custom_fonts", "Custom fonts"))
        fonts = None

    colors = _generate_colors(inp, errors)
    if inp.dark_mode:
        colors = invert_for_dark_mode(colors)
    palette = derive_full_palette(colors)

    if inp.contrast_target is not None:
        if is_feature_enabled(inp.capabilities, "wcag_auto_fix"):
            config = build_contrast_config(rules)
            # Derived roles mix the text colour: re-derive from the repaired base
            colors = fix_contrast_to_target(colors, inp.contrast_target, config)
            palette = fix_contrast_to_target(
                derive_full_palette(colors), inp.contrast_target, config
            )
        else:
            logger.info("Contrast auto-fix refused for tier %s", inp.capabilities.tier)
            errors.append(_feature_locked("wcag_auto_fix", "Contrast auto-fix"))

    checks = check_palette_contrast(palette)

    start = generate_style_typography(
        inp.vibe, style_seed, rules=build_style_typography_rules(rules)
    )
    typography = optimize_typography(
        start,
        inp.vibe,
        colors,
        inp.trend_hints,
        seed=style_seed,
        rules=build_typography_rules(rules),
    )
    shapes = pick_component_shapes(inp.vibe, style_seed, rules=build_shape_rules(rules))

    logger.debug("Generated design for vibe %s seed %s", inp.vibe.id, inp.seed)

    return DesignOutput(
        colors=colors,
        palette=palette,
        contrast=checks,
        violations=count_violations(checks),
        typography=typography,
        typography_colors=optimize_typography_colors(colors),
        shapes=shapes,
        tokens=build_design_tokens(palette, shapes, typography, fonts, inp.vibe),
        errors=errors,
        success=not errors,
    )
