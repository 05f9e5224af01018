"""
Typography component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities import (
    ColorSet,
    TypographyColors,
    TypographyTokens,
    TypographyTrendHints,
    VibePreset,
)


@dataclass(frozen=True)
class OptimizeTypographyInput:
    """Input for typography optimization."""

    current: TypographyTokens
    vibe: VibePreset
    colors: ColorSet
    seed: float = 0.0
    trend_hints: TypographyTrendHints | None = None


@dataclass(frozen=True)
class TypographyOutput:
    """Optimized tokens and the matching text colours."""

    typography: TypographyTokens
    colors: TypographyColors
