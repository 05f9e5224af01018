"""
Engine input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from src.components.capabilities import Capabilities, capabilities_for_tier
from src.components.contrast import ContrastCheck, ContrastViolations
from src.components.tokens import DesignTokens
from src.domain.entities import (
    ColorLocks,
    ColorSet,
    ComponentShapes,
    ContrastTarget,
    FontPair,
    FullPalette,
    HarmonyType,
    TypographyColors,
    TypographyTokens,
    TypographyTrendHints,
    VibePreset,
)

PaletteMode = Literal["base", "harmony"]


@dataclass(frozen=True)
class GenerateDesignInput:
    """Everything needed to replay one design."""

    vibe: VibePreset
    seed: float
    style_seed: float | None = None
    prev_palette: ColorSet | None = None
    locks: ColorLocks | None = None
    mode: PaletteMode = "base"
    harmony_type: HarmonyType | None = None
    dark_mode: bool = False
    contrast_target: ContrastTarget | None = None
    capabilities: Capabilities = field(default_factory=lambda: capabilities_for_tier("free"))
    fonts: FontPair | None = None
    trend_hints: TypographyTrendHints | None = None


@dataclass(frozen=True)
class DesignError:
    """A refused or skipped step, reported instead of raised."""

    code: str
    message: str
    feature: str | None = None


@dataclass(frozen=True)
class DesignOutput:
    """A complete generated design."""

    colors: ColorSet
    palette: FullPalette
    contrast: list[ContrastCheck]
    violations: ContrastViolations
    typography: TypographyTokens
    typography_colors: TypographyColors
    shapes: ComponentShapes
    tokens: DesignTokens
    errors: list[DesignError] = field(default_factory=list)
    success: bool = True
