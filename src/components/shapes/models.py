"""
Shapes component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities import ComponentShapes, TypographyTokens, VibePreset


@dataclass(frozen=True)
class PickShapesInput:
    """Input for style variation: vibe plus style seed."""

    vibe: VibePreset
    seed: float
    base_typography: TypographyTokens | None = None


@dataclass(frozen=True)
class StyleOutput:
    """Component shapes and the seeded starting typography."""

    shapes: ComponentShapes
    typography: TypographyTokens
