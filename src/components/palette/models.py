"""
Palette component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities import ColorLocks, ColorSet, FullPalette, VibePreset


@dataclass(frozen=True)
class GeneratePaletteInput:
    """Input for generating a base palette."""

    vibe: VibePreset
    seed: float
    prev_palette: ColorSet | None = None
    locks: ColorLocks | None = None
    dark_mode: bool = False


@dataclass(frozen=True)
class PaletteOutput:
    """Base colours plus the derived token palette."""

    colors: ColorSet
    palette: FullPalette
