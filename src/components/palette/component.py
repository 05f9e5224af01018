"""
Palette component - Seeded base palette generation.

Invariants:
- Same vibe, seed, previous palette and locks give the same colours
- Locked keys equal the previous palette's values verbatim
- Text reaches at least 4:1 against the background when achievable
"""

from __future__ import annotations

from ._impl import derive_full_palette, generate_base_palette, invert_for_dark_mode
from .models import GeneratePaletteInput, PaletteOutput


def run_generate(inp: GeneratePaletteInput) -> PaletteOutput:
    """
    Generate a palette for a vibe and seed.

    Args:
        inp: Vibe, seed, optional previous palette/locks and dark-mode flag.

    Returns:
        PaletteOutput with the base ColorSet and its FullPalette expansion.
    """
    colors = generate_base_palette(inp.vibe, inp.seed, inp.prev_palette, inp.locks)
    if inp.dark_mode:
        colors = invert_for_dark_mode(colors)
    return PaletteOutput(colors=colors, palette=derive_full_palette(colors))
