"""
Palette component - Base palette, derived tokens and dark-mode inversion.
"""

from ._impl import (
    TEXT_DARK,
    TEXT_LIGHT,
    apply_locks,
    background_for_vibe,
    derive_full_palette,
    draw_primary_hsl,
    ensure_readable_text,
    generate_base_palette,
    invert_for_dark_mode,
    pick_text_color,
)
from .component import run_generate
from .models import GeneratePaletteInput, PaletteOutput

__all__ = [
    # Component entry points
    "run_generate",
    # Models
    "GeneratePaletteInput",
    "PaletteOutput",
    # Functions
    "apply_locks",
    "background_for_vibe",
    "derive_full_palette",
    "draw_primary_hsl",
    "ensure_readable_text",
    "generate_base_palette",
    "invert_for_dark_mode",
    "pick_text_color",
    # Constants
    "TEXT_DARK",
    "TEXT_LIGHT",
]
