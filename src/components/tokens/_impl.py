"""
Design token export: CSS custom properties and a JSON token document.
"""

from __future__ import annotations

import json
from typing import Any

from src.components.palette import derive_full_palette
from src.domain.entities import (
    BorderToken,
    ColorSet,
    ComponentShapes,
    FontPair,
    FullPalette,
    TextStyle,
    TypographyTokens,
    VibePreset,
)

from .models import DesignTokens

RADIUS_MAP: dict[str, str] = {
    "none": "0px",
    "sm": "6px",
    "md": "10px",
    "lg": "16px",
    "xl": "24px",
    "full": "9999px",
}

SHADOW_MAP: dict[str, str] = {
    "none": "none",
    "xs": "0 1px 2px rgba(15, 23, 42, 0.05)",
    "sm": "0 1px 3px rgba(15, 23, 42, 0.08), 0 2px 6px rgba(15, 23, 42, 0.06)",
    "md": "0 4px 8px rgba(15, 23, 42, 0.15), 0 8px 16px rgba(15, 23, 42, 0.15)",
    "lg": "0 10px 30px rgba(15, 23, 42, 0.20), 0 15px 50px rgba(15, 23, 42, 0.15)",
    "xl": (
        "0 6px 12px rgba(15, 23, 42, 0.12), 0 12px 32px rgba(15, 23, 42, 0.14), "
        "0 24px 48px rgba(15, 23, 42, 0.10)"
    ),
    "2xl": (
        "0 8px 16px rgba(15, 23, 42, 0.14), 0 16px 40px rgba(15, 23, 42, 0.18), "
        "0 32px 64px rgba(15, 23, 42, 0.12)"
    ),
}

FONT_SIZE_MAP: dict[str, str] = {
    "xs": "0.75rem",
    "sm": "0.875rem",
    "md": "1rem",
    "lg": "1.125rem",
    "xl": "1.25rem",
    "2xl": "1.5rem",
}

_COLOR_VARS = (
    ("primary", "primary"),
    ("secondary", "secondary"),
    ("accent", "accent"),
    ("bg", "background"),
    ("surface", "surface"),
    ("surface-alt", "surface_alt"),
    ("text", "text"),
    ("text-muted", "text_muted"),
    ("border-subtle", "border_subtle"),
    ("border-strong", "border_strong"),
    ("on-primary", "on_primary"),
    ("on-secondary", "on_secondary"),
    ("on-accent", "on_accent"),
)

_SHAPE_VARS = (
    ("card", "card"),
    ("button-primary", "button_primary"),
    ("button-secondary", "button_secondary"),
)

_SLOTS = ("heading", "subheading", "body", "accent")


def border_style(token: BorderToken, palette: FullPalette) -> str:
    if token == "none":
        return "0px solid transparent"
    color = palette.border_subtle if token == "subtle" else palette.border_strong
    return f"1px solid {color}"


def _slot(typography: TypographyTokens, name: str) -> TextStyle:
    style = getattr(typography, name)
    # Exported documents always carry four slots
    return style if style is not None else typography.heading


def _font_stack(family: str) -> str:
    return f'"{family}", system-ui, -apple-system, sans-serif'


def build_css_variables(
    palette: FullPalette,
    shapes: ComponentShapes,
    typography: TypographyTokens,
    fonts: FontPair,
) -> str:
    lines = [f"  --{var}: {getattr(palette, field)};" for var, field in _COLOR_VARS]

    for var, field in _SHAPE_VARS:
        shape = getattr(shapes, field)
        lines.append(f"  --radius-{var}: {RADIUS_MAP[shape.radius]};")
        lines.append(f"  --shadow-{var}: {SHADOW_MAP[shape.shadow]};")
        lines.append(f"  --border-{var}: {border_style(shape.border, palette)};")

    lines.append(f"  --font-heading: {_font_stack(fonts.heading)};")
    lines.append(f"  --font-body: {_font_stack(fonts.body)};")

    for name in _SLOTS:
        style = _slot(typography, name)
        lines.append(f"  --{name}-transform: {style.transform};")
        lines.append(f"  --{name}-font-size: {FONT_SIZE_MAP[style.size]};")
        lines.append(f"  --{name}-font-weight: {style.weight};")
        lines.append(f"  --{name}-font-style: {style.style};")

    return ":root {\n" + "\n".join(lines) + "\n}\n"


def build_json_tokens(
    palette: FullPalette,
    shapes: ComponentShapes,
    typography: TypographyTokens,
    fonts: FontPair,
    vibe: VibePreset | None = None,
) -> str:
    document: dict[str, Any] = {
        "meta": {"vibe": vibe.id, "label": vibe.label} if vibe is not None else {},
        "colors": palette.model_dump(),
        "fonts": fonts.model_dump(),
        "component_shapes": shapes.model_dump(),
        "typography": {name: _slot(typography, name).model_dump() for name in _SLOTS},
        "typography_values": {
            name: {
                "size_token": _slot(typography, name).size,
                "size_rem": FONT_SIZE_MAP[_slot(typography, name).size],
                "weight": _slot(typography, name).weight,
            }
            for name in _SLOTS
        },
    }
    return json.dumps(document, indent=2)


def build_design_tokens(
    palette: ColorSet,
    shapes: ComponentShapes,
    typography: TypographyTokens,
    fonts: FontPair | None = None,
    vibe: VibePreset | None = None,
) -> DesignTokens:
    """
    Export a design as CSS custom properties and a JSON token document.

    A bare ColorSet is expanded with derive_full_palette first.
    """
    full = derive_full_palette(palette)
    font_pair = fonts or FontPair()
    return DesignTokens(
        css_variables=build_css_variables(full, shapes, typography, font_pair),
        json_tokens=build_json_tokens(full, shapes, typography, font_pair, vibe),
    )
