"""
Tokens component - CSS variable and JSON token export.
"""

from ._impl import (
    FONT_SIZE_MAP,
    RADIUS_MAP,
    SHADOW_MAP,
    border_style,
    build_css_variables,
    build_design_tokens,
    build_json_tokens,
)
from .models import DesignTokens

__all__ = [
    "DesignTokens",
    "FONT_SIZE_MAP",
    "RADIUS_MAP",
    "SHADOW_MAP",
    "border_style",
    "build_css_variables",
    "build_design_tokens",
    "build_json_tokens",
]
