"""
Shapes component port definitions.
"""

from __future__ import annotations

from typing import Any, Protocol


class ShapeRulesPort(Protocol):
    """Port for per-vibe style variation rules."""

    def get_shape_rules(self) -> dict[str, dict[str, Any]]:
        """Get vibe id -> {button_primary, button_secondary, card} option lists."""
        ...

    def get_style_typography_rules(self) -> dict[str, dict[str, Any]]:
        """Get vibe id -> typography candidate lists and chances."""
        ...
