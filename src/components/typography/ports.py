"""
Typography component port definitions.
"""

from __future__ import annotations

from typing import Any, Protocol


class TypographyRulesPort(Protocol):
    """Port for per-vibe typography rules."""

    def get_typography_rules(self) -> dict[str, dict[str, Any]]:
        """Get vibe id -> rule fields; merged over the built-in table."""
        ...
