"""
Contrast component port definitions.
"""

from __future__ import annotations

from typing import Any, Protocol


class ContrastRulesPort(Protocol):
    """Port for contrast repair tuning values."""

    def get_contrast_config(self) -> dict[str, Any]:
        """Get the contrast section of the catalogue (may be empty)."""
        ...
