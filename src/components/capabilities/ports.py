"""
Capabilities component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class VibeCatalogPort(Protocol):
    """Port for the vibe catalogue's tiering."""

    def get_vibe_ids(self) -> list[str]:
        """Get every vibe id in catalogue order."""
        ...

    def get_pro_vibe_ids(self) -> frozenset[str]:
        """Get the vibe ids reserved for the pro tier."""
        ...
