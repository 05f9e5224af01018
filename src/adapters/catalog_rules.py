"""
Catalogue rules adapter.

Exposes a loaded VibeCatalog through the component rules ports
(contrast, typography, shapes, capabilities).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from src.domain.entities import VibePreset
from src.rules.loader import load_catalog
from src.rules.models import VibeCatalog


class CatalogRulesAdapter:
    """Implements DesignRulesPort and VibeCatalogPort over a VibeCatalog."""

    def __init__(self, catalog: VibeCatalog) -> None:
        self.catalog = catalog

    @classmethod
    def from_path(cls, path: Path) -> CatalogRulesAdapter:
        return cls(load_catalog(path))

    # --- Vibes ---

    def get_vibe(self, vibe_id: str) -> VibePreset:
        return self.catalog.get_vibe(vibe_id)

    def get_vibe_ids(self) -> list[str]:
        return self.catalog.vibe_ids()

    def get_pro_vibe_ids(self) -> frozenset[str]:
        return frozenset(self.catalog.pro_vibes)

    # --- Rules ports ---

    def get_contrast_config(self) -> dict[str, Any]:
        return self.catalog.contrast.model_dump()

    def get_typography_rules(self) -> dict[str, dict[str, Any]]:
        return {
            vibe_id: rule.model_dump(exclude_none=True)
            for vibe_id, rule in self.catalog.typography_rules.items()
        }

    def get_shape_rules(self) -> dict[str, dict[str, Any]]:
        return {vibe_id: rule.model_dump() for vibe_id, rule in self.catalog.shape_rules.items()}

    def get_style_typography_rules(self) -> dict[str, dict[str, Any]]:
        return {
            vibe_id: rule.model_dump() for vibe_id, rule in self.catalog.style_typography.items()
        }
