"""
Capabilities component - Explicit free/pro feature sets.
"""

from ._impl import (
    FEATURE_TIERS,
    TIERS,
    Capabilities,
    Tier,
    available_vibe_ids,
    capabilities_for_tier,
    is_feature_enabled,
    is_vibe_available,
)
from .ports import VibeCatalogPort

__all__ = [
    "Capabilities",
    "FEATURE_TIERS",
    "TIERS",
    "Tier",
    "VibeCatalogPort",
    "available_vibe_ids",
    "capabilities_for_tier",
    "is_feature_enabled",
    "is_vibe_available",
]
