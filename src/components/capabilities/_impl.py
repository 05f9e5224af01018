"""
Capabilities: explicit feature sets passed to whatever needs them.

There is no process-wide tier switch; callers build a Capabilities value
and hand it down.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from .ports import VibeCatalogPort

Tier = Literal["free", "pro"]
TIERS: tuple[Tier, ...] = ("free", "pro")

FEATURE_TIERS: dict[str, Tier] = {
    "contrast_report": "free",
    "typography_optimizer": "free",
    "dark_mode": "free",
    "wcag_auto_fix": "pro",
    "harmony_mode": "pro",
    "pro_vibes": "pro",
    "custom_fonts": "pro",
}


@dataclass(frozen=True)
class Capabilities:
    tier: Tier
    features: frozenset[str] = field(default_factory=frozenset)


def capabilities_for_tier(tier: Tier) -> Capabilities:
    """
    Build the capability set for a tier.

    Raises:
        ValueError: If tier is not "free" or "pro"
    """
    if tier not in TIERS:
        raise ValueError(f"Unknown tier: {tier!r}. Expected one of {TIERS}")

    if tier == "pro":
        features = frozenset(FEATURE_TIERS)
    else:
        features = frozenset(name for name, required in FEATURE_TIERS.items() if required == "free")
    return Capabilities(tier=tier, features=features)


def is_feature_enabled(capabilities: Capabilities, name: str) -> bool:
    return name in capabilities.features


def is_vibe_available(vibe_id: str, catalog: VibeCatalogPort, capabilities: Capabilities) -> bool:
    """Pro vibes need the pro_vibes capability; every other vibe is open."""
    if is_feature_enabled(capabilities, "pro_vibes"):
        return True
    return vibe_id not in catalog.get_pro_vibe_ids()


def available_vibe_ids(catalog: VibeCatalogPort, capabilities: Capabilities) -> list[str]:
    """Vibe ids usable with these capabilities, in catalogue order."""
    return [
        vibe_id
        for vibe_id in catalog.get_vibe_ids()
        if is_vibe_available(vibe_id, catalog, capabilities)
    ]
