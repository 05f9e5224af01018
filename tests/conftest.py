from collections.abc import Callable
from pathlib import Path

import pytest

from src.adapters.catalog_rules import CatalogRulesAdapter
from src.domain.entities import ColorSet, VibePreset
from src.rules.loader import load_catalog
from src.rules.models import VibeCatalog

PROJECT_ROOT = Path(__file__).parent.parent
CATALOG_PATH = PROJECT_ROOT / "vibes.yaml"


@pytest.fixture(scope="session")
def catalog() -> VibeCatalog:
    """The real vibe catalogue shipped at the project root."""
    return load_catalog(CATALOG_PATH)


@pytest.fixture(scope="session")
def catalog_rules(catalog: VibeCatalog) -> CatalogRulesAdapter:
    return CatalogRulesAdapter(catalog)


@pytest.fixture
def vibe(catalog: VibeCatalog) -> Callable[[str], VibePreset]:
    """Look up a catalogue vibe by id."""
    return catalog.get_vibe


@pytest.fixture
def light_colors() -> ColorSet:
    return ColorSet(
        primary="#3b5bdb",
        secondary="#e8590c",
        accent="#12b886",
        background="#fafafa",
        text="#0a0a0a",
    )


@pytest.fixture
def dark_colors() -> ColorSet:
    return ColorSet(
        primary="#4dabf7",
        secondary="#f783ac",
        accent="#63e6be",
        background="#121417",
        text="#ffffff",
    )
