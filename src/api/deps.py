import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from src.adapters.catalog_rules import CatalogRulesAdapter

DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000"


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.catalog_path = Path(
            os.environ.get("VIBE_CATALOG_PATH", str(self.base_dir / "vibes.yaml"))
        )
        self.cors_origins = [
            origin.strip()
            for origin in os.environ.get("VIBE_CORS_ORIGINS", DEFAULT_CORS_ORIGINS).split(",")
            if origin.strip()
        ]


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Catalogue ---
@lru_cache
def _load_catalog_rules(path: Path) -> CatalogRulesAdapter:
    return CatalogRulesAdapter.from_path(path)


def get_catalog_rules(settings: Settings = Depends(get_settings)) -> CatalogRulesAdapter:
    return _load_catalog_rules(settings.catalog_path)
