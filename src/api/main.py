import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.deps import get_settings
from src.api.routes import tokens
from src.rules.loader import load_catalog

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Validate the vibe catalogue before serving requests."""
    settings = get_settings()
    try:
        catalog = load_catalog(settings.catalog_path)
    except (FileNotFoundError, ValueError) as e:
        logger.critical("Vibe catalog load failed: %s", e)
        sys.exit(1)
    logger.info(
        "Vibe catalog %s: %d vibes, %d pro",
        settings.catalog_path,
        len(catalog.vibes),
        len(catalog.pro_vibes),
    )
    yield


def create_app() -> FastAPI:
    settings = get_settings()
    application = FastAPI(
        title="Vibe Token Engine API",
        version="0.1.0",
        lifespan=lifespan,
    )
    application.include_router(tokens.router, prefix="/api/tokens", tags=["Tokens"])
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @application.get("/health")
    def health_check() -> dict[str, Any]:
        return {"status": "ok", "service": "vibe-token-engine"}

    return application


app = create_app()
