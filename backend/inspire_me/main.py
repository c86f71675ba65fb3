"""Inspire Me — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map InspireError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager

Run with: uvicorn inspire_me.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from inspire_me.api.dependencies import get_corpus
from inspire_me.api.error_handlers import register_error_handlers
from inspire_me.api.routes import health, pages, quotes
from inspire_me.config import get_settings
from inspire_me.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    handler = setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"{settings.app_name} started with {len(get_corpus())} quotes",
        extra={"delay_ms": settings.selection_delay_ms},
    )
    yield
    logger.info(f"{settings.app_name} shutting down")
    logging.root.removeHandler(handler)


settings = get_settings()
app = FastAPI(
    title=f"{settings.app_name} API", version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Pages registered last so /api/v1/* is matched first
app.include_router(health.router)
app.include_router(quotes.router)
app.include_router(pages.router)

register_error_handlers(app)
