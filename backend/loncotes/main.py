"""Loncotes Library API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map LibraryError → HTTP responses (api/error_handlers.py)
    - CORS configured from settings (not hardcoded)
    - Database engine created on startup and disposed on shutdown via lifespan
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from loncotes.api.error_handlers import register_error_handlers
from loncotes.api.routes import catalog, health, materials
from loncotes.config import get_settings
from loncotes.infrastructure.database import close_db, init_db
from loncotes.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Loncotes Library API started")
    yield
    await close_db()
    logger.info("Loncotes Library API shutting down")


app = FastAPI(
    title="Loncotes Library API", version=health.SERVICE_VERSION, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(materials.router)
app.include_router(catalog.router)

register_error_handlers(app)
