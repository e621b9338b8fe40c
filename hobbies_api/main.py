"""Hobbies API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to the response envelope
    - CORS configured from settings (not hardcoded)
    - The DatabaseSessionManager is built on startup, kept on app.state,
      and disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hobbies_api.api.error_handlers import register_error_handlers
from hobbies_api.api.routes import health, hobbies
from hobbies_api.config import get_settings
from hobbies_api.infrastructure.database import DatabaseSessionManager
from hobbies_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_tables:
        await db_manager.create_all()
    app.state.db_manager = db_manager
    logger.info("Hobbies API started")
    try:
        yield
    finally:
        logger.info("Hobbies API shutting down")
        await db_manager.close()
        app.state.db_manager = None


app = FastAPI(title="Hobbies API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(hobbies.router)

register_error_handlers(app)
