"""Ideaboard API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map IdeaboardError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized and the dummy password hash computed on startup
"""

import asyncio
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ideaboard.api.error_handlers import register_error_handlers
from ideaboard.api.middleware import register_request_logging
from ideaboard.api.routes import health, ideas, users
from ideaboard.config import get_settings
from ideaboard.core import security
from ideaboard.infrastructure.database import close_db, init_db
from ideaboard.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_tables:
        await manager.create_all()
    # First unknown-username login must cost the same as every later one
    await asyncio.to_thread(security.dummy_password_hash)
    logger.info("Ideaboard API started")
    yield
    logger.info("Ideaboard API shutting down")
    await close_db()


app = FastAPI(title="Ideaboard API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_request_logging(app)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(ideas.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "ideaboard.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
