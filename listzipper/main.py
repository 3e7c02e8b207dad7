"""listzipper API — FastAPI playground that feeds user sequences to the cursor core.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ListZipperError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured once on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Error handlers live in api/error_handlers.py and are registered here
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from listzipper.api.error_handlers import register_error_handlers
from listzipper.api.routes import cursors, health
from listzipper.config import get_settings
from listzipper.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("listzipper API started")
    yield
    logger.info("listzipper API shutting down")


app = FastAPI(
    title="listzipper API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(cursors.router)

register_error_handlers(app)
