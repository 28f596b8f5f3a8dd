"""Portfolio API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PortfolioError -> registry-declared JSON bodies
    - CORS configured from settings (not hardcoded)
    - Storage, DB pool and notifier created once in the lifespan, stored on
      app.state, torn down at shutdown
    - Seeding runs before the first request and never blocks startup on failure

Design Decisions:
    - Lifespan over @app.on_event
    - Static bundle mounted AFTER API routes so /api/* takes precedence
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import contact, health, projects, skills
from app.api.spa import SPAStaticFiles
from app.config import get_settings
from app.infrastructure.email_notifier import EmailNotifier
from app.infrastructure.observability import setup_logging
from app.infrastructure.storage_factory import create_storage
from app.services.seed import seed_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    storage, db_manager = await create_storage(settings)
    app.state.storage = storage
    app.state.db_manager = db_manager
    app.state.notifier = EmailNotifier.from_settings(settings)
    if settings.seed_on_startup:
        await seed_database(storage)
    logger.info("Portfolio API started")
    try:
        yield
    finally:
        logger.info("Portfolio API shutting down")
        if db_manager is not None:
            await db_manager.close()


app = FastAPI(
    title="Portfolio API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(projects.router)
app.include_router(skills.router)
app.include_router(contact.router)

register_error_handlers(app)

if os.path.isdir(settings.static_dir):
    app.mount(
        "/", SPAStaticFiles(directory=settings.static_dir, html=True),
        name="static",
    )
