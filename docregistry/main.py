"""Document Registry API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RegistryError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database and DocumentService initialized once on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - store_backend="memory" skips the database entirely (no engine is created)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docregistry.api.error_handlers import register_error_handlers
from docregistry.api.routes import documents, health
from docregistry.config import get_settings
from docregistry.infrastructure.database import init_db
from docregistry.infrastructure.observability import setup_logging
from docregistry.services.service_registry import (
    build_document_service, init_document_service,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db = None
    if settings.store_backend == "sql":
        db = init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        if settings.database_create_tables:
            await db.create_all()
    init_document_service(build_document_service(settings, db))
    logger.info("Document registry API started")
    yield
    logger.info("Document registry API shutting down")
    if db is not None:
        await db.dispose()


app = FastAPI(
    title="Document Registry API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(documents.router)

register_error_handlers(app)
