"""Service Registry - builds the process-wide DocumentService and exposes it to routes.

Invariants:
    - Exactly one DocumentService per process, created in the lifespan and never torn down
    - store_backend "sql" requires an initialized DatabaseSessionManager
    - get_document_service raises RuntimeError before initialization (same contract as get_db)
"""

import logging

from docregistry.config import Settings
from docregistry.infrastructure.clock import SystemClock
from docregistry.infrastructure.database import DatabaseSessionManager
from docregistry.infrastructure.memory_store import (
    InMemoryDocumentStore, InMemoryIdIssuer,
)
from docregistry.infrastructure.sql_store import SqlDocumentStore, SqlIdIssuer
from docregistry.services.document_service import DocumentService

logger = logging.getLogger(__name__)

# Singleton (initialized on startup)
document_service: DocumentService | None = None


def build_document_service(
    settings: Settings, db: DatabaseSessionManager | None,
) -> DocumentService:
    """Wire store, issuer and clock for the configured backend."""
    if settings.store_backend == "memory":
        store = InMemoryDocumentStore(settings.max_record_bytes)
        issuer = InMemoryIdIssuer()
    else:
        if db is None:
            raise RuntimeError("Database not initialized")
        store = SqlDocumentStore(db, settings.max_record_bytes)
        issuer = SqlIdIssuer(db)
    logger.info(f"Document store backend: {settings.store_backend}")
    return DocumentService(store=store, issuer=issuer, clock=SystemClock())


def init_document_service(service: DocumentService) -> None:
    global document_service
    document_service = service


def get_document_service() -> DocumentService:
    """FastAPI dependency for the document service."""
    if not document_service:
        raise RuntimeError("Document service not initialized")
    return document_service
