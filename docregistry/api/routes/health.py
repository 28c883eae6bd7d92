"""Health & Readiness Probes - liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 until the document service exists and, on the SQL
      backend, the database answers
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import docregistry.infrastructure.database as db_module
import docregistry.services.service_registry as registry_module

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "docregistry-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe - includes database connectivity when a database is configured."""
    if registry_module.document_service is None:
        return _not_ready("service_uninitialized")
    if db_module.db_manager is not None:
        if not await db_module.db_manager.health_check():
            return _not_ready("database_unavailable")
        return {"status": "ready", "checks": {"database": "healthy"}}
    return {"status": "ready", "checks": {"database": "not_configured"}}


def _not_ready(reason: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )
