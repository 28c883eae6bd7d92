"""API fixtures - FastAPI test client wired to an in-memory DocumentService.

Invariants:
    - The lifespan is not run; the service singleton is patched in and restored after
    - db_manager stays None, so readiness reports the database as not configured
"""

import pytest
from httpx import ASGITransport, AsyncClient

import docregistry.services.service_registry as registry_module
from docregistry.main import app


@pytest.fixture
async def client(service):
    """FastAPI test client with the document service overridden."""
    original = registry_module.document_service
    registry_module.document_service = service

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    registry_module.document_service = original
