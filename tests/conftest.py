"""Root conftest - shared test configuration and service fixtures."""

import os

# Tests never reach a real database; the app module reads settings at import
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("STORE_BACKEND", "memory")

import pytest  # noqa: E402

from docregistry.infrastructure.memory_store import (  # noqa: E402
    InMemoryDocumentStore, InMemoryIdIssuer,
)
from docregistry.services.document_service import DocumentService  # noqa: E402
from tests.fakes import FakeClock  # noqa: E402


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return InMemoryDocumentStore()


@pytest.fixture
def issuer():
    return InMemoryIdIssuer()


@pytest.fixture
def service(store, issuer, clock):
    return DocumentService(store=store, issuer=issuer, clock=clock)
