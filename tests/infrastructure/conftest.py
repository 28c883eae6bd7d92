"""Infrastructure fixtures - SQLite-backed session managers.

Invariants:
    - Every test gets a fresh in-memory SQLite database with tables created
"""

import pytest

from docregistry.infrastructure.database import DatabaseSessionManager


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_all()
    yield manager
    await manager.dispose()
