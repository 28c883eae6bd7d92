"""SQL Store - DocumentStore / IdIssuer contract on SQLite via aiosqlite.

Tests cover:
    - get/insert/remove/iterate semantics (upsert, remove returns prior value)
    - iterate ordered by id
    - oversized documents rejected before any write
    - counter starts at 1 and survives a restart (file database)
    - DocumentService runs end to end on the SQL pair
    - ids past the BIGINT range are NotFound on the service and 404 over HTTP
    - concurrent updates on the SQL pair keep history dense
"""

import asyncio
from datetime import timedelta

import pytest
from httpx import ASGITransport, AsyncClient

import docregistry.services.service_registry as registry_module
from docregistry.core.document_lifecycle import apply_update, mark_deleted, new_document
from docregistry.core.domain_types import MAX_DOCUMENT_ID, DocumentId
from docregistry.core.errors import (
    DocumentDeletedError, DocumentNotFoundError, RecordTooLargeError,
)
from docregistry.infrastructure.database import DatabaseSessionManager
from docregistry.infrastructure.sql_store import SqlDocumentStore, SqlIdIssuer
from docregistry.main import app
from docregistry.models.document_record import MAX_STORABLE_ID
from docregistry.services.document_service import DocumentService
from tests.fakes import EPOCH, FakeClock, history_is_consistent, make_payload


def _doc(document_id: int, **payload):
    return new_document(DocumentId(document_id), make_payload(**payload), EPOCH)


async def test_get_missing_returns_none(db_manager):
    store = SqlDocumentStore(db_manager)
    assert await store.get(DocumentId(1)) is None


async def test_insert_then_get_roundtrips(db_manager):
    store = SqlDocumentStore(db_manager)
    doc = _doc(1)
    await store.insert(doc.id, doc)
    assert await store.get(doc.id) == doc


async def test_insert_overwrites(db_manager):
    store = SqlDocumentStore(db_manager)
    doc = _doc(1)
    await store.insert(doc.id, doc)
    updated = apply_update(doc, make_payload(title="A2"), EPOCH + timedelta(seconds=1))
    await store.insert(doc.id, updated)
    stored = await store.get(doc.id)
    assert stored == updated
    assert len(await store.iterate()) == 1


async def test_remove_returns_prior_value(db_manager):
    store = SqlDocumentStore(db_manager)
    doc = mark_deleted(_doc(3))
    await store.insert(doc.id, doc)
    assert await store.remove(doc.id) == doc
    assert await store.get(doc.id) is None
    assert await store.remove(doc.id) is None


async def test_iterate_orders_by_id(db_manager):
    store = SqlDocumentStore(db_manager)
    for document_id in (5, 2, 9):
        await store.insert(DocumentId(document_id), _doc(document_id))
    assert [document_id for document_id, _ in await store.iterate()] == [2, 5, 9]


async def test_oversized_insert_writes_nothing(db_manager):
    store = SqlDocumentStore(db_manager, max_record_bytes=256)
    doc = _doc(1, description="x" * 500)
    with pytest.raises(RecordTooLargeError):
        await store.insert(doc.id, doc)
    assert await store.iterate() == []


async def test_issuer_starts_at_one_and_increases(db_manager):
    issuer = SqlIdIssuer(db_manager)
    assert [await issuer.next_id() for _ in range(3)] == [1, 2, 3]


async def test_issuer_counters_are_independent(db_manager):
    first = SqlIdIssuer(db_manager, name="a")
    second = SqlIdIssuer(db_manager, name="b")
    await first.next_id()
    await first.next_id()
    assert await second.next_id() == 1


async def test_issuer_survives_restart(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'registry.db'}"
    manager = DatabaseSessionManager(url)
    await manager.create_all()
    issuer = SqlIdIssuer(manager)
    await issuer.next_id()
    await issuer.next_id()
    await manager.dispose()

    reopened = DatabaseSessionManager(url)
    try:
        assert await SqlIdIssuer(reopened).next_id() == 3
    finally:
        await reopened.dispose()


@pytest.fixture
def sql_service(db_manager):
    return DocumentService(
        store=SqlDocumentStore(db_manager),
        issuer=SqlIdIssuer(db_manager),
        clock=FakeClock(),
    )


async def test_service_on_sql_backend(sql_service):
    service = sql_service
    doc = await service.create(make_payload())
    await service.update(doc.id, make_payload(title="A2"))
    await service.soft_delete(doc.id)
    with pytest.raises(DocumentDeletedError):
        await service.get(doc.id)
    restored = await service.restore(doc.id)
    assert restored.version == 2
    assert (await service.get(doc.id)).title == "A2"


async def test_health_check(db_manager):
    assert await db_manager.health_check() is True


# --- ids past the BIGINT range ---------------------------------------

@pytest.mark.parametrize("document_id", [MAX_STORABLE_ID + 1, MAX_DOCUMENT_ID])
async def test_unstorable_id_is_absent(db_manager, document_id):
    store = SqlDocumentStore(db_manager)
    assert await store.get(DocumentId(document_id)) is None
    assert await store.remove(DocumentId(document_id)) is None


async def test_unstorable_id_raises_not_found(sql_service):
    document_id = DocumentId(MAX_DOCUMENT_ID)
    with pytest.raises(DocumentNotFoundError):
        await sql_service.get(document_id)
    with pytest.raises(DocumentNotFoundError):
        await sql_service.update(document_id, make_payload())
    with pytest.raises(DocumentNotFoundError):
        await sql_service.soft_delete(document_id)
    with pytest.raises(DocumentNotFoundError):
        await sql_service.restore(document_id)


async def test_unstorable_id_returns_404_over_http(sql_service):
    original = registry_module.document_service
    registry_module.document_service = sql_service
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        ) as client:
            response = await client.get(f"/api/v1/documents/{MAX_DOCUMENT_ID}")
    finally:
        registry_module.document_service = original

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


# --- concurrency -------------------------------------------------------

async def test_concurrent_updates_on_sql_backend_keep_history_dense(sql_service):
    doc = await sql_service.create(make_payload())
    await asyncio.gather(
        *(sql_service.update(doc.id, make_payload(title=f"t{i}")) for i in range(5)),
    )
    stored = await sql_service.get(doc.id)
    assert stored.version == 6
    assert history_is_consistent(stored)
