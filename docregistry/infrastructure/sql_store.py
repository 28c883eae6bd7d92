"""SQL Store - durable DocumentStore and IdIssuer on the async SQLAlchemy session manager.

Invariants:
    - Every operation runs in its own session and commits before returning (per-key atomicity)
    - Bodies are encoded before the session opens: RecordTooLargeError never leaves a partial write
    - iterate() orders by id ascending
    - Ids above MAX_STORABLE_ID cannot be bound as BIGINT; lookups report them absent
    - SqlIdIssuer persists its counter row, so ids keep increasing across restarts

Design Decisions:
    - merge() for insert: upsert semantics without dialect-specific ON CONFLICT
    - Counter row locked with SELECT ... FOR UPDATE (no-op on SQLite, which serializes writers)
    - Document rows are not locked across read-modify-write; the service lock makes that
      atomic within one process only, so the SQL backend runs with a single worker
"""

import logging

from sqlalchemy import select

from docregistry.core.document import Document
from docregistry.core.document_codec import (
    DEFAULT_MAX_RECORD_BYTES, decode_document, encode_document,
)
from docregistry.core.domain_types import DocumentId
from docregistry.infrastructure.database import DatabaseSessionManager
from docregistry.models.document_record import MAX_STORABLE_ID, DocumentRecord
from docregistry.models.id_counter import IdCounter

logger = logging.getLogger(__name__)

DOCUMENT_COUNTER: str = "documents"


class SqlDocumentStore:
    """DocumentStore over the documents table."""

    def __init__(
        self,
        db: DatabaseSessionManager,
        max_record_bytes: int = DEFAULT_MAX_RECORD_BYTES,
    ):
        self._db = db
        self._max_record_bytes = max_record_bytes

    async def get(self, document_id: DocumentId) -> Document | None:
        if document_id > MAX_STORABLE_ID:
            return None
        async with self._db.session() as session:
            record = await session.get(DocumentRecord, document_id)
            return decode_document(record.body) if record else None

    async def insert(self, document_id: DocumentId, document: Document) -> None:
        body = encode_document(document, self._max_record_bytes)
        async with self._db.session() as session:
            await session.merge(DocumentRecord(
                id=document_id,
                body=body,
                is_deleted=document.is_deleted,
                updated_at=document.updated_at or document.created_at,
            ))
            await session.commit()

    async def remove(self, document_id: DocumentId) -> Document | None:
        if document_id > MAX_STORABLE_ID:
            return None
        async with self._db.session() as session:
            record = await session.get(DocumentRecord, document_id)
            if record is None:
                return None
            document = decode_document(record.body)
            await session.delete(record)
            await session.commit()
            return document

    async def iterate(self) -> list[tuple[DocumentId, Document]]:
        async with self._db.session() as session:
            result = await session.execute(
                select(DocumentRecord).order_by(DocumentRecord.id),
            )
            return [
                (DocumentId(record.id), decode_document(record.body))
                for record in result.scalars().all()
            ]


class SqlIdIssuer:
    """IdIssuer over a named row in id_counters."""

    def __init__(self, db: DatabaseSessionManager, name: str = DOCUMENT_COUNTER):
        self._db = db
        self._name = name

    async def next_id(self) -> DocumentId:
        async with self._db.session() as session:
            result = await session.execute(
                select(IdCounter)
                .where(IdCounter.name == self._name)
                .with_for_update(),
            )
            counter = result.scalar_one_or_none()
            if counter is None:
                counter = IdCounter(name=self._name, value=0)
                session.add(counter)
            counter.value += 1
            issued = counter.value
            await session.commit()
        logger.debug(f"Issued id {issued} from counter {self._name}")
        return DocumentId(issued)
