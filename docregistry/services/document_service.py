"""Document Service - orchestrates the document lifecycle against the injected store, issuer and clock.

Invariants:
    - Every store-visiting operation runs under self._lock (read-modify-write is atomic)
    - Failed operations leave the stored document exactly as it was
    - create_batch is NOT atomic: documents created before the first failure stay committed
    - get hides soft-deleted documents; search does not
    - Ids come only from the issuer and are never reused

Design Decisions:
    - Pure transitions in core/document_lifecycle.py; this module only sequences IO around them
      (ADR: functional core, imperative shell)
    - Guarded error paths read with get() and write nothing, so there is nothing to put back
    - One asyncio.Lock per service instance: single-writer discipline without relying on
      single-threaded hosting; it does not span processes (one worker per database)
"""

import asyncio
import logging

from docregistry.core.document import Document, DocumentPayload
from docregistry.core.document_lifecycle import (
    apply_update, ensure_visible, mark_deleted, mark_restored,
    matches_query, new_document,
)
from docregistry.core.domain_types import DocumentId
from docregistry.core.enforce_payload import validate_payload
from docregistry.core.errors import (
    DocumentNotFoundError, RecordTooLargeError, RegistryError,
)
from docregistry.core.repository_protocols import Clock, DocumentStore, IdIssuer

logger = logging.getLogger(__name__)


class DocumentService:
    """Versioned document registry operations."""

    def __init__(self, store: DocumentStore, issuer: IdIssuer, clock: Clock):
        self.store = store
        self.issuer = issuer
        self.clock = clock
        self._lock = asyncio.Lock()

    def validate(self, payload: DocumentPayload) -> None:
        """Raise InvalidInputError if a required field is blank. No side effects."""
        validate_payload(payload)

    async def create(self, payload: DocumentPayload) -> Document:
        async with self._lock:
            return await self._create_locked(payload, "create")

    async def create_batch(self, payloads: list[DocumentPayload]) -> list[Document]:
        """Create each payload in order; stop at the first failure.

        Documents created before the failing payload are kept.
        """
        created: list[Document] = []
        async with self._lock:
            for index, payload in enumerate(payloads):
                created.append(await self._create_locked(
                    payload, "create_batch",
                    batch_index=index, batch_size=len(payloads),
                ))
        return created

    async def update(
        self, document_id: DocumentId, payload: DocumentPayload,
    ) -> Document:
        self._guard(lambda: validate_payload(payload), "update")
        async with self._lock:
            current = await self._require(document_id, "update")
            updated = self._guard(
                lambda: apply_update(current, payload, self.clock.now()),
                "update",
            )
            await self.store.insert(document_id, updated)
        logger.info(
            f"Document {document_id} updated to version {updated.version}",
            extra={
                "document_id": document_id, "version": updated.version,
                "operation": "update",
            },
        )
        return updated

    async def soft_delete(self, document_id: DocumentId) -> Document:
        async with self._lock:
            current = await self._require(document_id, "soft_delete")
            deleted = self._guard(lambda: mark_deleted(current), "soft_delete")
            await self.store.insert(document_id, deleted)
        logger.info(
            f"Document {document_id} soft-deleted",
            extra={"document_id": document_id, "operation": "soft_delete"},
        )
        return deleted

    async def restore(self, document_id: DocumentId) -> Document:
        async with self._lock:
            current = await self._require(document_id, "restore")
            restored = self._guard(lambda: mark_restored(current), "restore")
            await self.store.insert(document_id, restored)
        logger.info(
            f"Document {document_id} restored",
            extra={"document_id": document_id, "operation": "restore"},
        )
        return restored

    async def get(self, document_id: DocumentId) -> Document:
        async with self._lock:
            current = await self._require(document_id, "get")
        return self._guard(lambda: ensure_visible(current), "get")

    async def search(self, query: str) -> list[Document]:
        """Case-insensitive substring search over title/description, deleted included."""
        async with self._lock:
            entries = await self.store.iterate()
        return [document for _, document in entries if matches_query(document, query)]

    # --- internals -------------------------------------------------

    async def _create_locked(
        self, payload: DocumentPayload, operation: str, **log_extra,
    ) -> Document:
        self._guard(lambda: validate_payload(payload), operation, **log_extra)
        document_id = await self.issuer.next_id()
        document = new_document(document_id, payload, self.clock.now())
        try:
            await self.store.insert(document_id, document)
        except RecordTooLargeError as e:
            e.context.document_id = document_id
            e.context.operation = operation
            self._log_rejection(e, **log_extra)
            raise
        logger.info(
            f"Document {document_id} created",
            extra={
                "document_id": document_id, "version": document.version,
                "operation": operation, **log_extra,
            },
        )
        return document

    async def _require(self, document_id: DocumentId, operation: str) -> Document:
        document = await self.store.get(document_id)
        if document is None:
            error = DocumentNotFoundError(document_id)
            error.context.operation = operation
            self._log_rejection(error)
            raise error
        return document

    def _guard(self, transition, operation: str, **log_extra):
        """Run a pure check/transition, logging and re-raising domain rejections."""
        try:
            return transition()
        except RegistryError as e:
            e.context.operation = operation
            self._log_rejection(e, **log_extra)
            raise

    @staticmethod
    def _log_rejection(error: RegistryError, **log_extra) -> None:
        logger.warning(
            f"{error.context.operation} rejected: {error.message}",
            extra={
                "document_id": error.context.document_id,
                "error_code": error.code,
                "operation": error.context.operation,
                **log_extra,
            },
        )
