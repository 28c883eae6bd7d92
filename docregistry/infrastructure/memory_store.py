"""In-Memory Store - process-local DocumentStore and IdIssuer.

Invariants:
    - Documents held as codec bytes: callers never share a mutable reference with the store
    - iterate() yields ascending ids (stable order)
    - InMemoryIdIssuer starts at 1 and never repeats; state lost on restart

Design Decisions:
    - Used by tests and by store_backend="memory" for throwaway runs
      (ADR: same codec path as the SQL store, so round-trip bugs surface in fast tests)
"""

from docregistry.core.document import Document
from docregistry.core.document_codec import (
    DEFAULT_MAX_RECORD_BYTES, decode_document, encode_document,
)
from docregistry.core.domain_types import DocumentId


class InMemoryDocumentStore:
    """Dict-backed DocumentStore."""

    def __init__(self, max_record_bytes: int = DEFAULT_MAX_RECORD_BYTES):
        self._records: dict[DocumentId, bytes] = {}
        self._max_record_bytes = max_record_bytes

    async def get(self, document_id: DocumentId) -> Document | None:
        raw = self._records.get(document_id)
        return decode_document(raw) if raw is not None else None

    async def insert(self, document_id: DocumentId, document: Document) -> None:
        self._records[document_id] = encode_document(
            document, self._max_record_bytes,
        )

    async def remove(self, document_id: DocumentId) -> Document | None:
        raw = self._records.pop(document_id, None)
        return decode_document(raw) if raw is not None else None

    async def iterate(self) -> list[tuple[DocumentId, Document]]:
        return [
            (document_id, decode_document(self._records[document_id]))
            for document_id in sorted(self._records)
        ]

    def raw(self, document_id: DocumentId) -> bytes | None:
        """Test hook: stored bytes for a document, for byte-level equality checks."""
        return self._records.get(document_id)


class InMemoryIdIssuer:
    """Counter-backed IdIssuer."""

    def __init__(self, start_after: int = 0):
        self._last = start_after

    async def next_id(self) -> DocumentId:
        self._last += 1
        return DocumentId(self._last)
