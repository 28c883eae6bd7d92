"""Document Lifecycle - pure state transitions for create/update/soft-delete/restore.

Invariants:
    - Every function is PURE: it takes a Document and returns a new one, or raises
    - new_document starts at version 1 with exactly one history snapshot
    - apply_update appends exactly one snapshot and bumps version by exactly one
    - Deleted documents reject apply_update (DocumentDeletedError)
    - mark_deleted / mark_restored enforce the Active <-> Deleted state machine

Design Decisions:
    - Service owns IO (store, issuer, clock); this module only decides
      (ADR: functional core, imperative shell)
    - Timestamps passed in, never read here: deterministic tests without clock mocks
"""

from dataclasses import replace
from datetime import datetime

from docregistry.core.document import Document, DocumentPayload, DocumentVersion
from docregistry.core.domain_types import DocumentId
from docregistry.core.errors import (
    AlreadyDeletedError, DocumentDeletedError, NotDeletedError,
)


def snapshot_payload(
    payload: DocumentPayload, version: int, at: datetime,
) -> DocumentVersion:
    """Freeze a payload into a DocumentVersion."""
    return DocumentVersion(
        version=version,
        title=payload.title,
        description=payload.description,
        file_url=payload.file_url,
        metadata=payload.metadata,
        updated_at=at,
    )


def new_document(
    document_id: DocumentId, payload: DocumentPayload, now: datetime,
) -> Document:
    """Build a fresh, active, version-1 document from a validated payload."""
    return Document(
        id=document_id,
        title=payload.title,
        description=payload.description,
        file_url=payload.file_url,
        version=1,
        created_at=now,
        updated_at=None,
        is_deleted=False,
        history=(snapshot_payload(payload, 1, now),),
    )


def apply_update(
    document: Document, payload: DocumentPayload, now: datetime,
) -> Document:
    """Return the next version of an active document."""
    if document.is_deleted:
        raise DocumentDeletedError(document.id)
    next_version = document.version + 1
    return replace(
        document,
        title=payload.title,
        description=payload.description,
        file_url=payload.file_url,
        version=next_version,
        updated_at=now,
        history=document.history + (snapshot_payload(payload, next_version, now),),
    )


def mark_deleted(document: Document) -> Document:
    if document.is_deleted:
        raise AlreadyDeletedError(document.id)
    return replace(document, is_deleted=True)


def mark_restored(document: Document) -> Document:
    if not document.is_deleted:
        raise NotDeletedError(document.id)
    return replace(document, is_deleted=False)


def ensure_visible(document: Document) -> Document:
    """Plain retrieval hides soft-deleted documents."""
    if document.is_deleted:
        raise DocumentDeletedError(document.id)
    return document


def matches_query(document: Document, query: str) -> bool:
    """Case-insensitive substring match on title or description."""
    needle = query.casefold()
    return (
        needle in document.title.casefold()
        or needle in document.description.casefold()
    )

