"""Document Values - immutable Document, DocumentVersion and payload types.

Invariants:
    - len(history) == version, history[i].version == i + 1
    - Values are frozen; lifecycle transitions build new instances
"""

from dataclasses import dataclass, field
from datetime import datetime

from docregistry.core.domain_types import DocumentId


@dataclass(frozen=True)
class DocumentMetadata:
    """Who changed a document and why."""
    updated_by: str = ""
    change_summary: str = ""


@dataclass(frozen=True)
class DocumentPayload:
    """External input for create/update."""
    title: str
    description: str
    file_url: str
    metadata: DocumentMetadata = field(default_factory=DocumentMetadata)


@dataclass(frozen=True)
class DocumentVersion:
    """Snapshot of a document's mutable fields at one version."""
    version: int
    title: str
    description: str
    file_url: str
    metadata: DocumentMetadata
    updated_at: datetime


@dataclass(frozen=True)
class Document:
    id: DocumentId
    title: str
    description: str
    file_url: str
    version: int
    created_at: datetime
    updated_at: datetime | None = None
    is_deleted: bool = False
    history: tuple[DocumentVersion, ...] = ()
