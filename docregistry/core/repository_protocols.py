"""Boundary Protocols - contracts between the core service and its storage shell.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - All IO (store, counter, clock) accessed through Protocol types
    - Implementations provided by the shell via constructor injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async store/issuer methods because durable implementations do IO;
      Clock stays sync (reading time never blocks)
"""

from datetime import datetime
from typing import Protocol

from docregistry.core.document import Document
from docregistry.core.domain_types import DocumentId


class DocumentStore(Protocol):
    """Key-value store keyed by DocumentId. insert/remove atomic per key."""
    async def get(self, document_id: DocumentId) -> Document | None: ...
    async def insert(self, document_id: DocumentId, document: Document) -> None: ...
    async def remove(self, document_id: DocumentId) -> Document | None: ...
    async def iterate(self) -> list[tuple[DocumentId, Document]]: ...


class IdIssuer(Protocol):
    """Durable counter. Each call returns a value above all previous ones."""
    async def next_id(self) -> DocumentId: ...


class Clock(Protocol):
    """Non-decreasing timestamps within a process lifetime."""
    def now(self) -> datetime: ...
