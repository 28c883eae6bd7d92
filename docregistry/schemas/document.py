"""Document Schemas - request bodies and responses for the documents API.

Invariants:
    - DocumentPayloadIn.to_domain() is the only conversion from HTTP input to DocumentPayload
    - DocumentResponse.from_domain() exposes every Document field, history included
"""

from datetime import datetime

from pydantic import BaseModel, Field

from docregistry.core.document import (
    Document, DocumentMetadata, DocumentPayload, DocumentVersion,
)


class DocumentMetadataIn(BaseModel):
    """Who is changing the document and why."""
    updated_by: str = ""
    change_summary: str


class DocumentPayloadIn(BaseModel):
    """Create/update request body."""
    title: str
    description: str
    file_url: str
    metadata: DocumentMetadataIn

    def to_domain(self) -> DocumentPayload:
        return DocumentPayload(
            title=self.title,
            description=self.description,
            file_url=self.file_url,
            metadata=DocumentMetadata(
                updated_by=self.metadata.updated_by,
                change_summary=self.metadata.change_summary,
            ),
        )


class DocumentBatchIn(BaseModel):
    documents: list[DocumentPayloadIn] = Field(min_length=1)


class DocumentMetadataOut(BaseModel):
    updated_by: str
    change_summary: str


class DocumentVersionResponse(BaseModel):
    version: int
    title: str
    description: str
    file_url: str
    metadata: DocumentMetadataOut
    updated_at: datetime

    @classmethod
    def from_domain(cls, entry: DocumentVersion) -> "DocumentVersionResponse":
        return cls(
            version=entry.version,
            title=entry.title,
            description=entry.description,
            file_url=entry.file_url,
            metadata=DocumentMetadataOut(
                updated_by=entry.metadata.updated_by,
                change_summary=entry.metadata.change_summary,
            ),
            updated_at=entry.updated_at,
        )


class DocumentResponse(BaseModel):
    """Document response - current fields plus full history."""
    id: int
    title: str
    description: str
    file_url: str
    version: int
    created_at: datetime
    updated_at: datetime | None
    is_deleted: bool
    history: list[DocumentVersionResponse]

    @classmethod
    def from_domain(cls, document: Document) -> "DocumentResponse":
        return cls(
            id=document.id,
            title=document.title,
            description=document.description,
            file_url=document.file_url,
            version=document.version,
            created_at=document.created_at,
            updated_at=document.updated_at,
            is_deleted=document.is_deleted,
            history=[
                DocumentVersionResponse.from_domain(entry)
                for entry in document.history
            ],
        )
