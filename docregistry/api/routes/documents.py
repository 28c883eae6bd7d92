"""Document Routes - HTTP surface for every DocumentService operation.

Invariants:
    - Routes never contain lifecycle logic: they convert schemas and delegate to DocumentService
    - RegistryError propagates to the global handler (api/error_handlers.py) for the error envelope
    - /search is registered before /{document_id} so it is not parsed as an id
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from docregistry.core.domain_types import (
    DocumentId, MAX_DOCUMENT_ID, MIN_DOCUMENT_ID,
)
from docregistry.schemas.document import (
    DocumentBatchIn, DocumentPayloadIn, DocumentResponse,
)
from docregistry.services.document_service import DocumentService
from docregistry.services.service_registry import get_document_service

router = APIRouter(prefix="/api/v1/documents", tags=["documents"])

DocumentIdPath = Annotated[int, Path(ge=MIN_DOCUMENT_ID, le=MAX_DOCUMENT_ID)]


@router.post(
    "", response_model=DocumentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_document(
    body: DocumentPayloadIn,
    service: DocumentService = Depends(get_document_service),
):
    """Create a document at version 1."""
    document = await service.create(body.to_domain())
    return DocumentResponse.from_domain(document)


@router.post(
    "/batch", response_model=list[DocumentResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_documents(
    body: DocumentBatchIn,
    service: DocumentService = Depends(get_document_service),
):
    """Create several documents in order. Stops at the first invalid payload;
    documents created before it are kept."""
    documents = await service.create_batch(
        [payload.to_domain() for payload in body.documents],
    )
    return [DocumentResponse.from_domain(d) for d in documents]


@router.get("/search", response_model=list[DocumentResponse])
async def search_documents(
    query: str = Query(...),
    service: DocumentService = Depends(get_document_service),
):
    """Case-insensitive title/description search. Includes soft-deleted documents."""
    documents = await service.search(query)
    return [DocumentResponse.from_domain(d) for d in documents]


@router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(
    document_id: DocumentIdPath,
    service: DocumentService = Depends(get_document_service),
):
    document = await service.get(DocumentId(document_id))
    return DocumentResponse.from_domain(document)


@router.put("/{document_id}", response_model=DocumentResponse)
async def update_document(
    document_id: DocumentIdPath,
    body: DocumentPayloadIn,
    service: DocumentService = Depends(get_document_service),
):
    """Append a new version. Rejected while the document is deleted."""
    document = await service.update(DocumentId(document_id), body.to_domain())
    return DocumentResponse.from_domain(document)


@router.delete("/{document_id}", response_model=DocumentResponse)
async def soft_delete_document(
    document_id: DocumentIdPath,
    service: DocumentService = Depends(get_document_service),
):
    """Soft delete: the document stays stored and can be restored."""
    document = await service.soft_delete(DocumentId(document_id))
    return DocumentResponse.from_domain(document)


@router.post("/{document_id}/restore", response_model=DocumentResponse)
async def restore_document(
    document_id: DocumentIdPath,
    service: DocumentService = Depends(get_document_service),
):
    document = await service.restore(DocumentId(document_id))
    return DocumentResponse.from_domain(document)
