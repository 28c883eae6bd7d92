"""Document Codec - byte encoding / decoding for stored documents.

Invariants:
    - decode_document(encode_document(d)) == d for every well-formed Document
    - encode_document raises RecordTooLargeError past max_bytes (store record bound)
    - decode_document raises CorruptRecordError on malformed input, never returns partial data
    - Timestamps serialized as ISO-8601 with offset; Enums never appear in the payload

Design Decisions:
    - JSON over a binary format: readable in the database, stdlib only
    - Snapshot dict helpers separate from byte encoding: the dict is the stored JSON shape
"""

import json
from datetime import datetime

from docregistry.core.document import Document, DocumentMetadata, DocumentVersion
from docregistry.core.domain_types import DocumentId
from docregistry.core.errors import CorruptRecordError, RecordTooLargeError

DEFAULT_MAX_RECORD_BYTES: int = 1024 * 1024


def _metadata_to_dict(metadata: DocumentMetadata) -> dict:
    return {
        "updated_by": metadata.updated_by,
        "change_summary": metadata.change_summary,
    }


def _version_to_dict(entry: DocumentVersion) -> dict:
    return {
        "version": entry.version,
        "title": entry.title,
        "description": entry.description,
        "file_url": entry.file_url,
        "metadata": _metadata_to_dict(entry.metadata),
        "updated_at": entry.updated_at.isoformat(),
    }


def document_to_snapshot(document: Document) -> dict:
    """Serialize a Document to a JSON-safe dict. Pure, no IO."""
    return {
        "id": document.id,
        "title": document.title,
        "description": document.description,
        "file_url": document.file_url,
        "version": document.version,
        "created_at": document.created_at.isoformat(),
        "updated_at": (
            document.updated_at.isoformat() if document.updated_at else None
        ),
        "is_deleted": document.is_deleted,
        "history": [_version_to_dict(entry) for entry in document.history],
    }


def _version_from_dict(data: dict) -> DocumentVersion:
    metadata = data["metadata"]
    return DocumentVersion(
        version=int(data["version"]),
        title=data["title"],
        description=data["description"],
        file_url=data["file_url"],
        metadata=DocumentMetadata(
            updated_by=metadata["updated_by"],
            change_summary=metadata["change_summary"],
        ),
        updated_at=datetime.fromisoformat(data["updated_at"]),
    )


def document_from_snapshot(data: dict) -> Document:
    """Reconstruct a Document from document_to_snapshot output."""
    updated_at = data["updated_at"]
    return Document(
        id=DocumentId(int(data["id"])),
        title=data["title"],
        description=data["description"],
        file_url=data["file_url"],
        version=int(data["version"]),
        created_at=datetime.fromisoformat(data["created_at"]),
        updated_at=datetime.fromisoformat(updated_at) if updated_at else None,
        is_deleted=bool(data["is_deleted"]),
        history=tuple(_version_from_dict(entry) for entry in data["history"]),
    )


def encode_document(
    document: Document, max_bytes: int = DEFAULT_MAX_RECORD_BYTES,
) -> bytes:
    """Encode to UTF-8 JSON bytes, enforcing the record size bound."""
    raw = json.dumps(
        document_to_snapshot(document),
        ensure_ascii=False, separators=(",", ":"),
    ).encode("utf-8")
    if len(raw) > max_bytes:
        raise RecordTooLargeError(len(raw), max_bytes)
    return raw


def decode_document(raw: bytes) -> Document:
    try:
        data = json.loads(raw.decode("utf-8"))
        return document_from_snapshot(data)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise CorruptRecordError(str(e)) from e
    except (KeyError, TypeError, ValueError) as e:
        raise CorruptRecordError(f"missing or invalid field ({e})") from e
