"""Document Codec - tests for encode/decode of stored documents.

Invariants:
    - decode(encode(d)) == d for fresh, updated, deleted and unicode documents
    - encode enforces the size bound
    - decode rejects malformed bytes with CorruptRecordError
"""

import json
from datetime import timedelta, timezone, datetime

import pytest

from docregistry.core.document_codec import (
    decode_document, document_to_snapshot, encode_document,
)
from docregistry.core.document_lifecycle import (
    apply_update, mark_deleted, new_document,
)
from docregistry.core.domain_types import DocumentId, MAX_DOCUMENT_ID
from docregistry.core.errors import CorruptRecordError, RecordTooLargeError
from tests.fakes import EPOCH, make_payload


def test_roundtrip_fresh_document():
    doc = new_document(DocumentId(1), make_payload(), EPOCH)
    assert decode_document(encode_document(doc)) == doc


def test_roundtrip_updated_deleted_document():
    doc = new_document(DocumentId(42), make_payload(), EPOCH)
    doc = apply_update(doc, make_payload(title="A2"), EPOCH + timedelta(hours=1))
    doc = mark_deleted(doc)
    restored = decode_document(encode_document(doc))
    assert restored == doc
    assert restored.updated_at == EPOCH + timedelta(hours=1)
    assert restored.history[1].title == "A2"


def test_roundtrip_preserves_unicode_microseconds_and_offset():
    at = datetime(2026, 3, 4, 5, 6, 7, 891011, tzinfo=timezone(timedelta(hours=3)))
    payload = make_payload(title="Отчёт 報告", description="naïve ✓", updated_by="zoë")
    doc = new_document(DocumentId(MAX_DOCUMENT_ID), payload, at)
    restored = decode_document(encode_document(doc))
    assert restored == doc
    assert restored.created_at.utcoffset() == timedelta(hours=3)


def test_snapshot_is_json_safe():
    doc = new_document(DocumentId(1), make_payload(), EPOCH)
    snapshot = document_to_snapshot(doc)
    assert json.loads(json.dumps(snapshot)) == snapshot
    assert snapshot["updated_at"] is None
    assert snapshot["history"][0]["metadata"] == {
        "updated_by": "x", "change_summary": "init",
    }


def test_encode_rejects_oversized_record():
    doc = new_document(DocumentId(1), make_payload(description="x" * 500), EPOCH)
    with pytest.raises(RecordTooLargeError) as exc_info:
        encode_document(doc, max_bytes=256)
    assert exc_info.value.limit == 256
    assert exc_info.value.size > 256
    assert exc_info.value.http_status == 413


@pytest.mark.parametrize(
    "raw",
    [
        b"not json",
        b"\xff\xfe",
        b"{}",
        b'{"id": 1}',
        b"[]",
    ],
)
def test_decode_rejects_malformed_bytes(raw):
    with pytest.raises(CorruptRecordError):
        decode_document(raw)
