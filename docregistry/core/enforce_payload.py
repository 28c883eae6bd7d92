"""Payload Enforcement - rejects create/update payloads with blank required fields.

Invariants:
    - validate_payload is PURE: raises or returns None, never mutates the payload
    - Fields checked in PayloadField order; the first blank one is reported
    - Blank means empty after str.strip(); stored values are NOT stripped
"""

from docregistry.core.document import DocumentPayload
from docregistry.core.domain_types import PayloadField
from docregistry.core.errors import InvalidInputError

_MESSAGES: dict[PayloadField, str] = {
    PayloadField.TITLE: "Title cannot be empty",
    PayloadField.DESCRIPTION: "Description cannot be empty",
    PayloadField.FILE_URL: "File URL cannot be empty",
    PayloadField.CHANGE_SUMMARY: "Change summary cannot be empty",
}


def _field_values(payload: DocumentPayload) -> dict[PayloadField, str]:
    return {
        PayloadField.TITLE: payload.title,
        PayloadField.DESCRIPTION: payload.description,
        PayloadField.FILE_URL: payload.file_url,
        PayloadField.CHANGE_SUMMARY: payload.metadata.change_summary,
    }


def validate_payload(payload: DocumentPayload) -> None:
    """Raise InvalidInputError for the first blank required field."""
    for field_name, value in _field_values(payload).items():
        if not value.strip():
            raise InvalidInputError(_MESSAGES[field_name], field_name.value)
