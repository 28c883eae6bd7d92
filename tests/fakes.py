"""Test doubles shared across test packages."""

from datetime import datetime, timedelta, timezone

from docregistry.core.document import Document, DocumentMetadata, DocumentPayload

EPOCH = datetime(2026, 1, 1, tzinfo=timezone.utc)


class FakeClock:
    """Deterministic clock: each now() is one second after the previous."""

    def __init__(self, start: datetime = EPOCH, step: timedelta = timedelta(seconds=1)):
        self._next = start
        self._step = step
        self.readings: list[datetime] = []

    def now(self) -> datetime:
        current = self._next
        self._next = current + self._step
        self.readings.append(current)
        return current


def make_payload(
    title: str = "A",
    description: str = "B",
    file_url: str = "u",
    updated_by: str = "x",
    change_summary: str = "init",
) -> DocumentPayload:
    return DocumentPayload(
        title=title,
        description=description,
        file_url=file_url,
        metadata=DocumentMetadata(
            updated_by=updated_by, change_summary=change_summary,
        ),
    )


def payload_json(**overrides) -> dict:
    """Request body for the documents API."""
    body = {
        "title": "A",
        "description": "B",
        "file_url": "u",
        "metadata": {"updated_by": "x", "change_summary": "init"},
    }
    body.update(overrides)
    return body


def history_is_consistent(document: Document) -> bool:
    """True when history is dense, ordered and as long as version."""
    if len(document.history) != document.version:
        return False
    return all(
        entry.version == index + 1
        for index, entry in enumerate(document.history)
    )
