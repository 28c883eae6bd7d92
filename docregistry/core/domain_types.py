"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - DocumentId wraps int and lives in 1 .. MAX_DOCUMENT_ID (unsigned 64-bit)
    - Payload field names encoded as an Enum, never raw strings

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# --- Identity Types ------------------------------------------------

DocumentId = NewType("DocumentId", int)

MIN_DOCUMENT_ID: int = 1
MAX_DOCUMENT_ID: int = 2**64 - 1


# --- Enums ---------------------------------------------------------

class PayloadField(str, Enum):
    """Payload fields that must be non-blank, in validation order."""
    TITLE = "title"
    DESCRIPTION = "description"
    FILE_URL = "file_url"
    CHANGE_SUMMARY = "metadata.change_summary"
