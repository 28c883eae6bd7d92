"""Error Hierarchy - typed, categorized exceptions for every registry failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable: the caller fixes input or state and retries
    - Infrastructure errors (500-level) are critical
    - Nothing in this module retries; errors surface to the caller as raised exceptions
    - to_response() produces the REST envelope used by the global error handler

Design Decisions:
    - Single hierarchy with RegistryError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: document_id/operation travel with the error into logs
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    STATE_CONFLICT = "state_conflict"
    STORAGE = "storage"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    document_id: int | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class RegistryError(Exception):
    """Base exception for all document registry errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "document_id": self.context.document_id,
                    "operation": self.context.operation,
                },
            }
        }


# --- Domain Errors (400-level) ------------------------------------

class InvalidInputError(RegistryError):
    """Payload failed validation."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class DocumentStateError(RegistryError):
    """Operation refused because of a document's presence or deleted flag.

    Subclasses set code, category, http_status and a message template
    formatted with the document id.
    """
    code: str = "DOCUMENT_STATE"
    category: ErrorCategory = ErrorCategory.STATE_CONFLICT
    http_status: int = 409
    template: str = "Document with id {document_id} is in an invalid state"

    def __init__(self, document_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.document_id = document_id
        super().__init__(
            self.template.format(document_id=document_id),
            self.code, self.category, ErrorSeverity.WARNING, ctx, self.http_status,
        )
        self.document_id = document_id


class DocumentNotFoundError(DocumentStateError):
    """Referenced document id is absent from the store."""
    code = "NOT_FOUND"
    category = ErrorCategory.RESOURCE_NOT_FOUND
    http_status = 404
    template = "Document with id {document_id} not found"


class DocumentDeletedError(DocumentStateError):
    """Operation blocked because the target document is soft-deleted."""
    code = "DOCUMENT_DELETED"
    http_status = 410
    template = "Document with id {document_id} is deleted"


class AlreadyDeletedError(DocumentStateError):
    code = "ALREADY_DELETED"
    template = "Document with id {document_id} is already deleted"


class NotDeletedError(DocumentStateError):
    code = "NOT_DELETED"
    template = "Document with id {document_id} is not deleted"


# --- Storage / Infrastructure Errors --------------------------------

class RecordTooLargeError(RegistryError):
    """Encoded document exceeds the store's maximum record size."""
    def __init__(self, size: int, limit: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {"size": size, "limit": limit}
        super().__init__(
            f"Encoded document is {size} bytes, limit is {limit}",
            "RECORD_TOO_LARGE", ErrorCategory.STORAGE,
            ErrorSeverity.ERROR, ctx, 413,
        )
        self.size = size
        self.limit = limit


class CorruptRecordError(RegistryError):
    """Stored bytes could not be decoded into a Document."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {"reason": message}
        super().__init__(
            f"Stored document could not be decoded: {message}",
            "CORRUPT_RECORD", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )


class DatabaseError(RegistryError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
