"""Error Handlers - global exception handlers for the registry API.

Invariants:
    - RegistryError -> its own http_status and to_response() envelope
    - RequestValidationError -> 400 with one detail entry per offending field
    - Exception (catch-all) -> 500, never leaks internal details
    - 4xx outcomes log at WARNING, 5xx at ERROR
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from docregistry.core.errors import ErrorCategory, ErrorSeverity, RegistryError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Attach the three handler layers: domain, validation, catch-all."""
    app.add_exception_handler(RegistryError, handle_registry_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


async def handle_registry_error(request: Request, exc: RegistryError) -> JSONResponse:
    logger.log(
        logging.ERROR if exc.http_status >= 500 else logging.WARNING,
        f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "document_id": exc.context.document_id,
            "operation": exc.context.operation,
            "debug_info": exc.context.debug_info,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]
    logger.warning(
        f"Malformed request on {request.url.path}: {len(details)} field error(s)",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return _envelope(
        status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR", "Invalid request data",
        ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details=details,
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all: the client only ever sees a generic message."""
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"path": request.url.path},
    )
    return _envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR",
        "An unexpected error occurred",
        ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
    )


def _envelope(
    status_code: int,
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    details: list[dict] | None = None,
) -> JSONResponse:
    error: dict = {
        "code": code,
        "message": message,
        "category": category.value,
        "severity": severity.value,
    }
    if details is not None:
        error["details"] = details
    return JSONResponse(status_code=status_code, content={"error": error})
