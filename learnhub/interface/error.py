"""Interface layer errors and their HTTP mapping.

Every error response uses the envelope ``{"success": false, "message": ...}``.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from learnhub.domain.error import (
    ContentDeletedException,
    DomainError,
    EditWindowExpiredError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)

DOMAIN_STATUS: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (EditWindowExpiredError, status.HTTP_403_FORBIDDEN),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ContentDeletedException, status.HTTP_400_BAD_REQUEST),
]


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build an error envelope."""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
    )


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error."""
    for error_type, status_code in DOMAIN_STATUS:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    logfire.warn(
        "Request rejected",
        path=request.url.path,
        error_type=type(exc).__name__,
        status_code=status_code,
        error=str(exc),
    )
    return error_response(status_code, str(exc))


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    # Malformed ids and invalid field values raised below the schema layer
    logfire.warn("Invalid request value", path=request.url.path, error=str(exc))
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def handle_http_exception(request: Request, exc: HTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in errors
    )
    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY, message or "Invalid request"
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
    )


def register_error_handlers(app: FastAPI) -> None:
    """Map domain and request errors onto the error envelope."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(ValueError, handle_value_error)
    app.add_exception_handler(HTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(Exception, handle_unexpected_error)
