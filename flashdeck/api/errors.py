"""
API error handling and exception mapping.

Domain errors are translated to HTTP responses by their ``code``. Not-found
and forbidden responses share one message so callers cannot discover other
owners' ids.
"""

from datetime import datetime, timezone

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from flashdeck.api.schemas.base import ErrorResponse
from flashdeck.domain_core.exceptions import DomainError
from flashdeck.infra.config.logging_config import get_logger

logger = get_logger("api.errors")

STATUS_CODES = {
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CONFLICT": status.HTTP_409_CONFLICT,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "VALIDATION_ERROR": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "INTEGRITY_VIOLATION": status.HTTP_500_INTERNAL_SERVER_ERROR,
}

UNAVAILABLE_DETAIL = "Resource not found or not accessible"
INTERNAL_DETAIL = "An unexpected error occurred. Please try again later."


def _error(status_code: int, error: str, detail: str) -> JSONResponse:
    body = ErrorResponse(error=error, detail=detail, timestamp=datetime.now(timezone.utc))
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = STATUS_CODES.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    if status_code >= 500:
        logger.exception("error.domain", code=exc.code, error=exc.message, exc_info=exc)
        return _error(status_code, "INTERNAL_SERVER_ERROR", INTERNAL_DETAIL)

    logger.info("error.domain", code=exc.code, error=exc.message)
    if exc.code in ("NOT_FOUND", "FORBIDDEN"):
        return _error(status_code, exc.code, UNAVAILABLE_DETAIL)
    return _error(status_code, exc.code, exc.message)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Flatten pydantic errors into one readable detail string."""
    formatted_errors = []
    for error in exc.errors():
        location = " -> ".join(str(loc) for loc in error["loc"])
        formatted_errors.append(f"{location}: {error['msg']}")

    logger.info("error.validation", errors=formatted_errors)
    return _error(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "VALIDATION_ERROR",
        "Validation failed: " + "; ".join(formatted_errors),
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    response = _error(exc.status_code, f"HTTP_{exc.status_code}", str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("error.unhandled", error_type=type(exc).__name__, exc_info=exc)
    return _error(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_SERVER_ERROR", INTERNAL_DETAIL
    )


def setup_error_handlers(app) -> None:
    """
    Setup error handlers for the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
