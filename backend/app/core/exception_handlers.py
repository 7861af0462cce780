from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.errors import (
    ClientInputError,
    EmployeeApiError,
    EmployeeNotFoundError,
    UpstreamRateLimitedError,
    UpstreamServerError,
)
from app.models.error import ErrorResponse

logger = logging.getLogger(__name__)


def error_response(
    request: Request,
    status_code: int,
    message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        message=message,
        path=request.url.path,
        timestamp=datetime.now(timezone.utc),
        code=status_code,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"), headers=headers)


async def handle_employee_api_error(request: Request, exc: EmployeeApiError) -> JSONResponse:
    path = request.url.path
    headers: dict[str, str] | None = None

    if isinstance(exc, (ClientInputError, EmployeeNotFoundError)):
        logger.info("Request rejected: path=%s status=%d message=%s", path, exc.status_code, exc.message)
    elif isinstance(exc, UpstreamRateLimitedError):
        logger.warning("Rate limited: path=%s", path)
        headers = {"Retry-After": exc.retry_after or str(settings.RATE_LIMIT_RETRY_AFTER_SECONDS)}
    elif isinstance(exc, UpstreamServerError):
        logger.error("Upstream server error: path=%s message=%s", path, exc.message)
    else:
        logger.warning("Upstream failure: path=%s status=%d message=%s", path, exc.status_code, exc.message)

    return error_response(request, exc.status_code, exc.message, headers)


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Validation failed: path=%s errors=%d", request.url.path, len(exc.errors()))
    return error_response(request, status.HTTP_400_BAD_REQUEST, "Invalid request")


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        logger.info("No route found: path=%s", request.url.path)
        return error_response(request, exc.status_code, "Not Found")
    return error_response(request, exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error: path=%s", request.url.path)
    return error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EmployeeApiError, handle_employee_api_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected)
