"""Global exception handlers for FastAPI application.

Convert exceptions that escape route handlers into RFC 9457 Problem
Details responses.

Handlers:
    http_exception_handler: HTTPException (401/403 from auth dependencies)
    validation_exception_handler: RequestValidationError -> 422 with field errors
    integrity_error_handler: unique constraint races -> 409
    generic_exception_handler: everything else -> 500, logged

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from src.core.config import settings
from src.core.container import get_logger
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# HTTP status code to (title, slug) mapping for RFC 9457
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    401: ("Authentication Required", "unauthorized"),
    403: ("Access Denied", "forbidden"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    409: ("Resource Conflict", "conflict"),
    422: ("Validation Failed", "validation-failed"),
    500: ("Internal Server Error", "internal-server-error"),
    503: ("Service Unavailable", "service-unavailable"),
}


def _problem(
    request: Request,
    status_code: int,
    detail: str,
    errors: list[ErrorDetail] | None = None,
) -> ProblemDetails:
    title, slug = _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))
    return ProblemDetails(
        type=f"{settings.api_base_url}/errors/{slug}",
        title=title,
        status=status_code,
        detail=detail,
        instance=str(request.url.path),
        errors=errors,
        trace_id=getattr(request.state, "trace_id", None),
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert HTTPException to RFC 9457 Problem Details response.

    Headers on the exception (``WWW-Authenticate``) are preserved.
    """
    assert isinstance(exc, HTTPException)

    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    problem = _problem(request, exc.status_code, detail)

    return JSONResponse(
        status_code=exc.status_code,
        content=problem.model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Convert RequestValidationError to 422 with one ErrorDetail per field."""
    assert isinstance(exc, RequestValidationError)

    field_errors: list[ErrorDetail] = []
    for error in exc.errors():
        # ["body", "email"] -> "email"
        field_parts = [str(p) for p in error.get("loc", []) if p != "body"]
        field_errors.append(
            ErrorDetail(
                field=".".join(field_parts) if field_parts else "unknown",
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )

    problem = _problem(
        request,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Request validation failed. Check 'errors' for details.",
        field_errors or None,
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=problem.model_dump(exclude_none=True),
    )


async def integrity_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Map a unique/foreign key violation that slipped past handler checks to 409.

    Handlers check uniqueness first; this only fires when two requests
    race for the same email or name.
    """
    get_logger().warning(
        "integrity_conflict",
        path=request.url.path,
        error_type=type(exc).__name__,
    )
    problem = _problem(
        request,
        status.HTTP_409_CONFLICT,
        "The request conflicts with existing data",
    )
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=problem.model_dump(exclude_none=True),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions without leaking internals to the client."""
    get_logger().error(
        "unhandled_exception",
        error=exc,
        path=request.url.path,
        method=request.method,
        trace_id=getattr(request.state, "trace_id", None),
    )
    problem = _problem(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred. Please contact support with the trace ID.",
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=problem.model_dump(exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application."""
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
