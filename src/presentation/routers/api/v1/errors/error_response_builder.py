"""Error response builder for RFC 9457 Problem Details.

Exports:
    ErrorResponseBuilder: Build RFC 9457 responses from ApplicationError
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.config import settings
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

_STATUS_CODES: dict[ApplicationErrorCode, int] = {
    ApplicationErrorCode.COMMAND_VALIDATION_FAILED: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ApplicationErrorCode.COMMAND_EXECUTION_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ApplicationErrorCode.QUERY_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ApplicationErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ApplicationErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ApplicationErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ApplicationErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
}

_TITLES: dict[ApplicationErrorCode, str] = {
    ApplicationErrorCode.COMMAND_VALIDATION_FAILED: "Validation Failed",
    ApplicationErrorCode.COMMAND_EXECUTION_FAILED: "Command Execution Failed",
    ApplicationErrorCode.QUERY_FAILED: "Query Failed",
    ApplicationErrorCode.UNAUTHORIZED: "Authentication Required",
    ApplicationErrorCode.FORBIDDEN: "Access Denied",
    ApplicationErrorCode.NOT_FOUND: "Resource Not Found",
    ApplicationErrorCode.CONFLICT: "Resource Conflict",
}


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    Example:
        >>> response = ErrorResponseBuilder.from_application_error(
        ...     error=error,
        ...     request=request,
        ...     trace_id=get_trace_id() or "",
        ... )
    """

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
        trace_id: str,
    ) -> JSONResponse:
        """Convert ApplicationError to an RFC 9457 JSON response.

        Validation failures carrying a field get a one-entry ``errors`` list.
        """
        status_code = ErrorResponseBuilder.get_status_code(error.code)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=_TITLES.get(error.code, "Error"),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=None,
            trace_id=trace_id or None,
        )

        field = getattr(error.domain_error, "field", None)
        if error.domain_error is not None and field:
            problem.errors = [
                ErrorDetail(
                    field=field,
                    code=error.domain_error.code.value,
                    message=error.domain_error.message,
                )
            ]

        headers = (
            {"WWW-Authenticate": "Bearer"}
            if status_code == status.HTTP_401_UNAUTHORIZED
            else None
        )
        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
            headers=headers,
        )

    @staticmethod
    def get_status_code(code: ApplicationErrorCode) -> int:
        """Map application error code to HTTP status code (default 500)."""
        return _STATUS_CODES.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)
