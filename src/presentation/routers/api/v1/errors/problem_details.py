"""RFC 9457 Problem Details for HTTP APIs.

Pydantic models for structured error responses.

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 9457 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Examples:
        >>> error = ErrorDetail(
        ...     field="email",
        ...     code="email_already_exists",
        ...     message="Email already exists",
        ... )
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence
        errors: Optional list of field-specific errors (for validation failures)
        trace_id: Optional request trace ID for debugging

    Examples:
        >>> problem = ProblemDetails(
        ...     type="http://localhost:8000/errors/forbidden",
        ...     title="Access Denied",
        ...     status=403,
        ...     detail="Permission 'user edit' required",
        ...     instance="/api/v1/settings/users",
        ... )
    """

    type: str = Field(..., description="URI reference identifying the problem type")
    title: str = Field(..., description="Short, human-readable summary")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Human-readable explanation")
    instance: str = Field(..., description="URI reference identifying this occurrence")
    errors: list[ErrorDetail] | None = Field(
        None, description="List of field-specific errors"
    )
    trace_id: str | None = Field(None, description="Request trace ID for debugging")
