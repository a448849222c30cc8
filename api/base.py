"""Response envelope shared by every endpoint."""

from typing import Any
from datetime import datetime
from uuid import uuid4

from fastapi import Request
from pydantic import BaseModel, Field

from utils.dates import now_utc


class APIError(BaseModel):
    """Error details in API response."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    field: str | None = Field(None, description="Input field the error refers to, if any")


class APIMeta(BaseModel):
    """Metadata included in every API response."""

    timestamp: datetime = Field(..., description="Response timestamp (UTC)")
    request_id: str = Field(..., description="Matches the X-Request-ID response header")


class APIResponse(BaseModel):
    """
    Envelope for all API responses.

    Exactly one of data and error is meaningful, selected by success.
    """

    success: bool
    data: Any | None = None
    error: APIError | None = None
    meta: APIMeta


def request_id_of(request: Request | None) -> str:
    """Request ID assigned by RequestIDMiddleware, or a fresh one outside a request."""
    if request is not None:
        request_id = getattr(request.state, "request_id", None)
        if request_id:
            return request_id
    return str(uuid4())


def _meta(request: Request | None) -> APIMeta:
    return APIMeta(timestamp=now_utc(), request_id=request_id_of(request))


def success_response(data: Any, request: Request | None = None) -> dict:
    """JSON-ready success envelope."""
    return APIResponse(
        success=True,
        data=data,
        meta=_meta(request),
    ).model_dump(mode="json")


def error_response(
    code: str,
    message: str,
    request: Request | None = None,
    field: str | None = None,
) -> dict:
    """JSON-ready error envelope."""
    return APIResponse(
        success=False,
        error=APIError(code=code, message=message, field=field),
        meta=_meta(request),
    ).model_dump(mode="json")


class ErrorCodes:
    """Standard error codes for consistent error handling."""

    # Resource Errors
    NOT_FOUND = "NOT_FOUND"

    # Validation Errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"

    # Pricing
    INVALID_SERVICE_CONFIGURATION = "INVALID_SERVICE_CONFIGURATION"
    PREVIEW_EDIT_FAILED = "PREVIEW_EDIT_FAILED"

    # Proposal
    PROPOSAL_NOT_EDITABLE = "PROPOSAL_NOT_EDITABLE"

    # Infrastructure
    INTERNAL_ERROR = "INTERNAL_ERROR"
