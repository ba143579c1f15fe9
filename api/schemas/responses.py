"""Envelopes shared by every v1 response."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ErrorDetail(BaseModel):
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    field: str | None = Field(None, description="Request parameter that failed validation")
    details: dict[str, Any] | None = Field(None, description="Additional error details")


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""

    error: ErrorDetail


class ListMeta(BaseModel):
    total: int = Field(..., description="Number of items in data")


class SuccessResponse(BaseModel, Generic[T]):
    """Body of every 2xx v1 response; ``meta`` is set for list payloads."""

    data: T
    meta: ListMeta | None = None
