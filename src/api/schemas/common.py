"""Common Pydantic schemas shared across the API."""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standardized error response."""

    error_code: str
    msg: str
    details: Any | None = None


class FieldError(BaseModel):
    """One failed field check."""

    msg: str
    param: str
    location: str


class ValidationErrorResponse(ErrorResponse):
    """Body of a 400: failed field checks carry ``errors``, other rejections only ``msg``."""

    errors: list[FieldError] = Field(default_factory=list)


class MessageResponse(BaseModel):
    """Simple message response."""

    msg: str
