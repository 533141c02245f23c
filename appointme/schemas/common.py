"""Response envelope shared by every endpoint."""

from pydantic import BaseModel, Field


class Envelope(BaseModel):
    """``{status, message}`` wrapper; subclasses add the payload keys."""

    status: str = Field(default="success", description="success, fail or error")
    message: str = Field(..., description="Human readable outcome")


class FieldErrorResponse(BaseModel):
    field: str
    message: str


class ErrorEnvelope(Envelope):
    """Shape of error responses (documentation only)."""

    status: str = "fail"
    errors: list[FieldErrorResponse] | None = None
