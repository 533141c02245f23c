"""Pydantic schemas for Service."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from appointme.schemas.common import Envelope


# Schema for creating a service
class ServiceCreate(BaseModel):
    """Schema for creating a new service."""

    name: str = Field(..., min_length=1, max_length=100, description="Service name")
    description: str | None = Field(None, max_length=1000, description="Service description")
    duration: int = Field(..., gt=0, le=1440, description="Appointment length in minutes")
    break_minutes: int = Field(
        0, ge=0, le=1440, alias="break", description="Break after each appointment, minutes"
    )
    fee: float = Field(..., ge=0, description="Appointment fee")

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


# Schema for updating a service
class ServiceUpdate(BaseModel):
    """Schema for updating a service (all fields optional)."""

    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = Field(None, max_length=1000)
    duration: int | None = Field(None, gt=0, le=1440)
    break_minutes: int | None = Field(None, ge=0, le=1440, alias="break")
    fee: float | None = Field(None, ge=0)

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    @field_validator("name", "duration", "break_minutes", "fee", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("Field cannot be null")
        return value

    @model_validator(mode="after")
    def require_any_field(self) -> "ServiceUpdate":
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided")
        return self


# Response schema
class ServiceResponse(BaseModel):
    """Schema for service responses."""

    id: UUID
    business_id: UUID
    name: str
    description: str | None = None
    duration: int
    break_minutes: int = Field(
        validation_alias=AliasChoices("break_minutes", "break"),
        serialization_alias="break",
    )
    fee: float
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ServiceListEnvelope(Envelope):
    services: list[ServiceResponse]


class ServiceEnvelope(Envelope):
    service: ServiceResponse
