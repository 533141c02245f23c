"""Pydantic schemas for Business."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator

from appointme.schemas.common import Envelope


# Base schema with common fields
class BusinessBase(BaseModel):
    """Base business schema with common fields."""

    name: str = Field(..., min_length=1, max_length=100, description="Business name")
    email: EmailStr | None = Field(None, description="Public contact email")
    phone: str | None = Field(None, max_length=50)
    address: str | None = Field(None, max_length=255)
    description: str | None = Field(None, max_length=2000)
    website: str | None = Field(None, max_length=255)


# Schema for creating a business (during representative sign up)
class BusinessCreate(BusinessBase):
    """Schema for creating a new business."""

    model_config = ConfigDict(extra="forbid")


# Schema for updating a business
class BusinessUpdate(BaseModel):
    """Schema for updating a business (all fields optional)."""

    name: str | None = Field(None, min_length=1, max_length=100)
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=50)
    address: str | None = Field(None, max_length=255)
    description: str | None = Field(None, max_length=2000)
    website: str | None = Field(None, max_length=255)

    model_config = ConfigDict(extra="forbid")

    @field_validator("name", mode="before")
    @classmethod
    def reject_null_name(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("Business name cannot be null")
        return value

    @model_validator(mode="after")
    def require_any_field(self) -> "BusinessUpdate":
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided")
        return self


# Response schema
class BusinessResponse(BaseModel):
    """Schema for business responses."""

    id: UUID
    name: str
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    description: str | None = None
    website: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class BusinessEnvelope(Envelope):
    business: BusinessResponse
