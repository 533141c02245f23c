"""Pydantic schemas for the client roster."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from appointme.schemas.common import Envelope


class ClientCreate(BaseModel):
    """A client added by the business ("temporary" user until they sign up)."""

    fname: str = Field(..., min_length=1, max_length=100)
    lname: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: str | None = Field(None, max_length=50)
    notes: str | None = Field(None, max_length=2000)

    model_config = ConfigDict(extra="forbid")


class ClientUserSummary(BaseModel):
    """The user profile embedded in a roster entry."""

    id: UUID
    fname: str
    lname: str
    email: str
    phone: str | None = None
    is_temporary: bool = False

    model_config = ConfigDict(from_attributes=True)


class ClientResponse(BaseModel):
    """One roster entry: user profile plus relationship metadata."""

    id: UUID
    business_id: UUID
    user: ClientUserSummary
    notes: str | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ClientListEnvelope(Envelope):
    clients: list[ClientResponse]


class ClientEnvelope(Envelope):
    client: ClientResponse
