"""Pydantic schemas for Authentication."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from appointme.schemas.business import BusinessCreate
from appointme.schemas.common import Envelope
from appointme.utils.passwords import password_problem


class LoginRequest(BaseModel):
    """Credentials for ``POST /auth/login/{userType}``."""

    email: EmailStr = Field(..., description="Account email")
    password: str = Field(..., min_length=1, description="Account password")

    model_config = ConfigDict(extra="forbid")


class RegisterRequest(BaseModel):
    """Sign up payload. Business representatives also describe their business."""

    fname: str = Field(..., min_length=1, max_length=100)
    lname: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str
    phone: str | None = Field(None, max_length=50)
    business: BusinessCreate | None = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("password")
    @classmethod
    def strong_password(cls, value: str) -> str:
        problem = password_problem(value)
        if problem:
            raise ValueError(problem)
        return value


class RefreshRequest(BaseModel):
    """Exchange a refresh token for a new access token."""

    refresh_token: str = Field(..., min_length=1, alias="refreshToken")

    model_config = ConfigDict(extra="forbid")


class UserResponse(BaseModel):
    """Public view of a user."""

    id: UUID
    fname: str
    lname: str
    email: str
    phone: str | None = None
    role: str
    business_id: UUID | None = None

    model_config = ConfigDict(from_attributes=True)


class LoginEnvelope(Envelope):
    """Tokens plus the logged in user."""

    access_token: str = Field(..., alias="accessToken")
    refresh_token: str = Field(..., alias="refreshToken")
    user: UserResponse

    model_config = ConfigDict(populate_by_name=True)


class RefreshEnvelope(Envelope):
    access_token: str = Field(..., alias="accessToken")

    model_config = ConfigDict(populate_by_name=True)
