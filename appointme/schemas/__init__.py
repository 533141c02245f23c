"""Pydantic schemas for the AppointMe API."""

from appointme.schemas.auth import (
    LoginEnvelope,
    LoginRequest,
    RefreshEnvelope,
    RefreshRequest,
    RegisterRequest,
    UserResponse,
)
from appointme.schemas.business import (
    BusinessCreate,
    BusinessEnvelope,
    BusinessResponse,
    BusinessUpdate,
)
from appointme.schemas.client import (
    ClientCreate,
    ClientEnvelope,
    ClientListEnvelope,
    ClientResponse,
)
from appointme.schemas.common import Envelope, ErrorEnvelope
from appointme.schemas.service import (
    ServiceCreate,
    ServiceEnvelope,
    ServiceListEnvelope,
    ServiceResponse,
    ServiceUpdate,
)

__all__ = [
    "BusinessCreate",
    "BusinessEnvelope",
    "BusinessResponse",
    "BusinessUpdate",
    "ClientCreate",
    "ClientEnvelope",
    "ClientListEnvelope",
    "ClientResponse",
    "Envelope",
    "ErrorEnvelope",
    "LoginEnvelope",
    "LoginRequest",
    "RefreshEnvelope",
    "RefreshRequest",
    "RegisterRequest",
    "ServiceCreate",
    "ServiceEnvelope",
    "ServiceListEnvelope",
    "ServiceResponse",
    "ServiceUpdate",
    "UserResponse",
]
