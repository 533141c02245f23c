"""Dependency injection for API endpoints.

Protected routes compose these in a fixed order:

    bearer header present -> input validators -> validation_check
    -> require_login -> require_roles -> authorize_business -> controller

FastAPI resolves a route's ``dependencies=[...]`` first and then the
endpoint parameters left to right, and ``require_login`` itself depends on
``validation_check``; a malformed request therefore never reaches token
verification or the store lookups of the ownership check.
"""

import logging
from collections.abc import AsyncGenerator, Awaitable, Callable
from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from appointme.api.validation import (
    valid_business_id,
    valid_user_id,
    validation_check,
)
from appointme.config import get_settings
from appointme.database import get_db
from appointme.exceptions import Forbidden, Unauthenticated
from appointme.models import UserRole
from appointme.stores import BookingStore, SqlBookingStore
from appointme.utils.jwt import decode_token

__all__ = [
    "AuthenticatedUser",
    "Store",
    "authorize_business",
    "authorize_self",
    "get_store",
    "require_bearer",
    "require_business_rep",
    "require_login",
    "require_roles",
]

logger = logging.getLogger(__name__)

# Bearer token security scheme
bearer_scheme = HTTPBearer(auto_error=False)


# Store dependency
async def get_store(request: Request) -> AsyncGenerator[BookingStore, None]:
    """Booking store for this request (one DB session, or the shared memory store)."""
    settings = get_settings()
    if settings.store_backend == "memory":
        yield request.app.state.memory_store
        return

    async for session in get_db():
        yield SqlBookingStore(session)


Store = Annotated[BookingStore, Depends(get_store)]


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity decoded from the access token."""

    id: UUID
    role: str
    business_id: UUID | None = None


async def require_bearer(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> HTTPAuthorizationCredentials:
    """Reject requests without an ``Authorization: Bearer`` header."""
    if credentials is None:
        raise Unauthenticated("Not authenticated")
    return credentials


async def require_login(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(require_bearer)],
    _validated: Annotated[None, Depends(validation_check)],
) -> AuthenticatedUser:
    """Verify the access token and return the caller's identity."""
    payload = decode_token(credentials.credentials)
    user_id = payload.user_id if payload else None
    if payload is None or user_id is None:
        logger.warning("Rejected invalid or expired access token")
        raise Unauthenticated("Invalid or expired token")

    business_id = None
    if payload.business_id:
        try:
            business_id = UUID(payload.business_id)
        except ValueError:
            raise Unauthenticated("Invalid or expired token") from None

    return AuthenticatedUser(id=user_id, role=payload.role, business_id=business_id)


def require_roles(*roles: UserRole) -> Callable[..., Awaitable[AuthenticatedUser]]:
    """Build a dependency that only lets the given roles through."""
    allowed = {role.value for role in roles}

    async def dependency(
        user: Annotated[AuthenticatedUser, Depends(require_login)],
    ) -> AuthenticatedUser:
        if user.role not in allowed:
            logger.warning(f"User {user.id} with role {user.role} denied, needs {sorted(allowed)}")
            raise Forbidden("You do not have permission to perform this action")
        return user

    dependency.__name__ = f"require_roles_{'_'.join(sorted(allowed))}"
    return dependency


require_business_rep = require_roles(UserRole.BUSINESS_REP)


async def authorize_business(
    business_id: Annotated[UUID, Depends(valid_business_id)],
    user: Annotated[AuthenticatedUser, Depends(require_business_rep)],
    store: Store,
) -> AuthenticatedUser:
    """Require the caller to represent the business in the path.

    The representative is re-read from the store so a token issued before
    the rep changed business does not keep its old access.
    """
    rep = await store.get_user(user.id)
    if rep is None or rep.business_id != business_id:
        logger.warning(f"User {user.id} denied access to business {business_id}")
        raise Forbidden("Not authorized for this business")
    return user


async def authorize_self(
    user_id: Annotated[UUID, Depends(valid_user_id)],
    user: Annotated[AuthenticatedUser, Depends(require_business_rep)],
) -> AuthenticatedUser:
    """Require the caller to be the user in the path."""
    if user.id != user_id:
        raise Forbidden("Not authorized for this user")
    return user
