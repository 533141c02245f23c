"""Auth service - login, sign up and token refresh."""

import logging

from appointme.exceptions import Conflict, FieldError, Unauthenticated, ValidationFailed
from appointme.models import User, UserRole
from appointme.schemas.auth import RegisterRequest
from appointme.stores import BookingStore
from appointme.utils.jwt import REFRESH, create_access_token, create_refresh_token, decode_token
from appointme.utils.passwords import hash_password, verify_password

logger = logging.getLogger(__name__)


def issue_tokens(user: User) -> tuple[str, str]:
    """Return (access_token, refresh_token) for a user."""
    return (
        create_access_token(user.id, user.role, user.business_id),
        create_refresh_token(user.id, user.role, user.business_id),
    )


async def login(
    store: BookingStore, user_type: UserRole, email: str, password: str
) -> tuple[User, str, str]:
    """Check credentials for the given account type.

    Returns (user, access_token, refresh_token). The same error is raised
    for an unknown email, a wrong password and a wrong account type so
    callers cannot probe which accounts exist.
    """
    user = await store.get_user_by_email(email)
    if (
        user is None
        or user.role != user_type.value
        or not verify_password(password, user.password_hash)
    ):
        logger.warning(f"Failed {user_type.value} login for {email}")
        raise Unauthenticated("Invalid email or password")

    access_token, refresh_token = issue_tokens(user)
    logger.info(f"User {user.id} logged in as {user_type.value}")
    return user, access_token, refresh_token


async def register(
    store: BookingStore, user_type: UserRole, data: RegisterRequest
) -> tuple[User, str, str]:
    """Create an account; representatives get their business created too.

    A temporary client record with the same email is upgraded to a full
    account instead of being rejected.
    """
    if user_type is UserRole.BUSINESS_REP and data.business is None:
        raise ValidationFailed(
            [FieldError("business", "Business details are required for business accounts")]
        )

    existing = await store.get_user_by_email(data.email)
    if existing is not None and not (existing.is_temporary and user_type is UserRole.USER):
        raise Conflict("An account with this email already exists")

    if existing is not None:
        user = existing
        user.fname = data.fname
        user.lname = data.lname
        user.phone = data.phone or user.phone
        user.password_hash = hash_password(data.password)
        user.is_temporary = False
    else:
        business_id = None
        if user_type is UserRole.BUSINESS_REP:
            business = await store.create_business(data.business.model_dump())
            business_id = business.id
        user = await store.create_user(
            {
                "fname": data.fname,
                "lname": data.lname,
                "email": data.email,
                "phone": data.phone,
                "password_hash": hash_password(data.password),
                "role": user_type.value,
                "business_id": business_id,
            }
        )
    await store.commit()
    logger.info(f"Registered {user_type.value} {user.id}")

    access_token, refresh_token = issue_tokens(user)
    return user, access_token, refresh_token


async def refresh(store: BookingStore, refresh_token: str) -> str:
    """Exchange a refresh token for a new access token."""
    payload = decode_token(refresh_token, expected_type=REFRESH)
    user_id = payload.user_id if payload else None
    user = await store.get_user(user_id) if user_id else None
    if user is None:
        raise Unauthenticated("Invalid or expired refresh token")
    return create_access_token(user.id, user.role, user.business_id)
