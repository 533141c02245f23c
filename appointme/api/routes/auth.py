"""Authentication API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from appointme.api.deps import Store
from appointme.api.validation import valid_body, valid_user_type, validation_check
from appointme.models import UserRole
from appointme.schemas.auth import (
    LoginEnvelope,
    LoginRequest,
    RefreshEnvelope,
    RefreshRequest,
    RegisterRequest,
    UserResponse,
)
from appointme.schemas.common import ErrorEnvelope
from appointme.services import auth as auth_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
    responses={400: {"model": ErrorEnvelope}, 401: {"model": ErrorEnvelope}},
)

UserType = Annotated[UserRole, Depends(valid_user_type)]
Validated = Annotated[None, Depends(validation_check)]

valid_login = valid_body(LoginRequest)
valid_register = valid_body(RegisterRequest)
valid_refresh = valid_body(RefreshRequest)


@router.post(
    "/login/{user_type}",
    response_model=LoginEnvelope,
    summary="Log in as a user or business representative",
)
async def login(
    user_type: UserType,
    credentials: Annotated[LoginRequest, Depends(valid_login)],
    _: Validated,
    store: Store,
) -> LoginEnvelope:
    """Check credentials and return access and refresh tokens."""
    user, access_token, refresh_token = await auth_service.login(
        store, user_type, credentials.email, credentials.password
    )
    return LoginEnvelope(
        message="Login successful",
        access_token=access_token,
        refresh_token=refresh_token,
        user=UserResponse.model_validate(user),
    )


@router.post(
    "/register/{user_type}",
    response_model=LoginEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create an account",
)
async def register(
    user_type: UserType,
    data: Annotated[RegisterRequest, Depends(valid_register)],
    _: Validated,
    store: Store,
) -> LoginEnvelope:
    """Sign up. Business representatives create their business at the same time."""
    user, access_token, refresh_token = await auth_service.register(store, user_type, data)
    return LoginEnvelope(
        message="Account created",
        access_token=access_token,
        refresh_token=refresh_token,
        user=UserResponse.model_validate(user),
    )


@router.post(
    "/refresh",
    response_model=RefreshEnvelope,
    summary="Get a new access token",
)
async def refresh(
    data: Annotated[RefreshRequest, Depends(valid_refresh)],
    _: Validated,
    store: Store,
) -> RefreshEnvelope:
    access_token = await auth_service.refresh(store, data.refresh_token)
    return RefreshEnvelope(message="Token refreshed", access_token=access_token)
