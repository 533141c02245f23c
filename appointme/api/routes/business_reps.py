"""Business representative API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends

from appointme.api.deps import AuthenticatedUser, Store, authorize_self, require_bearer
from appointme.api.validation import valid_user_id, validation_check
from appointme.schemas.business import BusinessEnvelope, BusinessResponse
from appointme.schemas.common import ErrorEnvelope
from appointme.services import business as business_service

router = APIRouter(
    prefix="/business-reps",
    tags=["business-reps"],
    responses={401: {"model": ErrorEnvelope}, 403: {"model": ErrorEnvelope}},
)


@router.get(
    "/business/{user_id}",
    response_model=BusinessEnvelope,
    dependencies=[Depends(require_bearer)],
    summary="Get the business a representative manages",
)
async def get_rep_business(
    user_id: Annotated[UUID, Depends(valid_user_id)],
    _: Annotated[None, Depends(validation_check)],
    rep: Annotated[AuthenticatedUser, Depends(authorize_self)],
    store: Store,
) -> BusinessEnvelope:
    business = await business_service.get_rep_business(store, user_id)
    return BusinessEnvelope(
        message="Business found",
        business=BusinessResponse.model_validate(business),
    )
