"""Business service - profile lookups and updates."""

import logging
from uuid import UUID

from appointme.exceptions import Forbidden, NotFound
from appointme.models import Business, UserRole
from appointme.schemas.business import BusinessUpdate
from appointme.stores import BookingStore

logger = logging.getLogger(__name__)


async def get_business(store: BookingStore, business_id: UUID) -> Business:
    """Get business by ID or raise NotFound."""
    business = await store.get_business(business_id)
    if business is None:
        raise NotFound(f"Business {business_id} not found")
    return business


async def update_business(
    store: BookingStore, business_id: UUID, business_data: BusinessUpdate
) -> Business:
    """Apply a partial update to a business profile."""
    business = await get_business(store, business_id)
    business = await store.update_business(
        business, business_data.model_dump(exclude_unset=True)
    )
    await store.commit()
    logger.info(f"Updated business {business_id}: {sorted(business_data.model_fields_set)}")
    return business


async def get_rep_business(store: BookingStore, user_id: UUID) -> Business:
    """Get the business a representative manages."""
    user = await store.get_user(user_id)
    if user is None:
        raise NotFound(f"User {user_id} not found")
    if user.role != UserRole.BUSINESS_REP.value:
        raise Forbidden("User is not a business representative")
    if user.business_id is None:
        raise NotFound(f"No business found for user {user_id}")
    return await get_business(store, user.business_id)
