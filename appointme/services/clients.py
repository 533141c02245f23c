"""Clients service - the roster of users a business works with."""

import logging
from uuid import UUID

from appointme.exceptions import Conflict
from appointme.models import ClientRelationship, UserRole
from appointme.schemas.client import ClientCreate
from appointme.services.business import get_business
from appointme.stores import BookingStore

logger = logging.getLogger(__name__)


async def get_client_list(store: BookingStore, business_id: UUID) -> list[ClientRelationship]:
    """Roster entries (user profile + relationship) for a business."""
    await get_business(store, business_id)
    return await store.list_clients(business_id)


async def add_client(
    store: BookingStore, business_id: UUID, client_data: ClientCreate
) -> ClientRelationship:
    """Add a client to the roster.

    An existing account with the same email is reused; otherwise a
    temporary user without a password is created so the business can book
    on the client's behalf before they sign up.
    """
    await get_business(store, business_id)

    user = await store.get_user_by_email(client_data.email)
    if user is None:
        user = await store.create_user(
            {
                "fname": client_data.fname,
                "lname": client_data.lname,
                "email": client_data.email,
                "phone": client_data.phone,
                "role": UserRole.USER.value,
                "is_temporary": True,
            }
        )
        logger.info(f"Created temporary user {user.id} for business {business_id}")
    elif await store.get_client(business_id, user.id) is not None:
        raise Conflict(f"{client_data.email} is already a client of this business")

    client = await store.add_client(business_id, user, notes=client_data.notes)
    await store.commit()
    logger.info(f"Added user {user.id} to client list of business {business_id}")
    return client
