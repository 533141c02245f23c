"""Catalog service - the services a business offers."""

import logging
from uuid import UUID

from appointme.exceptions import NotFound
from appointme.models import Service
from appointme.schemas.service import ServiceCreate, ServiceUpdate
from appointme.services.business import get_business
from appointme.stores import BookingStore

logger = logging.getLogger(__name__)


async def get_business_services(store: BookingStore, business_id: UUID) -> list[Service]:
    """All services of a business; empty list if it has none."""
    await get_business(store, business_id)
    return await store.list_services(business_id)


async def create_business_service(
    store: BookingStore, business_id: UUID, service_data: ServiceCreate
) -> Service:
    """Add a service to an existing business."""
    await get_business(store, business_id)
    service = await store.create_service(business_id, service_data.model_dump())
    await store.commit()
    logger.info(f"Created service {service.id} ('{service.name}') for business {business_id}")
    return service


async def get_business_service(
    store: BookingStore, business_id: UUID, service_id: UUID
) -> Service:
    """Look a service up by (business, service) or raise NotFound."""
    service = await store.get_service(business_id, service_id)
    if service is None:
        # Distinguish a missing business from a missing service for the caller
        await get_business(store, business_id)
        raise NotFound(f"Service {service_id} not found")
    return service


async def update_business_service(
    store: BookingStore,
    business_id: UUID,
    service_id: UUID,
    service_data: ServiceUpdate,
) -> Service:
    service = await get_business_service(store, business_id, service_id)
    service = await store.update_service(service, service_data.model_dump(exclude_unset=True))
    await store.commit()
    logger.info(f"Updated service {service_id} for business {business_id}")
    return service


async def delete_business_service(
    store: BookingStore, business_id: UUID, service_id: UUID
) -> None:
    service = await get_business_service(store, business_id, service_id)
    await store.delete_service(service)
    await store.commit()
    logger.info(f"Deleted service {service_id} from business {business_id}")
