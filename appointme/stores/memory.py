"""In-memory implementation of the booking store.

Model instances are plain transient ORM objects; nothing is shared with a
database session. Used for local demos (``STORE_BACKEND=memory``) and as
the test double for the API.
"""

import logging
from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4

from appointme.models import Business, ClientRelationship, Service, User

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryBookingStore:
    """Booking store that keeps everything in dictionaries."""

    def __init__(self) -> None:
        self.businesses: dict[UUID, Business] = {}
        self.services: dict[UUID, Service] = {}
        self.users: dict[UUID, User] = {}
        self.clients: dict[UUID, ClientRelationship] = {}
        self.commits = 0

    def _touch(self, record: Any) -> None:
        record.updated_at = _now()

    async def get_business(self, business_id: UUID) -> Business | None:
        return self.businesses.get(business_id)

    async def create_business(self, data: dict[str, Any]) -> Business:
        now = _now()
        business = Business(id=uuid4(), created_at=now, updated_at=now, **data)
        self.businesses[business.id] = business
        return business

    async def update_business(self, business: Business, changes: dict[str, Any]) -> Business:
        for key, value in changes.items():
            setattr(business, key, value)
        self._touch(business)
        return business

    async def list_services(self, business_id: UUID) -> list[Service]:
        return [s for s in self.services.values() if s.business_id == business_id]

    async def get_service(self, business_id: UUID, service_id: UUID) -> Service | None:
        service = self.services.get(service_id)
        if service is None or service.business_id != business_id:
            return None
        return service

    async def create_service(self, business_id: UUID, data: dict[str, Any]) -> Service:
        now = _now()
        data = {"break_minutes": 0, **data}
        service = Service(
            id=uuid4(), business_id=business_id, created_at=now, updated_at=now, **data
        )
        self.services[service.id] = service
        return service

    async def update_service(self, service: Service, changes: dict[str, Any]) -> Service:
        for key, value in changes.items():
            setattr(service, key, value)
        self._touch(service)
        return service

    async def delete_service(self, service: Service) -> None:
        self.services.pop(service.id, None)

    async def get_user(self, user_id: UUID) -> User | None:
        return self.users.get(user_id)

    async def get_user_by_email(self, email: str) -> User | None:
        email = email.lower()
        for user in self.users.values():
            if user.email == email:
                return user
        return None

    async def create_user(self, data: dict[str, Any]) -> User:
        now = _now()
        data = {"role": "user", "is_temporary": False, **data, "email": data["email"].lower()}
        user = User(id=uuid4(), created_at=now, updated_at=now, **data)
        self.users[user.id] = user
        return user

    async def list_clients(self, business_id: UUID) -> list[ClientRelationship]:
        return [c for c in self.clients.values() if c.business_id == business_id]

    async def get_client(self, business_id: UUID, user_id: UUID) -> ClientRelationship | None:
        for client in self.clients.values():
            if client.business_id == business_id and client.user_id == user_id:
                return client
        return None

    async def add_client(
        self, business_id: UUID, user: User, notes: str | None = None
    ) -> ClientRelationship:
        now = _now()
        client = ClientRelationship(
            id=uuid4(),
            business_id=business_id,
            user_id=user.id,
            notes=notes,
            created_at=now,
            updated_at=now,
        )
        client.user = user
        self.clients[client.id] = client
        return client

    async def commit(self) -> None:
        self.commits += 1
        logger.debug(f"In-memory store commit #{self.commits}")
