"""Data-access interface used by the controllers.

Controllers receive a ``BookingStore`` instead of talking to the database
directly, so the same logic runs against PostgreSQL in production and an
in-memory store in tests or local demos.
"""

from typing import Any, Protocol
from uuid import UUID

from appointme.models import Business, ClientRelationship, Service, User


class BookingStore(Protocol):
    """Persistence operations for businesses, services, users and clients."""

    # Businesses
    async def get_business(self, business_id: UUID) -> Business | None: ...

    async def create_business(self, data: dict[str, Any]) -> Business: ...

    async def update_business(self, business: Business, changes: dict[str, Any]) -> Business: ...

    # Services
    async def list_services(self, business_id: UUID) -> list[Service]: ...

    async def get_service(self, business_id: UUID, service_id: UUID) -> Service | None: ...

    async def create_service(self, business_id: UUID, data: dict[str, Any]) -> Service: ...

    async def update_service(self, service: Service, changes: dict[str, Any]) -> Service: ...

    async def delete_service(self, service: Service) -> None: ...

    # Users
    async def get_user(self, user_id: UUID) -> User | None: ...

    async def get_user_by_email(self, email: str) -> User | None: ...

    async def create_user(self, data: dict[str, Any]) -> User: ...

    # Client roster
    async def list_clients(self, business_id: UUID) -> list[ClientRelationship]: ...

    async def get_client(self, business_id: UUID, user_id: UUID) -> ClientRelationship | None: ...

    async def add_client(
        self, business_id: UUID, user: User, notes: str | None = None
    ) -> ClientRelationship: ...

    async def commit(self) -> None: ...
