"""SQLAlchemy implementation of the booking store."""

from typing import Any
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from appointme.models import Business, ClientRelationship, Service, User


class SqlBookingStore:
    """Booking store backed by one request-scoped ``AsyncSession``."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_business(self, business_id: UUID) -> Business | None:
        """Get business by ID."""
        result = await self.db.execute(select(Business).where(Business.id == business_id))
        return result.scalar_one_or_none()

    async def create_business(self, data: dict[str, Any]) -> Business:
        business = Business(**data)
        self.db.add(business)
        await self.db.flush()
        await self.db.refresh(business)
        return business

    async def update_business(self, business: Business, changes: dict[str, Any]) -> Business:
        for key, value in changes.items():
            setattr(business, key, value)
        await self.db.flush()
        await self.db.refresh(business)
        return business

    async def list_services(self, business_id: UUID) -> list[Service]:
        """List services for a business, oldest first."""
        result = await self.db.execute(
            select(Service)
            .where(Service.business_id == business_id)
            .order_by(Service.created_at, Service.name)
        )
        return list(result.scalars().all())

    async def get_service(self, business_id: UUID, service_id: UUID) -> Service | None:
        """Get service by ID, scoped to business."""
        result = await self.db.execute(
            select(Service).where(
                Service.id == service_id,
                Service.business_id == business_id,
            )
        )
        return result.scalar_one_or_none()

    async def create_service(self, business_id: UUID, data: dict[str, Any]) -> Service:
        service = Service(business_id=business_id, **data)
        self.db.add(service)
        await self.db.flush()
        await self.db.refresh(service)
        return service

    async def update_service(self, service: Service, changes: dict[str, Any]) -> Service:
        for key, value in changes.items():
            setattr(service, key, value)
        await self.db.flush()
        await self.db.refresh(service)
        return service

    async def delete_service(self, service: Service) -> None:
        await self.db.delete(service)
        await self.db.flush()

    async def get_user(self, user_id: UUID) -> User | None:
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_user_by_email(self, email: str) -> User | None:
        """Case-insensitive lookup by email."""
        result = await self.db.execute(
            select(User).where(func.lower(User.email) == email.lower())
        )
        return result.scalar_one_or_none()

    async def create_user(self, data: dict[str, Any]) -> User:
        user = User(**{**data, "email": data["email"].lower()})
        self.db.add(user)
        await self.db.flush()
        await self.db.refresh(user)
        return user

    async def list_clients(self, business_id: UUID) -> list[ClientRelationship]:
        """Roster for a business with user profiles loaded."""
        result = await self.db.execute(
            select(ClientRelationship)
            .options(selectinload(ClientRelationship.user))
            .where(ClientRelationship.business_id == business_id)
            .order_by(ClientRelationship.created_at)
        )
        return list(result.scalars().all())

    async def get_client(self, business_id: UUID, user_id: UUID) -> ClientRelationship | None:
        result = await self.db.execute(
            select(ClientRelationship)
            .options(selectinload(ClientRelationship.user))
            .where(
                ClientRelationship.business_id == business_id,
                ClientRelationship.user_id == user_id,
            )
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def add_client(
        self, business_id: UUID, user: User, notes: str | None = None
    ) -> ClientRelationship:
        relationship = ClientRelationship(business_id=business_id, user_id=user.id, notes=notes)
        self.db.add(relationship)
        await self.db.flush()
        # Server defaults and the user profile
        await self.db.refresh(relationship)
        await self.db.refresh(relationship, ["user"])
        return relationship

    async def commit(self) -> None:
        await self.db.commit()
