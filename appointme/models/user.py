"""User model - clients and business representatives."""

import uuid
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from appointme.models.base import Base, TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from appointme.models.business import Business
    from appointme.models.client import ClientRelationship


class UserRole(str, Enum):
    """User role enum. Values double as the login ``userType`` path segment."""

    USER = "user"
    BUSINESS_REP = "businessRep"


class User(Base, UUIDMixin, TimestampMixin):
    """Anyone who can log in, plus temporary clients created by a business."""

    __tablename__ = "users"

    fname: Mapped[str] = mapped_column(String(100), nullable=False)
    lname: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    password_hash: Mapped[str | None] = mapped_column(
        String(128), nullable=True
    )  # None for temporary clients that never logged in
    role: Mapped[str] = mapped_column(
        String(20), nullable=False, default=UserRole.USER.value
    )
    business_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), ForeignKey("businesses.id", ondelete="SET NULL"), nullable=True
    )  # Only set for business representatives
    is_temporary: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Relationships
    business: Mapped["Business | None"] = relationship("Business", back_populates="reps")
    client_of: Mapped[list["ClientRelationship"]] = relationship(
        "ClientRelationship", back_populates="user", cascade="all, delete-orphan"
    )

    @property
    def full_name(self) -> str:
        return f"{self.fname} {self.lname}"

    def __repr__(self) -> str:
        """String representation."""
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
