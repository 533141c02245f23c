"""Business model - a company that offers services and keeps a client roster."""

from typing import TYPE_CHECKING

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from appointme.models.base import Base, TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from appointme.models.client import ClientRelationship
    from appointme.models.service import Service
    from appointme.models.user import User


class Business(Base, UUIDMixin, TimestampMixin):
    """The business entity (e.g., 'Bright Minds Tutoring')."""

    __tablename__ = "businesses"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    website: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Relationships
    services: Mapped[list["Service"]] = relationship(
        "Service", back_populates="business", cascade="all, delete-orphan"
    )
    reps: Mapped[list["User"]] = relationship("User", back_populates="business")
    clients: Mapped[list["ClientRelationship"]] = relationship(
        "ClientRelationship", back_populates="business", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Business(id={self.id}, name='{self.name}')>"
