"""ClientRelationship model - a user on a business's client roster."""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from appointme.models.base import Base, TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from appointme.models.business import Business
    from appointme.models.user import User


class ClientRelationship(Base, UUIDMixin, TimestampMixin):
    """Links a user to a business as one of its clients."""

    __tablename__ = "client_relationships"
    __table_args__ = (
        UniqueConstraint("business_id", "user_id", name="uq_client_business_user"),
    )

    business_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("businesses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)  # Business owner's notes

    # Relationships
    business: Mapped["Business"] = relationship("Business", back_populates="clients")
    user: Mapped["User"] = relationship("User", back_populates="client_of")

    def __repr__(self) -> str:
        """String representation."""
        return f"<ClientRelationship(business_id={self.business_id}, user_id={self.user_id})>"
