"""Service model - a bookable offering of a business."""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from appointme.models.base import Base, TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from appointme.models.business import Business


class Service(Base, UUIDMixin, TimestampMixin):
    """What the business offers (e.g., '1:1 Maths tutoring')."""

    __tablename__ = "services"

    business_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("businesses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)  # minutes
    # "break" is reserved in Python; the API field keeps the original name
    break_minutes: Mapped[int] = mapped_column("break", Integer, nullable=False, default=0)
    fee: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)

    # Relationships
    business: Mapped["Business"] = relationship("Business", back_populates="services")

    @property
    def total_minutes(self) -> int:
        """Time blocked in the calendar for one appointment."""
        return self.duration + (self.break_minutes or 0)

    def __repr__(self) -> str:
        """String representation."""
        return f"<Service(id={self.id}, name='{self.name}', fee={self.fee})>"
