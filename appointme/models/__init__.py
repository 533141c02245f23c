"""SQLAlchemy models for AppointMe."""

from appointme.models.base import Base, TimestampMixin, UUIDMixin
from appointme.models.business import Business
from appointme.models.client import ClientRelationship
from appointme.models.service import Service
from appointme.models.user import User, UserRole

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Models
    "Business",
    "Service",
    "User",
    "ClientRelationship",
    # Enums
    "UserRole",
]
