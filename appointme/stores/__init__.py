"""Data-access stores injected into the controllers."""

from appointme.stores.base import BookingStore
from appointme.stores.memory import InMemoryBookingStore
from appointme.stores.sql import SqlBookingStore

__all__ = ["BookingStore", "InMemoryBookingStore", "SqlBookingStore"]
