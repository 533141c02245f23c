"""Business logic for AppointMe.

Every function takes a ``BookingStore`` as its first argument and raises
``appointme.exceptions`` errors instead of building responses.
"""

__all__ = [
    "auth",
    "business",
    "catalog",
    "clients",
]
