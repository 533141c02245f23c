"""Python client for the AppointMe API and the page logic built on it."""

from appointme.client.api import ApiError, AppointMeClient
from appointme.client.pages import (
    Banner,
    ClientListPage,
    ClientRow,
    LoginPage,
    ServiceCard,
    ServicesPage,
)
from appointme.client.session import SessionStore
from appointme.client.storage import TokenStorage

__all__ = [
    "ApiError",
    "AppointMeClient",
    "Banner",
    "ClientListPage",
    "ClientRow",
    "LoginPage",
    "ServiceCard",
    "ServicesPage",
    "SessionStore",
    "TokenStorage",
]
