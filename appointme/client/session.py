"""Session state shared by the pages of one client."""

from typing import Any


class SessionStore:
    """Who is logged in, passed explicitly to every page that needs it."""

    def __init__(self) -> None:
        self.user: dict[str, Any] | None = None
        self.user_type: str | None = None

    @property
    def logged_in(self) -> bool:
        return self.user is not None

    @property
    def business(self) -> dict[str, Any] | None:
        """The managed business, for representatives."""
        return self.user.get("business") if self.user else None

    def login(self, user: dict[str, Any], user_type: str) -> None:
        self.user = user
        self.user_type = user_type

    def logout(self) -> None:
        self.user = None
        self.user_type = None
