"""Page logic for login, the services listing and the client list.

Each page holds the state a view renders: a loading flag, an optional
banner and the fetched data. Fetches run as asyncio tasks; ``close()``
cancels every one in flight and any result that would have arrived later is
dropped instead of being written into a page nobody is looking at.
"""

import asyncio
import logging
from collections.abc import Awaitable
from dataclasses import dataclass, field
from typing import Any, TypeVar
from urllib.parse import quote

import httpx

from appointme.client.api import ApiError, AppointMeClient
from appointme.client.forms import login_form_errors
from appointme.client.session import SessionStore
from appointme.client.storage import ACCESS_TOKEN, REFRESH_TOKEN, TokenStorage
from appointme.exceptions import UpstreamFailure

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PageClosed(Exception):
    """The page was closed while a fetch was running."""


@dataclass
class Banner:
    """A dismissible message shown at the top of a page."""

    status: str
    message: str
    severity: str  # "success" or "error"


class Page:
    """Loading flag, banner and cancellable fetches shared by all pages."""

    def __init__(self) -> None:
        self.banner: Banner | None = None
        self.closed = False
        self._tasks: set[asyncio.Task] = set()

    @property
    def is_loading(self) -> bool:
        """True while at least one fetch is in flight."""
        return bool(self._tasks)

    async def _fetch(self, request: Awaitable[T]) -> T:
        """Run one request as a task the page can cancel.

        Raises PageClosed if the page is closed before the result can be
        used, whether the task was cancelled or had already finished.
        """
        if self.closed:
            if asyncio.iscoroutine(request):
                request.close()
            raise PageClosed()
        task = asyncio.ensure_future(request)
        self._tasks.add(task)
        try:
            result = await task
        except asyncio.CancelledError:
            if self.closed:
                raise PageClosed() from None
            raise
        finally:
            self._tasks.discard(task)
        if self.closed:
            raise PageClosed()
        return result

    def show_error(self, status: str | None, message: str) -> None:
        self.banner = Banner(status=status or "error", message=message, severity="error")

    def dismiss_banner(self) -> None:
        self.banner = None

    def close(self) -> None:
        """Stop every fetch in flight; later results are ignored."""
        self.closed = True
        for task in list(self._tasks):
            task.cancel()
        self._tasks.clear()


class LoginPage(Page):
    """Email/password login for users and business representatives."""

    def __init__(self, api: AppointMeClient, session: SessionStore, storage: TokenStorage):
        super().__init__()
        self.api = api
        self.session = session
        self.storage = storage
        self.field_errors: dict[str, str] = {}
        self.redirect_to: str | None = None

    async def submit(self, email: str, password: str, user_type: str = "user") -> str | None:
        """Log in and return the path to redirect to, or None on failure."""
        self.field_errors = login_form_errors(email, password)
        if self.field_errors:
            return None

        try:
            data = await self._fetch(self.api.login(user_type, email, password))
        except PageClosed:
            return None
        except ApiError as e:
            logger.info(f"Login failed: {e.message}")
            self.show_error(e.status, e.message)
            return None
        except httpx.HTTPError as e:
            self.show_error("error", f"Could not reach the server: {e}")
            return None

        try:
            user = await self._start_session(data, user_type)
        except PageClosed:
            self._clear_tokens()
            return None
        except (UpstreamFailure, OSError) as e:
            logger.error(f"Error finishing login: {e}")
            self._clear_tokens()
            self.show_error("error", f"Error setting up your session: {e}")
            return None

        self.session.login(user, user_type)
        self.banner = Banner(status=data["status"], message=data["message"], severity="success")
        self.redirect_to = "/home"
        return self.redirect_to

    def _clear_tokens(self) -> None:
        self.storage.remove_item(ACCESS_TOKEN)
        self.storage.remove_item(REFRESH_TOKEN)

    async def _start_session(self, data: dict[str, Any], user_type: str) -> dict[str, Any]:
        """Persist tokens and, for representatives, attach their business."""
        self.storage.set_item(ACCESS_TOKEN, data["accessToken"])
        self.storage.set_item(REFRESH_TOKEN, data["refreshToken"])

        user = dict(data["user"])
        if user_type == "businessRep":
            try:
                business_data = await self._fetch(self.api.get_rep_business(user["id"]))
            except (ApiError, httpx.HTTPError) as e:
                raise UpstreamFailure(getattr(e, "message", str(e))) from e
            user["business"] = business_data["business"]
        return user


@dataclass
class ServiceCard:
    """What the services page shows for one service."""

    id: str
    title: str
    description: str | None
    total_minutes: int
    fee: float
    link_href: str
    link_text: str

    @property
    def duration_label(self) -> str:
        return f"Appointment Duration: {self.total_minutes} minute class"

    @property
    def fee_label(self) -> str:
        return f"Appointment Fee: ${self.fee:g}"

    @classmethod
    def from_api(cls, service: dict[str, Any], business_id: str, logged_in: bool) -> "ServiceCard":
        return cls(
            id=service["id"],
            title=service["name"],
            description=service.get("description"),
            total_minutes=service["duration"] + service.get("break", 0),
            fee=service["fee"],
            link_href=(
                f"/business-profile/appointments/{business_id}/?service={quote(service['name'])}"
            ),
            link_text="Make an appointment!" if logged_in else "Check our available class times",
        )


class ServicesPage(Page):
    """Public list of what a business offers."""

    def __init__(self, api: AppointMeClient, session: SessionStore):
        super().__init__()
        self.api = api
        self.session = session
        self.services: list[ServiceCard] | None = None

    async def load(self, business_id: str | None) -> list[ServiceCard] | None:
        # The route parameter may not be known yet
        if not business_id:
            return None
        try:
            data = await self._fetch(self.api.get_services(business_id))
        except PageClosed:
            return None
        except (ApiError, httpx.HTTPError) as e:
            self.show_error("error", f"Error loading data {getattr(e, 'message', e)}")
            return None

        self.services = [
            ServiceCard.from_api(service, business_id, self.session.logged_in)
            for service in data["services"]
        ]
        self.dismiss_banner()
        return self.services


@dataclass
class ClientRow:
    """One line of the client list."""

    id: str
    name: str
    email: str
    data: dict[str, Any] = field(repr=False)

    @classmethod
    def from_api(cls, client: dict[str, Any]) -> "ClientRow":
        user = client["user"]
        return cls(
            id=client["id"],
            name=f"{user['fname']} {user['lname']}",
            email=user["email"],
            data=client,
        )


class ClientListPage(Page):
    """A representative's client roster."""

    def __init__(self, api: AppointMeClient, business_id: str | None):
        super().__init__()
        self.api = api
        self.business_id = business_id
        self.clients: list[ClientRow] | None = None
        self.selected: ClientRow | None = None

    @property
    def client_count(self) -> int:
        return len(self.clients) if self.clients else 0

    async def load(self) -> list[ClientRow] | None:
        """Fetch the roster; the selected client is refreshed from the new data."""
        if not self.business_id:
            return None
        try:
            data = await self._fetch(self.api.get_client_list(self.business_id))
        except PageClosed:
            return None
        except ApiError as e:
            self.show_error(e.status, e.message)
            return None
        except httpx.HTTPError as e:
            self.show_error("error", str(e))
            return None

        self.clients = [ClientRow.from_api(client) for client in data["clients"]]
        if self.selected is not None:
            self.selected = next((c for c in self.clients if c.id == self.selected.id), None)
        self.dismiss_banner()
        return self.clients

    async def refresh(self) -> list[ClientRow] | None:
        return await self.load()

    def select(self, client_id: str) -> ClientRow | None:
        self.selected = next((c for c in self.clients or [] if c.id == client_id), None)
        return self.selected

    async def add_client(self, client: dict[str, Any]) -> bool:
        """Add a client and reload the roster."""
        if not self.business_id:
            return False
        try:
            data = await self._fetch(self.api.add_client(self.business_id, client))
        except PageClosed:
            return False
        except ApiError as e:
            self.show_error(e.status, e.message)
            return False
        except httpx.HTTPError as e:
            self.show_error("error", str(e))
            return False

        # A failed reload keeps its own error banner
        if await self.refresh() is not None:
            self.banner = Banner(
                status=data["status"], message=data["message"], severity="success"
            )
        return True
