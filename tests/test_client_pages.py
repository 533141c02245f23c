"""Tests for the client-side pages, run against the app in-process."""

import asyncio

import httpx
import pytest
import pytest_asyncio

from appointme.api.deps import get_store
from appointme.client import (
    AppointMeClient,
    ClientListPage,
    LoginPage,
    ServicesPage,
    SessionStore,
    TokenStorage,
)
from appointme.client.storage import ACCESS_TOKEN, REFRESH_TOKEN
from appointme.main import app
from appointme.models import UserRole
from appointme.utils.passwords import hash_password
from tests.conftest import REP_PASSWORD, auth_headers

pytestmark = pytest.mark.asyncio


@pytest.fixture
def storage(tmp_path) -> TokenStorage:
    return TokenStorage(tmp_path / "tokens.json")


@pytest.fixture
def session() -> SessionStore:
    return SessionStore()


@pytest_asyncio.fixture
async def api(store, storage):
    """API client wired straight to the ASGI app."""
    app.dependency_overrides[get_store] = lambda: store
    client = AppointMeClient(
        "http://test", storage, transport=httpx.ASGITransport(app=app)
    )
    yield client
    await client.aclose()
    app.dependency_overrides.clear()


def mock_api(storage, handler) -> AppointMeClient:
    return AppointMeClient("http://test", storage, transport=httpx.MockTransport(handler))


class GatedHandler:
    """MockTransport handler that holds each response until released."""

    def __init__(self, respond):
        self.respond = respond
        self.requests: list[httpx.Request] = []
        self.gates: list[asyncio.Event] = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        gate = asyncio.Event()
        self.requests.append(request)
        self.gates.append(gate)
        await gate.wait()
        return self.respond(request, len(self.requests))

    async def wait_for(self, count: int) -> None:
        while len(self.requests) < count:
            await asyncio.sleep(0)

    def release(self, index: int) -> None:
        self.gates[index].set()


def roster_response(request, call_number):
    client_id = f"c{call_number}"
    return httpx.Response(
        200,
        json={
            "status": "success",
            "message": "Found 1 clients",
            "clients": [
                {
                    "id": client_id,
                    "user": {
                        "fname": "Cara",
                        "lname": client_id,
                        "email": f"{client_id}@mailbox.com",
                    },
                }
            ],
        },
    )


class TestLoginPage:
    """Login form, token storage and session setup."""

    async def test_rep_login_sets_up_session(self, api, store, storage, session, business):
        await store.create_user(
            {
                "fname": "Ann",
                "lname": "Bee",
                "email": "a@b.com",
                "password_hash": hash_password("Abcdefg1!"),
                "role": UserRole.BUSINESS_REP.value,
                "business_id": business.id,
            }
        )
        page = LoginPage(api, session, storage)

        redirect = await page.submit("a@b.com", "Abcdefg1!", user_type="businessRep")

        assert redirect == "/home"
        assert storage.get_item(ACCESS_TOKEN)
        assert storage.get_item(REFRESH_TOKEN)
        assert session.logged_in
        assert session.user_type == "businessRep"
        assert session.business["name"] == "Bright Minds Tutoring"
        assert page.banner.severity == "success"
        assert page.is_loading is False

    async def test_user_login_skips_business(self, api, storage, session, user):
        page = LoginPage(api, session, storage)

        redirect = await page.submit(user.email, "Qwerty12#")

        assert redirect == "/home"
        assert session.business is None

    async def test_invalid_form_sends_nothing(self, storage, session):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(500)

        page = LoginPage(mock_api(storage, handler), session, storage)

        redirect = await page.submit("not-an-email", "short")

        assert redirect is None
        assert requests == []
        assert page.field_errors["email"] == "A valid email is required"
        assert "password" in page.field_errors

    async def test_empty_email_message(self, storage, session):
        page = LoginPage(mock_api(storage, lambda request: httpx.Response(500)), session, storage)

        await page.submit("", REP_PASSWORD)

        assert page.field_errors == {"email": "Email is required"}

    async def test_bad_credentials_show_banner(self, api, storage, session, rep):
        page = LoginPage(api, session, storage)

        redirect = await page.submit(rep.email, "Wrong123!", user_type="businessRep")

        assert redirect is None
        assert page.banner.severity == "error"
        assert page.banner.message == "Invalid email or password"
        assert storage.get_item(ACCESS_TOKEN) is None
        assert not session.logged_in

    async def test_failed_business_fetch_clears_tokens(self, api, store, storage, session):
        await store.create_user(
            {
                "fname": "No",
                "lname": "Business",
                "email": "nobiz@b.com",
                "password_hash": hash_password(REP_PASSWORD),
                "role": UserRole.BUSINESS_REP.value,
            }
        )
        page = LoginPage(api, session, storage)

        redirect = await page.submit("nobiz@b.com", REP_PASSWORD, user_type="businessRep")

        assert redirect is None
        assert storage.get_item(ACCESS_TOKEN) is None
        assert storage.get_item(REFRESH_TOKEN) is None
        assert page.banner.message.startswith("Error setting up your session")
        assert not session.logged_in

    async def test_unreadable_token_file_is_replaced(self, api, storage, session, user):
        storage.path.write_text("{not json", encoding="utf-8")
        page = LoginPage(api, session, storage)

        redirect = await page.submit(user.email, "Qwerty12#")

        assert redirect == "/home"
        assert storage.get_item(ACCESS_TOKEN)
        assert storage.get_item(REFRESH_TOKEN)

    async def test_close_during_business_fetch_clears_tokens(self, storage, session):
        def respond(request, call_number):
            if request.url.path.endswith("/auth/login/businessRep"):
                return httpx.Response(
                    200,
                    json={
                        "status": "success",
                        "message": "Login successful",
                        "accessToken": "access",
                        "refreshToken": "refresh",
                        "user": {"id": "rep-1", "fname": "Ann", "lname": "Bee"},
                    },
                )
            return httpx.Response(200, json={"status": "success", "business": {}})

        handler = GatedHandler(respond)
        page = LoginPage(mock_api(storage, handler), session, storage)
        submit = asyncio.ensure_future(page.submit("a@b.com", "Abcdefg1!", "businessRep"))
        await handler.wait_for(1)
        handler.release(0)
        await handler.wait_for(2)
        assert storage.get_item(ACCESS_TOKEN) == "access"

        page.close()

        assert await submit is None
        assert storage.get_item(ACCESS_TOKEN) is None
        assert storage.get_item(REFRESH_TOKEN) is None
        assert not session.logged_in


class TestServicesPage:
    """Public services listing."""

    async def test_cards_for_each_service(self, api, session, business, service, service2):
        page = ServicesPage(api, session)

        cards = await page.load(str(business.id))

        assert [card.title for card in cards] == ["1:1 Maths", "Group English"]
        assert cards[0].duration_label == "Appointment Duration: 60 minute class"
        assert cards[0].fee_label == "Appointment Fee: $60"
        assert cards[1].link_text == "Check our available class times"
        assert cards[1].link_href.endswith("?service=Group%20English")

    async def test_logged_in_link_text(self, api, session, business, service):
        session.login({"id": "x"}, "user")
        page = ServicesPage(api, session)

        cards = await page.load(str(business.id))

        assert cards[0].link_text == "Make an appointment!"

    async def test_no_business_id_does_nothing(self, api, session):
        page = ServicesPage(api, session)

        assert await page.load(None) is None
        assert page.services is None

    async def test_error_banner(self, api, session):
        page = ServicesPage(api, session)

        assert await page.load("abc") is None
        assert page.banner.message.startswith("Error loading data")

    async def test_close_discards_pending_result(self, storage, session):
        started = asyncio.Event()
        release = asyncio.Event()

        async def handler(request):
            started.set()
            await release.wait()
            return httpx.Response(200, json={"status": "success", "message": "", "services": []})

        page = ServicesPage(mock_api(storage, handler), session)
        load = asyncio.ensure_future(page.load("some-business"))
        await started.wait()

        page.close()

        assert await load is None
        assert page.services is None
        assert page.is_loading is False
        assert page.banner is None

    async def test_is_loading_only_while_in_flight(self, storage, session):
        handler = GatedHandler(
            lambda request, n: httpx.Response(
                200, json={"status": "success", "message": "", "services": []}
            )
        )
        page = ServicesPage(mock_api(storage, handler), session)
        assert page.is_loading is False

        load = asyncio.ensure_future(page.load("some-business"))
        await handler.wait_for(1)
        assert page.is_loading is True

        handler.release(0)
        assert await load == []
        assert page.is_loading is False

    async def test_closed_page_does_not_fetch(self, storage, session):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json={"status": "success", "services": []})

        page = ServicesPage(mock_api(storage, handler), session)
        page.close()

        assert await page.load("some-business") is None
        assert requests == []


class TestClientListPage:
    """A representative's roster."""

    async def test_load_and_add(self, api, store, storage, business, rep, user):
        storage.set_item(ACCESS_TOKEN, auth_headers(rep)["Authorization"].split()[1])
        await store.add_client(business.id, user)
        page = ClientListPage(api, str(business.id))

        rows = await page.load()
        assert [row.name for row in rows] == ["Uma User"]
        page.select(rows[0].id)

        added = await page.add_client(
            {"fname": "Cara", "lname": "Client", "email": "cara@mailbox.com"}
        )

        assert added
        assert page.client_count == 2
        assert page.selected.email == "uma@mailbox.com"
        assert page.banner.message == "Client added"

    async def test_unauthorized_shows_banner(self, api, storage, business):
        storage.set_item(ACCESS_TOKEN, "garbage")
        page = ClientListPage(api, str(business.id))

        assert await page.load() is None
        assert page.banner.status == "fail"
        assert page.client_count == 0

    async def test_overlapping_loads_and_close(self, storage):
        """A second load still in flight keeps the page loading and dies with it."""
        handler = GatedHandler(roster_response)
        page = ClientListPage(mock_api(storage, handler), "business-1")

        first = asyncio.ensure_future(page.load())
        second = asyncio.ensure_future(page.refresh())
        await handler.wait_for(2)

        handler.release(0)
        rows = await first
        assert [row.id for row in rows] == ["c1"]
        assert page.is_loading is True

        page.close()
        handler.release(1)

        assert await second is None
        assert [row.id for row in page.clients] == ["c1"]
        assert page.is_loading is False

    async def test_close_mid_fetch(self, storage):
        handler = GatedHandler(roster_response)
        page = ClientListPage(mock_api(storage, handler), "business-1")

        load = asyncio.ensure_future(page.load())
        await handler.wait_for(1)
        assert page.is_loading is True

        page.close()

        assert await load is None
        assert page.clients is None
        assert page.is_loading is False

    async def test_failed_reload_after_add_keeps_error(self, storage):
        def handler(request):
            if request.method == "POST":
                return httpx.Response(
                    201, json={"status": "success", "message": "Client added", "client": {}}
                )
            return httpx.Response(
                500, json={"status": "error", "message": "Database unavailable"}
            )

        page = ClientListPage(mock_api(storage, handler), "business-1")

        added = await page.add_client(
            {"fname": "Cara", "lname": "Client", "email": "cara@mailbox.com"}
        )

        assert added
        assert page.banner.severity == "error"
        assert page.banner.message == "Database unavailable"
