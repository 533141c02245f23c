"""HTTP client for the AppointMe API."""

import logging
from typing import Any

import httpx

from appointme.client.storage import ACCESS_TOKEN, TokenStorage

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """The API answered with a non-success envelope."""

    def __init__(self, status: str, message: str, status_code: int | None = None):
        self.status = status
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class AppointMeClient:
    """Thin async wrapper around the REST endpoints the pages use."""

    def __init__(
        self,
        base_url: str,
        storage: TokenStorage,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 30.0,
    ):
        self.storage = storage
        self.client = httpx.AsyncClient(
            base_url=f"{base_url.rstrip('/')}/api",
            timeout=timeout,
            transport=transport,
        )

    async def _request(
        self,
        method: str,
        path: str,
        *,
        authenticated: bool = False,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        headers = {"Content-Type": "application/json"}
        if authenticated:
            # Read on every call so a refreshed token is picked up
            headers["Authorization"] = f"Bearer {self.storage.get_item(ACCESS_TOKEN)}"

        response = await self.client.request(method, path, json=json, headers=headers)
        try:
            data = response.json()
        except ValueError:
            data = {}

        if response.is_error or data.get("status") != "success":
            logger.warning(f"{method} {path} failed with {response.status_code}")
            raise ApiError(
                status=data.get("status", "error"),
                message=data.get("message") or f"Request failed with status {response.status_code}",
                status_code=response.status_code,
            )
        return data

    async def login(self, user_type: str, email: str, password: str) -> dict[str, Any]:
        return await self._request(
            "POST", f"/auth/login/{user_type}", json={"email": email, "password": password}
        )

    async def refresh(self, refresh_token: str) -> dict[str, Any]:
        return await self._request("POST", "/auth/refresh", json={"refreshToken": refresh_token})

    async def get_rep_business(self, user_id: str) -> dict[str, Any]:
        return await self._request(
            "GET", f"/business-reps/business/{user_id}", authenticated=True
        )

    async def get_services(self, business_id: str) -> dict[str, Any]:
        return await self._request("GET", f"/businesses/services/{business_id}")

    async def get_client_list(self, business_id: str) -> dict[str, Any]:
        return await self._request(
            "GET", f"/businesses/client-list/{business_id}", authenticated=True
        )

    async def add_client(self, business_id: str, client: dict[str, Any]) -> dict[str, Any]:
        return await self._request(
            "POST", f"/businesses/client-list/{business_id}", authenticated=True, json=client
        )

    async def aclose(self) -> None:
        await self.client.aclose()
