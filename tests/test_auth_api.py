"""Tests for login, sign up, token refresh and the representative's business."""

from uuid import uuid4

import pytest

from appointme.utils.jwt import REFRESH, decode_token
from appointme.utils.passwords import verify_password
from tests.conftest import REP_PASSWORD, USER_PASSWORD, auth_headers

pytestmark = pytest.mark.asyncio


class TestLogin:
    """POST /api/auth/login/{userType}"""

    async def test_rep_login_returns_tokens(self, client, rep):
        response = await client.post(
            "/api/auth/login/businessRep",
            json={"email": rep.email, "password": REP_PASSWORD},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "success"
        assert data["user"]["id"] == str(rep.id)
        assert data["user"]["business_id"] == str(rep.business_id)

        access = decode_token(data["accessToken"])
        assert access.user_id == rep.id
        assert access.role == "businessRep"
        assert decode_token(data["refreshToken"], expected_type=REFRESH) is not None

    async def test_email_is_case_insensitive(self, client, user):
        response = await client.post(
            "/api/auth/login/user",
            json={"email": "Uma@Mailbox.com", "password": USER_PASSWORD},
        )

        assert response.status_code == 200

    async def test_wrong_password(self, client, rep):
        response = await client.post(
            "/api/auth/login/businessRep",
            json={"email": rep.email, "password": "Wrong123!"},
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid email or password"

    async def test_wrong_account_type(self, client, rep):
        """A representative cannot log in through the user form."""
        response = await client.post(
            "/api/auth/login/user",
            json={"email": rep.email, "password": REP_PASSWORD},
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid email or password"

    async def test_unknown_email(self, client):
        response = await client.post(
            "/api/auth/login/user",
            json={"email": "ghost@mailbox.com", "password": USER_PASSWORD},
        )

        assert response.status_code == 401

    async def test_temporary_user_cannot_log_in(self, client, store):
        await store.create_user(
            {"fname": "Tess", "lname": "Temp", "email": "tess@mailbox.com", "is_temporary": True}
        )

        response = await client.post(
            "/api/auth/login/user",
            json={"email": "tess@mailbox.com", "password": USER_PASSWORD},
        )

        assert response.status_code == 401

    async def test_missing_fields(self, client):
        response = await client.post("/api/auth/login/user", json={})

        assert response.status_code == 400
        fields = {error["field"] for error in response.json()["errors"]}
        assert fields == {"email", "password"}


class TestRegister:
    """POST /api/auth/register/{userType}"""

    async def test_register_user(self, client, store):
        response = await client.post(
            "/api/auth/register/user",
            json={
                "fname": "Nina",
                "lname": "New",
                "email": "nina@mailbox.com",
                "password": "Secret12$",
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["user"]["role"] == "user"
        assert data["accessToken"]
        created = await store.get_user_by_email("nina@mailbox.com")
        assert verify_password("Secret12$", created.password_hash)
        assert store.commits == 1

    async def test_register_rep_creates_business(self, client, store):
        response = await client.post(
            "/api/auth/register/businessRep",
            json={
                "fname": "Bo",
                "lname": "Owner",
                "email": "bo@piano.com",
                "password": "Keys4Days!",
                "business": {"name": "Bo's Piano Lessons"},
            },
        )

        assert response.status_code == 201
        business_id = response.json()["user"]["business_id"]
        assert business_id is not None
        assert [b.name for b in store.businesses.values()] == ["Bo's Piano Lessons"]

    async def test_rep_needs_business(self, client):
        response = await client.post(
            "/api/auth/register/businessRep",
            json={"fname": "Bo", "lname": "Owner", "email": "bo@piano.com", "password": "Keys4Days!"},
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "business"

    async def test_weak_password(self, client):
        response = await client.post(
            "/api/auth/register/user",
            json={"fname": "W", "lname": "Eak", "email": "weak@mailbox.com", "password": "password"},
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "password"

    async def test_existing_email_is_409(self, client, user):
        response = await client.post(
            "/api/auth/register/user",
            json={"fname": "Uma", "lname": "Again", "email": user.email, "password": "Secret12$"},
        )

        assert response.status_code == 409

    async def test_temporary_client_is_upgraded(self, client, store):
        temp = await store.create_user(
            {"fname": "Tess", "lname": "Temp", "email": "tess@mailbox.com", "is_temporary": True}
        )

        response = await client.post(
            "/api/auth/register/user",
            json={"fname": "Tess", "lname": "Real", "email": "tess@mailbox.com", "password": "Secret12$"},
        )

        assert response.status_code == 201
        assert response.json()["user"]["id"] == str(temp.id)
        assert temp.is_temporary is False
        assert temp.lname == "Real"


class TestRefresh:
    """POST /api/auth/refresh"""

    async def test_refresh_issues_access_token(self, client, user):
        login = await client.post(
            "/api/auth/login/user",
            json={"email": user.email, "password": USER_PASSWORD},
        )

        response = await client.post(
            "/api/auth/refresh", json={"refreshToken": login.json()["refreshToken"]}
        )

        assert response.status_code == 200
        assert decode_token(response.json()["accessToken"]).user_id == user.id

    async def test_access_token_cannot_refresh(self, client, user):
        login = await client.post(
            "/api/auth/login/user",
            json={"email": user.email, "password": USER_PASSWORD},
        )

        response = await client.post(
            "/api/auth/refresh", json={"refreshToken": login.json()["accessToken"]}
        )

        assert response.status_code == 401


class TestRepBusiness:
    """GET /api/business-reps/business/{userId}"""

    async def test_rep_gets_own_business(self, client, business, rep):
        response = await client.get(
            f"/api/business-reps/business/{rep.id}", headers=auth_headers(rep)
        )

        assert response.status_code == 200
        assert response.json()["business"]["id"] == str(business.id)

    async def test_needs_token(self, client, rep):
        response = await client.get(f"/api/business-reps/business/{rep.id}")

        assert response.status_code == 401

    async def test_other_rep_is_403(self, client, rep, other_rep):
        response = await client.get(
            f"/api/business-reps/business/{rep.id}", headers=auth_headers(other_rep)
        )

        assert response.status_code == 403

    async def test_regular_user_is_403(self, client, user):
        response = await client.get(
            f"/api/business-reps/business/{user.id}", headers=auth_headers(user)
        )

        assert response.status_code == 403

    async def test_malformed_user_id_is_400(self, client, rep):
        response = await client.get(
            "/api/business-reps/business/rita", headers=auth_headers(rep)
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "userId"

    async def test_unknown_user_with_matching_token_is_404(self, client, store, rep):
        del store.users[rep.id]

        response = await client.get(
            f"/api/business-reps/business/{rep.id}", headers=auth_headers(rep)
        )

        assert response.status_code == 404

    async def test_random_user_id_is_403(self, client, rep):
        response = await client.get(
            f"/api/business-reps/business/{uuid4()}", headers=auth_headers(rep)
        )

        assert response.status_code == 403
