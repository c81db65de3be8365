# tests/routes/test_auth.py
"""Tests for login and the current-user endpoint."""

from datetime import timedelta
from uuid import uuid4

import pytest
from httpx import AsyncClient

from blogapp.managers.token_manager import create_access_token
from tests.routes.helpers import PASSWORD, make_user


class TestLogin:
    """Tests for POST /auth/login."""

    @pytest.mark.asyncio
    async def test_login_by_login(self, client: AsyncClient) -> None:
        await make_user("johndoe")

        response = await client.post(
            "/auth/login",
            json={"loginOrEmail": "johndoe", "password": PASSWORD},
        )

        assert response.status_code == 200
        assert response.json()["accessToken"]

    @pytest.mark.asyncio
    async def test_login_by_email(self, client: AsyncClient) -> None:
        await make_user("johndoe", "john@mail.io")

        response = await client.post(
            "/auth/login",
            json={"loginOrEmail": "john@mail.io", "password": PASSWORD},
        )

        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_wrong_password_is_401(self, client: AsyncClient) -> None:
        await make_user("johndoe")

        response = await client.post(
            "/auth/login",
            json={"loginOrEmail": "johndoe", "password": "wrong-password"},
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_unknown_user_is_401(self, client: AsyncClient) -> None:
        response = await client.post(
            "/auth/login",
            json={"loginOrEmail": "ghost", "password": PASSWORD},
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_missing_fields_is_400(self, client: AsyncClient) -> None:
        response = await client.post("/auth/login", json={"loginOrEmail": "johndoe"})

        assert response.status_code == 400
        assert response.json()["errorsMessages"] == [
            {"message": "Field required", "field": "password"},
        ]


class TestMe:
    """Tests for GET /auth/me."""

    @pytest.mark.asyncio
    async def test_returns_profile(self, client: AsyncClient, blogger_headers: dict[str, str]) -> None:
        response = await client.get("/auth/me", headers=blogger_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["login"] == "blogger"
        assert body["email"] == "blogger@mail.io"
        assert body["userId"]

    @pytest.mark.asyncio
    async def test_garbage_token_is_401(self, client: AsyncClient) -> None:
        response = await client.get("/auth/me", headers={"Authorization": "Bearer nope"})

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_expired_token_is_401(self, client: AsyncClient) -> None:
        user = await make_user("johndoe")
        token = create_access_token(user.id, user.login, expires_delta=timedelta(seconds=-5))

        response = await client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_token_of_deleted_user_is_401(self, client: AsyncClient) -> None:
        token = create_access_token(uuid4(), "ghost")

        response = await client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
