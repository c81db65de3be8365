# tests/routes/conftest.py
"""Pytest fixtures for route tests running against a throwaway SQLite database."""

from collections.abc import AsyncGenerator

from httpx import ASGITransport, AsyncClient
from pytest import fixture

from blogapp.auth.permissions import ADMIN_ROLE
from blogapp.main import app
from blogapp.managers.rate_limiter import limiter
from tests.routes.helpers import auth_headers_for, make_user


@fixture
async def client(db: None) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing with rate limiting disabled."""
    limiter.enabled = False
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    limiter.enabled = True


@fixture
async def admin_headers(client: AsyncClient) -> dict[str, str]:
    """Auth headers of a freshly created super admin."""
    await make_user("admin", "admin@mail.io", role=ADMIN_ROLE)
    return await auth_headers_for(client, "admin")


@fixture
async def blogger_headers(client: AsyncClient) -> dict[str, str]:
    """Auth headers of a regular user acting as blogger."""
    await make_user("blogger", "blogger@mail.io")
    return await auth_headers_for(client, "blogger")


@fixture
async def other_headers(client: AsyncClient) -> dict[str, str]:
    """Auth headers of a second, unrelated blogger."""
    await make_user("other", "other@mail.io")
    return await auth_headers_for(client, "other")
