# tests/routes/helpers.py
"""Helpers that seed users, blogs and posts for route tests."""

from httpx import AsyncClient

from blogapp.db.database import transaction
from blogapp.repositories import UserRepository
from blogapp.schemas import UserCreate, UserView
from blogapp.services import UserService

PASSWORD = "qwerty123"
BAN_REASON = "Repeated spam in comments of several blogs"


async def make_user(
    login: str,
    email: str | None = None,
    *,
    password: str = PASSWORD,
    role: str = "user",
) -> UserView:
    """Insert a user directly through the service layer."""
    data = UserCreate(login=login, email=email or f"{login}@mail.io", password=password)
    async with transaction() as session:
        return await UserService(UserRepository(session)).create(data, role=role)


async def auth_headers_for(
    client: AsyncClient,
    login: str,
    password: str = PASSWORD,
) -> dict[str, str]:
    """Log in and return bearer auth headers."""
    response = await client.post(
        "/auth/login",
        json={"loginOrEmail": login, "password": password},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['accessToken']}"}


async def create_blog(
    client: AsyncClient,
    headers: dict[str, str],
    name: str,
    description: str = "Notes from the road",
    website_url: str = "https://travel-notes.io/",
) -> dict:
    response = await client.post(
        "/blogger/blogs",
        json={"name": name, "description": description, "websiteUrl": website_url},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


async def create_post(
    client: AsyncClient,
    headers: dict[str, str],
    blog_id: str,
    title: str = "First day",
) -> dict:
    response = await client.post(
        f"/blogger/blogs/{blog_id}/posts",
        json={
            "title": title,
            "shortDescription": "Rice terraces and monkeys",
            "content": "We arrived early in the morning.",
        },
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()
