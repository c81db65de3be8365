# tests/routes/test_super_admin.py
"""Tests for the super-admin surface: user management and moderation."""

from uuid import uuid4

import pytest
from httpx import AsyncClient

from tests.routes.helpers import (
    BAN_REASON,
    auth_headers_for,
    create_blog,
    create_post,
    make_user,
)


async def ban_user(
    client: AsyncClient,
    headers: dict[str, str],
    user_id: str,
    *,
    is_banned: bool = True,
    reason: str | None = BAN_REASON,
) -> int:
    response = await client.put(
        f"/sa/users/{user_id}/ban",
        json={"isBanned": is_banned, "banReason": reason},
        headers=headers,
    )
    return response.status_code


async def find_user(client: AsyncClient, headers: dict[str, str], login: str) -> dict:
    response = await client.get(
        "/sa/users",
        params={"searchLoginTerm": login, "pageSize": 50},
        headers=headers,
    )
    return next(u for u in response.json()["items"] if u["login"] == login)


class TestAccess:
    """Admin-only access control."""

    @pytest.mark.asyncio
    async def test_anonymous_is_401(self, client: AsyncClient) -> None:
        response = await client.get("/sa/users")

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_regular_user_is_403(
        self,
        client: AsyncClient,
        blogger_headers: dict[str, str],
    ) -> None:
        response = await client.get("/sa/users", headers=blogger_headers)

        assert response.status_code == 403


class TestUsers:
    """Tests for /sa/users."""

    @pytest.mark.asyncio
    async def test_create_user(self, client: AsyncClient, admin_headers: dict[str, str]) -> None:
        response = await client.post(
            "/sa/users",
            json={"login": "newbie", "password": "secret1", "email": "newbie@mail.io"},
            headers=admin_headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["login"] == "newbie"
        assert body["email"] == "newbie@mail.io"
        assert body["banInfo"] == {"isBanned": False, "banDate": None, "banReason": None}
        assert "password" not in body
        assert "passwordHash" not in body

    @pytest.mark.asyncio
    async def test_created_user_can_log_in(
        self,
        client: AsyncClient,
        admin_headers: dict[str, str],
    ) -> None:
        await client.post(
            "/sa/users",
            json={"login": "newbie", "password": "secret1", "email": "newbie@mail.io"},
            headers=admin_headers,
        )

        response = await client.post(
            "/auth/login",
            json={"loginOrEmail": "newbie@mail.io", "password": "secret1"},
        )

        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_duplicate_login_is_field_error(
        self,
        client: AsyncClient,
        admin_headers: dict[str, str],
    ) -> None:
        response = await client.post(
            "/sa/users",
            json={"login": "admin", "password": "secret1", "email": "fresh@mail.io"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["errorsMessages"][0]["field"] == "login"

    @pytest.mark.asyncio
    async def test_duplicate_email_is_field_error(
        self,
        client: AsyncClient,
        admin_headers: dict[str, str],
    ) -> None:
        response = await client.post(
            "/sa/users",
            json={"login": "fresh", "password": "secret1", "email": "admin@mail.io"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["errorsMessages"][0]["field"] == "email"

    @pytest.mark.asyncio
    async def test_invalid_user_body(
        self,
        client: AsyncClient,
        admin_headers: dict[str, str],
    ) -> None:
        response = await client.post(
            "/sa/users",
            json={"login": "no spaces!", "password": "123", "email": "not-an-email"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        fields = {e["field"] for e in response.json()["errorsMessages"]}
        assert fields == {"login", "password", "email"}

    @pytest.mark.asyncio
    async def test_search_terms_are_or_combined(
        self,
        client: AsyncClient,
        admin_headers: dict[str, str],
    ) -> None:
        await make_user("User1", "first@mail.io")
        await make_user("bob", "b1@mail.io")
        await make_user("carol", "carol@mail.io")

        response = await client.get(
            "/sa/users",
            params={"searchLoginTerm": "1", "searchEmailTerm": "1"},
            headers=admin_headers,
        )

        body = response.json()
        logins = [u["login"] for u in body["items"]]
        assert body["totalCount"] == 2
        assert sorted(logins) == ["User1", "bob"]

    @pytest.mark.asyncio
    async def test_banned_filter_sorted_by_email_desc(
        self,
        client: AsyncClient,
        admin_headers: dict[str, str],
    ) -> None:
        users = [await make_user(f"usr{i}", f"usr{i}@mail.io") for i in range(1, 6)]
        for user in (users[1], users[3]):
            assert await ban_user(client, admin_headers, str(user.id)) == 204

        response = await client.get(
            "/sa/users",
            params={"banStatus": "banned", "sortBy": "email", "sortDirection": "desc"},
            headers=admin_headers,
        )

        body = response.json()
        assert body["totalCount"] == 2
        assert [u["login"] for u in body["items"]] == ["usr4", "usr2"]

    @pytest.mark.asyncio
    async def test_not_banned_filter(
        self,
        client: AsyncClient,
        admin_headers: dict[str, str],
    ) -> None:
        target = await make_user("target")
        await ban_user(client, admin_headers, str(target.id))

        response = await client.get(
            "/sa/users",
            params={"banStatus": "notBanned"},
            headers=admin_headers,
        )

        assert [u["login"] for u in response.json()["items"]] == ["admin"]

    @pytest.mark.asyncio
    async def test_delete_twice(self, client: AsyncClient, admin_headers: dict[str, str]) -> None:
        target = await make_user("target")
        url = f"/sa/users/{target.id}"

        assert (await client.delete(url, headers=admin_headers)).status_code == 204
        assert (await client.delete(url, headers=admin_headers)).status_code == 404

    @pytest.mark.asyncio
    async def test_delete_cascades_to_blogs_and_posts(
        self,
        client: AsyncClient,
        admin_headers: dict[str, str],
    ) -> None:
        target = await make_user("target")
        headers = await auth_headers_for(client, "target")
        blog = await create_blog(client, headers, "Doomed")
        post = await create_post(client, headers, blog["id"])

        await client.delete(f"/sa/users/{target.id}", headers=admin_headers)

        assert (await client.get(f"/blogs/{blog['id']}")).status_code == 404
        assert (await client.get(f"/posts/{post['id']}")).status_code == 404
        assert (await client.get("/sa/blogs", headers=admin_headers)).json()["totalCount"] == 0


class TestUserBans:
    """Tests for PUT /sa/users/{id}/ban."""

    @pytest.mark.asyncio
    async def test_ban_records_reason_and_date(
        self,
        client: AsyncClient,
        admin_headers: dict[str, str],
    ) -> None:
        target = await make_user("target")

        assert await ban_user(client, admin_headers, str(target.id)) == 204

        ban_info = (await find_user(client, admin_headers, "target"))["banInfo"]
        assert ban_info["isBanned"] is True
        assert ban_info["banReason"] == BAN_REASON
        assert ban_info["banDate"].endswith("Z")

    @pytest.mark.asyncio
    async def test_unban_clears_ban_record(
        self,
        client: AsyncClient,
        admin_headers: dict[str, str],
    ) -> None:
        target = await make_user("target")
        await ban_user(client, admin_headers, str(target.id))

        assert await ban_user(client, admin_headers, str(target.id), is_banned=False, reason=None) == 204

        ban_info = (await find_user(client, admin_headers, "target"))["banInfo"]
        assert ban_info == {"isBanned": False, "banDate": None, "banReason": None}

    @pytest.mark.asyncio
    async def test_ban_without_reason_is_400(
        self,
        client: AsyncClient,
        admin_headers: dict[str, str],
    ) -> None:
        target = await make_user("target")

        status = await ban_user(client, admin_headers, str(target.id), reason=None)

        assert status == 400
        assert (await find_user(client, admin_headers, "target"))["banInfo"]["isBanned"] is False

    @pytest.mark.asyncio
    async def test_short_reason_is_field_error(
        self,
        client: AsyncClient,
        admin_headers: dict[str, str],
    ) -> None:
        target = await make_user("target")

        response = await client.put(
            f"/sa/users/{target.id}/ban",
            json={"isBanned": True, "banReason": "too short"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["errorsMessages"][0]["field"] == "banReason"

    @pytest.mark.asyncio
    async def test_non_boolean_is_banned_rejected(
        self,
        client: AsyncClient,
        admin_headers: dict[str, str],
    ) -> None:
        target = await make_user("target")

        response = await client.put(
            f"/sa/users/{target.id}/ban",
            json={"isBanned": "yes", "banReason": BAN_REASON},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["errorsMessages"][0]["field"] == "isBanned"

    @pytest.mark.asyncio
    async def test_ban_unknown_user_is_404(
        self,
        client: AsyncClient,
        admin_headers: dict[str, str],
    ) -> None:
        assert await ban_user(client, admin_headers, str(uuid4())) == 404

    @pytest.mark.asyncio
    async def test_banned_user_content_is_hidden(
        self,
        client: AsyncClient,
        admin_headers: dict[str, str],
    ) -> None:
        target = await make_user("target")
        headers = await auth_headers_for(client, "target")
        blog = await create_blog(client, headers, "Hidden")
        post = await create_post(client, headers, blog["id"])

        await ban_user(client, admin_headers, str(target.id))

        assert (await client.get("/blogs")).json()["totalCount"] == 0
        assert (await client.get(f"/blogs/{blog['id']}")).status_code == 404
        assert (await client.get(f"/posts/{post['id']}")).status_code == 404
        assert (await client.get("/posts")).json()["totalCount"] == 0

    @pytest.mark.asyncio
    async def test_banned_user_loses_access(
        self,
        client: AsyncClient,
        admin_headers: dict[str, str],
    ) -> None:
        target = await make_user("target")
        headers = await auth_headers_for(client, "target")

        await ban_user(client, admin_headers, str(target.id))

        assert (await client.get("/auth/me", headers=headers)).status_code == 401
        login = await client.post(
            "/auth/login",
            json={"loginOrEmail": "target", "password": "qwerty123"},
        )
        assert login.status_code == 401


class TestBlogs:
    """Tests for /sa/blogs and blog bans."""

    @pytest.mark.asyncio
    async def test_admin_view_includes_owner_and_ban_info(
        self,
        client: AsyncClient,
        admin_headers: dict[str, str],
        blogger_headers: dict[str, str],
    ) -> None:
        blog = await create_blog(client, blogger_headers, "Diary")

        response = await client.get("/sa/blogs", headers=admin_headers)

        item = response.json()["items"][0]
        assert item["id"] == blog["id"]
        assert item["blogOwnerInfo"]["userLogin"] == "blogger"
        assert item["banInfo"] == {"isBanned": False, "banDate": None}

    @pytest.mark.asyncio
    async def test_ban_hides_blog_from_public(
        self,
        client: AsyncClient,
        admin_headers: dict[str, str],
        blogger_headers: dict[str, str],
    ) -> None:
        blog = await create_blog(client, blogger_headers, "Diary")
        post = await create_post(client, blogger_headers, blog["id"])

        response = await client.put(
            f"/sa/blogs/{blog['id']}/ban",
            json={"isBanned": True},
            headers=admin_headers,
        )

        assert response.status_code == 204
        assert (await client.get(f"/blogs/{blog['id']}")).status_code == 404
        assert (await client.get(f"/blogs/{blog['id']}/posts")).status_code == 404
        assert (await client.get(f"/posts/{post['id']}")).status_code == 404
        assert (await client.get("/blogs")).json()["totalCount"] == 0

        for status in ("all", "banned"):
            listing = await client.get(
                "/sa/blogs",
                params={"banStatus": status},
                headers=admin_headers,
            )
            ban_info = listing.json()["items"][0]["banInfo"]
            assert ban_info["isBanned"] is True
            assert ban_info["banDate"] is not None

    @pytest.mark.asyncio
    async def test_unban_restores_blog(
        self,
        client: AsyncClient,
        admin_headers: dict[str, str],
        blogger_headers: dict[str, str],
    ) -> None:
        blog = await create_blog(client, blogger_headers, "Diary")
        url = f"/sa/blogs/{blog['id']}/ban"
        await client.put(url, json={"isBanned": True}, headers=admin_headers)

        await client.put(url, json={"isBanned": False}, headers=admin_headers)

        assert (await client.get(f"/blogs/{blog['id']}")).status_code == 200
        listing = await client.get("/sa/blogs", headers=admin_headers)
        assert listing.json()["items"][0]["banInfo"] == {"isBanned": False, "banDate": None}

    @pytest.mark.asyncio
    async def test_ban_unknown_blog_is_404(
        self,
        client: AsyncClient,
        admin_headers: dict[str, str],
    ) -> None:
        response = await client.put(
            f"/sa/blogs/{uuid4()}/ban",
            json={"isBanned": True},
            headers=admin_headers,
        )

        assert response.status_code == 404
