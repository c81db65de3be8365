# tests/schemas/test_inputs.py
"""Tests for request body validation."""

import pytest
from pydantic import ValidationError

from blogapp.schemas import BanBlogInput, BanUserInput, BlogInput, PostInput, UserCreate

LONG_REASON = "Repeated spam in comments of several blogs"


class TestBlogInput:
    def test_accepts_https_url(self) -> None:
        blog = BlogInput.model_validate(
            {"name": " Diary ", "description": "Notes", "websiteUrl": "https://a.io/path"},
        )

        assert blog.name == "Diary"
        assert blog.website_url == "https://a.io/path"

    @pytest.mark.parametrize(
        "url",
        ["http://a.io", "https://", "ftp://a.io", "https://a.io/" + "x" * 100],
    )
    def test_rejects_bad_urls(self, url: str) -> None:
        with pytest.raises(ValidationError):
            BlogInput.model_validate({"name": "Diary", "description": "Notes", "websiteUrl": url})

    def test_rejects_whitespace_name(self) -> None:
        with pytest.raises(ValidationError):
            BlogInput.model_validate(
                {"name": "   ", "description": "Notes", "websiteUrl": "https://a.io"},
            )


class TestPostInput:
    def test_limits(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            PostInput.model_validate(
                {"title": "t" * 31, "shortDescription": "s" * 101, "content": "c" * 1001},
            )

        fields = {error["loc"][0] for error in exc_info.value.errors()}
        assert fields == {"title", "shortDescription", "content"}


class TestUserCreate:
    @pytest.mark.parametrize("login", ["ab", "a" * 11, "bad login", "über"])
    def test_rejects_bad_logins(self, login: str) -> None:
        with pytest.raises(ValidationError):
            UserCreate(login=login, password="secret1", email="a@mail.io")

    def test_password_is_secret(self) -> None:
        user = UserCreate(login="john_doe", password="secret1", email="a@mail.io")

        assert "secret1" not in repr(user)
        assert user.password.get_secret_value() == "secret1"


class TestBanUserInput:
    def test_ban_requires_long_reason(self) -> None:
        with pytest.raises(ValidationError):
            BanUserInput.model_validate({"isBanned": True, "banReason": "short"})

    @pytest.mark.parametrize(("reason", "valid"), [("x", False), ("r" * 19, False), ("r" * 20, True)])
    def test_reason_length_boundary(self, reason: str, valid: bool) -> None:
        payload = {"isBanned": True, "banReason": reason}

        if valid:
            assert BanUserInput.model_validate(payload).as_reason() == reason
        else:
            with pytest.raises(ValidationError, match="banReason must be at least 20"):
                BanUserInput.model_validate(payload)

    def test_ban_requires_reason(self) -> None:
        with pytest.raises(ValidationError):
            BanUserInput.model_validate({"isBanned": True})

    def test_ban_reason_is_trimmed(self) -> None:
        ban = BanUserInput.model_validate({"isBanned": True, "banReason": f"  {LONG_REASON}  "})

        assert ban.as_reason() == LONG_REASON

    def test_unban_ignores_reason(self) -> None:
        ban = BanUserInput.model_validate({"isBanned": False, "banReason": "x"})

        assert ban.as_reason() is None

    def test_is_banned_must_be_boolean(self) -> None:
        with pytest.raises(ValidationError):
            BanUserInput.model_validate({"isBanned": "true", "banReason": LONG_REASON})


class TestBanBlogInput:
    def test_parses_flag(self) -> None:
        assert BanBlogInput.model_validate({"isBanned": True}).is_banned is True

    def test_rejects_missing_flag(self) -> None:
        with pytest.raises(ValidationError):
            BanBlogInput.model_validate({})
