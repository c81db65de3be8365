# tests/managers/test_token_manager.py
"""Tests for the JWT token manager."""

from datetime import timedelta
from uuid import uuid4

from jose import jwt

from blogapp.configs import settings
from blogapp.managers.token_manager import create_access_token, decode_access_token


class TestCreateAccessToken:
    def test_token_contains_claims(self) -> None:
        user_id = uuid4()

        token = create_access_token(user_id=user_id, login="johndoe", role="admin")
        token_data = decode_access_token(token)

        assert token_data is not None
        assert token_data.login == "johndoe"
        assert token_data.user_id == user_id
        assert token_data.role == "admin"

    def test_default_role_is_user(self) -> None:
        token_data = decode_access_token(create_access_token(uuid4(), "johndoe"))

        assert token_data is not None
        assert token_data.role == "user"

    def test_tokens_are_unique(self) -> None:
        user_id = uuid4()

        assert create_access_token(user_id, "a") != create_access_token(user_id, "a")


class TestDecodeAccessToken:
    def test_expired_token(self) -> None:
        token = create_access_token(uuid4(), "johndoe", expires_delta=timedelta(seconds=-1))

        assert decode_access_token(token) is None

    def test_garbage(self) -> None:
        assert decode_access_token("not.a.token") is None

    def test_wrong_secret(self) -> None:
        token = jwt.encode(
            {"sub": "johndoe", "user_id": str(uuid4()), "type": "access"},
            "another-secret",
            algorithm=settings.ALGORITHM,
        )

        assert decode_access_token(token) is None

    def test_wrong_audience(self) -> None:
        token = jwt.encode(
            {
                "sub": "johndoe",
                "user_id": str(uuid4()),
                "type": "access",
                "aud": "someone-else",
                "iss": settings.JWT_ISSUER,
            },
            settings.SECRET_KEY,
            algorithm=settings.ALGORITHM,
        )

        assert decode_access_token(token) is None

    def test_non_access_token_type(self) -> None:
        token = jwt.encode(
            {
                "sub": "johndoe",
                "user_id": str(uuid4()),
                "type": "refresh",
                "aud": settings.JWT_AUDIENCE,
                "iss": settings.JWT_ISSUER,
            },
            settings.SECRET_KEY,
            algorithm=settings.ALGORITHM,
        )

        assert decode_access_token(token) is None

    def test_malformed_user_id(self) -> None:
        token = jwt.encode(
            {
                "sub": "johndoe",
                "user_id": "not-a-uuid",
                "type": "access",
                "aud": settings.JWT_AUDIENCE,
                "iss": settings.JWT_ISSUER,
            },
            settings.SECRET_KEY,
            algorithm=settings.ALGORITHM,
        )

        assert decode_access_token(token) is None
