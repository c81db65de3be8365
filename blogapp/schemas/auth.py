from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class LoginInput(BaseModel):
    """Credentials accepted by ``POST /auth/login``."""

    model_config = ConfigDict(populate_by_name=True)

    login_or_email: str = Field(..., alias="loginOrEmail", min_length=1, examples=["johndoe"])
    password: SecretStr = Field(..., min_length=1, examples=["qwerty"])


class Token(BaseModel):
    """Token schema for JWT access tokens."""

    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(alias="accessToken")


class TokenData(BaseModel):
    """Token data schema for extracted token payload."""

    login: str | None = None
    user_id: UUID | None = None
    role: str | None = None


class MeView(BaseModel):
    """Profile of the authenticated user."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: UUID = Field(alias="userId")
    login: str
    email: str
