"""
User request and response models.

This module defines the bodies accepted by the super-admin user endpoints
and the ``UserView`` projection with its embedded ban information.
"""

from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, SecretStr, StringConstraints

from blogapp.configs.settings import (
    LOGIN_MAX_LENGTH,
    LOGIN_MIN_LENGTH,
    PASSWORD_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
)
from blogapp.models import UserDB
from blogapp.utils.helpers import to_iso

Login = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True,
        min_length=LOGIN_MIN_LENGTH,
        max_length=LOGIN_MAX_LENGTH,
        pattern=r"^[a-zA-Z0-9_-]*$",
    ),
]


class UserCreate(BaseModel):
    """User creation model (request body of ``POST /sa/users``)."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    login: Login = Field(..., description="Unique login", examples=["johndoe"])
    password: SecretStr = Field(
        ...,
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
        description="Password",
        examples=["qwerty"],
    )
    email: EmailStr = Field(..., description="Email address", examples=["johndoe@gmail.com"])


class UserBanInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_banned: bool = Field(alias="isBanned")
    ban_date: str | None = Field(default=None, alias="banDate")
    ban_reason: str | None = Field(default=None, alias="banReason")


class UserView(BaseModel):
    """User projection returned to super admins."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    login: str
    email: str
    created_at: str = Field(alias="createdAt")
    ban_info: UserBanInfo = Field(alias="banInfo")

    @classmethod
    def from_db(cls, user: UserDB) -> "UserView":
        return cls(
            id=user.id,
            login=user.login,
            email=user.email,
            created_at=to_iso(user.created_at) or "",
            ban_info=UserBanInfo(
                is_banned=user.is_banned,
                ban_date=to_iso(user.ban_date),
                ban_reason=user.ban_reason,
            ),
        )
