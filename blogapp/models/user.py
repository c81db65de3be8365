"""User database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import DateTime
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String


class UserDB(SQLModel, table=True):
    """
    User database model.

    Holds credentials, the admin role flag and the embedded ban record
    (``is_banned``, ``ban_date``, ``ban_reason``).
    """

    __tablename__ = cast("declared_attr[str]", "users")

    # Primary key
    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="User ID",
    )

    # Required fields
    login: str = Field(
        sa_column=Column(String(10), unique=True, nullable=False, index=True),
        description="Login (unique)",
    )
    email: str = Field(
        sa_column=Column(String(255), unique=True, nullable=False, index=True),
        description="Email address (unique)",
    )
    password_hash: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Hashed password",
    )

    # Role-based access control
    role: str = Field(
        default="user",
        sa_column=Column(String(20), nullable=False, server_default="user", index=True),
        description="User role (user, admin)",
    )

    # Moderation
    is_banned: bool = Field(
        default=False,
        nullable=False,
        index=True,
        description="Whether the user is banned",
    )
    ban_date: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
        description="When the current ban was applied",
    )
    ban_reason: str | None = Field(
        default=None,
        sa_column=Column(String(1000)),
        description="Reason of the current ban",
    )

    # Timestamps (timezone-aware)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Creation timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "login": "johndoe",
                "email": "johndoe@gmail.com",
                "role": "user",
                "is_banned": False,
            },
        },
    )
