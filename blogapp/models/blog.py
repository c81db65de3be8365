"""Blog database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import DateTime, Index
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    A blog belongs to the user that created it (``owner_id``) and can be
    banned by a super admin, which hides it from public views.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    __table_args__ = (
        Index("ix_blogs_banned_created", "is_banned", "created_at"),
        Index("ix_blogs_owner_created", "owner_id", "created_at"),
    )

    # Primary key
    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog ID",
    )

    # Foreign key to User
    owner_id: UUID = Field(
        sa_column=Column(
            "owner_id",
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Owner ID (foreign key to users.id)",
    )

    # Required fields
    name: str = Field(
        sa_column=Column(String(15), nullable=False),
        description="Blog name",
    )
    description: str = Field(
        sa_column=Column(String(500), nullable=False),
        description="Blog description",
    )
    website_url: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Blog website URL",
    )

    # Moderation
    is_banned: bool = Field(
        default=False,
        nullable=False,
        description="Whether the blog is banned",
    )
    ban_date: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
        description="When the current ban was applied",
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
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "owner_id": "123e4567-e89b-12d3-a456-426614174000",
                "name": "Travel notes",
                "description": "Notes from the road",
                "website_url": "https://travel-notes.io/",
                "is_banned": False,
            },
        },
    )
