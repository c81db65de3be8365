"""Post database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Index
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String


class PostDB(SQLModel, table=True):
    """Post database model; every post belongs to exactly one blog."""

    __tablename__ = cast("declared_attr[str]", "posts")

    __table_args__ = (Index("ix_posts_blog_created", "blog_id", "created_at"),)

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Post ID",
    )
    blog_id: UUID = Field(
        sa_column=Column(
            "blog_id",
            ForeignKey("blogs.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Owning blog ID (foreign key to blogs.id)",
    )
    title: str = Field(
        sa_column=Column(String(30), nullable=False),
        description="Post title",
    )
    short_description: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Post short description",
    )
    content: str = Field(
        sa_column=Column(String(1000), nullable=False),
        description="Post content",
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Creation timestamp",
    )
