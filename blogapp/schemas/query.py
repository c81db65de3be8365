"""
List query parameters and paginated envelopes.

Raw query-string values are normalized permissively into a frozen
``ListQuery``: anything missing or malformed falls back to its default
instead of failing the request.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from blogapp.configs.settings import (
    DEFAULT_PAGE_NUMBER,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_NUMBER,
    MAX_PAGE_SIZE,
)
from blogapp.utils.helpers import pages_count

T = TypeVar("T")


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"


class BanStatus(StrEnum):
    """Moderation filter for admin listings."""

    ALL = "all"
    BANNED = "banned"
    NOT_BANNED = "notBanned"


class BlogSortField(StrEnum):
    ID = "id"
    NAME = "name"
    DESCRIPTION = "description"
    WEBSITE_URL = "websiteUrl"
    CREATED_AT = "createdAt"


class PostSortField(StrEnum):
    ID = "id"
    TITLE = "title"
    SHORT_DESCRIPTION = "shortDescription"
    CONTENT = "content"
    BLOG_ID = "blogId"
    BLOG_NAME = "blogName"
    CREATED_AT = "createdAt"


class UserSortField(StrEnum):
    ID = "id"
    LOGIN = "login"
    EMAIL = "email"
    CREATED_AT = "createdAt"


def _positive_int(raw: str | int | None, default: int, ceiling: int) -> int:
    """
    Parse a positive integer, falling back to ``default`` on anything else.

    Values above ``ceiling`` are clamped to it.
    """
    if raw is None:
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return default
    if value <= 0:
        return default
    return min(value, ceiling)


def _enum_or_default[E: StrEnum](enum_cls: type[E], raw: str | None, default: E) -> E:
    if raw is None:
        return default
    try:
        return enum_cls(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class ListQuery:
    """
    Canonical descriptor of a list request.

    Attributes:
        page: 1-based page number.
        size: Page size.
        sort_field: Member of the resource's sort-field enum.
        sort_dir: Sort direction.
        search_terms: Non-empty search terms keyed by the column alias they
            apply to (e.g. ``{"login": "ad"}``).
        status_filter: Moderation filter, only honoured by admin listings.
    """

    page: int = DEFAULT_PAGE_NUMBER
    size: int = DEFAULT_PAGE_SIZE
    sort_field: StrEnum = BlogSortField.CREATED_AT
    sort_dir: SortDirection = SortDirection.DESC
    search_terms: tuple[tuple[str, str], ...] = ()
    status_filter: BanStatus = BanStatus.ALL

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size

    @property
    def terms(self) -> dict[str, str]:
        return dict(self.search_terms)

    @classmethod
    def from_raw[E: StrEnum](
        cls,
        sort_enum: type[E],
        *,
        page_number: str | int | None = None,
        page_size: str | int | None = None,
        sort_by: str | None = None,
        sort_direction: str | None = None,
        search: dict[str, str | None] | None = None,
        ban_status: str | None = None,
        default_sort: E | None = None,
    ) -> "ListQuery":
        """
        Normalize raw query-string values.

        Args:
            sort_enum: Closed set of sort fields for the resource.
            page_number: Raw ``pageNumber``.
            page_size: Raw ``pageSize``.
            sort_by: Raw ``sortBy``; unknown names use ``default_sort``.
            sort_direction: Raw ``sortDirection``; unknown values mean desc.
            search: Search terms by column alias; empty ones are dropped.
            ban_status: Raw ``banStatus``; unknown values mean all.
            default_sort: Resource default sort field (``createdAt``).

        Returns:
            ListQuery: Frozen canonical descriptor.
        """
        fallback_sort = default_sort or sort_enum("createdAt")
        terms = tuple(
            (alias, term)
            for alias, term in (search or {}).items()
            if term is not None and term != ""
        )
        return cls(
            page=_positive_int(page_number, DEFAULT_PAGE_NUMBER, MAX_PAGE_NUMBER),
            size=_positive_int(page_size, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE),
            sort_field=_enum_or_default(sort_enum, sort_by, fallback_sort),
            sort_dir=_enum_or_default(SortDirection, sort_direction, SortDirection.DESC),
            search_terms=terms,
            status_filter=_enum_or_default(BanStatus, ban_status, BanStatus.ALL),
        )


class Page(BaseModel, Generic[T]):
    """Paginated envelope returned by every list endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    pages_count: int = Field(alias="pagesCount", ge=0)
    page: int = Field(ge=1)
    page_size: int = Field(alias="pageSize", ge=1)
    total_count: int = Field(alias="totalCount", ge=0)
    items: list[T] = Field(default_factory=list)

    @classmethod
    def of(cls, query: ListQuery, total_count: int, items: list[T]) -> "Page[T]":
        """Wrap one page of ``items`` with counts derived from ``query``."""
        return cls(
            pages_count=pages_count(total_count, query.size),
            page=query.page,
            page_size=query.size,
            total_count=total_count,
            items=items,
        )
