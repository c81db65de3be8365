"""Base repository for database operations."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any
from uuid import UUID

from sqlalchemy import Row, Select, String, delete, func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute
from sqlmodel import SQLModel

from blogapp.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
)
from blogapp.schemas.query import BanStatus, ListQuery, SortDirection

type FilterValue = str | int | float | bool | UUID | datetime | None
type Column = InstrumentedAttribute[Any]


@dataclass(frozen=True)
class PageResult:
    """Rows of one page plus the total number of matching rows."""

    rows: list[Row[Any]]
    total_count: int


class BaseRepository[ModelT: SQLModel]:
    """
    Base repository implementing common persistence operations.

    Subclasses set ``model`` and get lookups, rowcount-returning updates and
    deletes, and the paginated collection query shared by every listing.

    Attributes:
        model: The SQLModel database model type.
        id_field: The name of the primary key field (default: "id").
    """

    model: type[ModelT]
    id_field: str = "id"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    @property
    def id_column(self) -> Column:
        return getattr(self.model, self.id_field)

    async def add(self, record: ModelT) -> ModelT:
        """
        Insert a new record.

        Args:
            record: Unsaved model instance

        Returns:
            ModelT: The stored record, refreshed from the database
        """
        return await self._add_and_refresh(record)

    async def get_by_id(self, record_id: UUID) -> ModelT | None:
        """
        Get a record by its ID.

        Args:
            record_id: Record UUID

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        statement = select(self.model).where(self.id_column == record_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def update_fields(self, record_id: UUID, **values: Any) -> bool:
        """
        Update columns of a single record in one statement.

        Args:
            record_id: Record UUID
            **values: Column values to set

        Returns:
            bool: True if a row matched, False if the record does not exist
        """
        statement = update(self.model).where(self.id_column == record_id).values(**values)
        result = await self.session.execute(statement)
        return result.rowcount > 0

    async def delete_by_id(self, record_id: UUID) -> bool:
        """
        Delete a record by ID.

        Returns:
            bool: True if record was deleted, False if not found
        """
        statement = delete(self.model).where(self.id_column == record_id)
        result = await self.session.execute(statement)
        return result.rowcount > 0

    async def find_page(
        self,
        statement: Select[Any],
        query: ListQuery,
        *,
        search_columns: Mapping[str, Column],
        sort_columns: Mapping[StrEnum, Column],
        ban_column: Column | None = None,
    ) -> PageResult:
        """
        Run a filtered, sorted and paginated collection query.

        The base predicate is whatever ``statement`` already filters on.
        On top of it this applies the moderation filter (when ``ban_column``
        is given) and the OR of case-insensitive substring matches of every
        search term against its column.

        Args:
            statement: Base SELECT, possibly joined and filtered.
            query: Normalized list query.
            search_columns: Column per search-term alias.
            sort_columns: Column per member of the resource's sort enum.
            ban_column: Moderation flag honoured by ``query.status_filter``.

        Returns:
            PageResult: The rows of the requested page and the total count.
        """
        if ban_column is not None:
            if query.status_filter is BanStatus.BANNED:
                statement = statement.where(ban_column.is_(True))
            elif query.status_filter is BanStatus.NOT_BANNED:
                statement = statement.where(ban_column.is_(False))

        matches = [
            search_columns[alias].icontains(term, autoescape=True)
            for alias, term in query.search_terms
            if alias in search_columns
        ]
        if matches:
            statement = statement.where(or_(*matches))

        count_statement = select(func.count()).select_from(
            statement.order_by(None).subquery(),
        )
        total_count = (await self.session.execute(count_statement)).scalar_one()
        if query.offset >= total_count:
            return PageResult(rows=[], total_count=total_count)

        statement = statement.order_by(*self._ordering(query, sort_columns))
        statement = statement.offset(query.offset).limit(query.size)
        result = await self.session.execute(statement)
        return PageResult(rows=list(result.all()), total_count=total_count)

    def _ordering(
        self,
        query: ListQuery,
        sort_columns: Mapping[StrEnum, Column],
    ) -> list[Any]:
        column = sort_columns[query.sort_field]
        # Text sorts ignore case; the id tie-breaker keeps pages stable
        key = func.lower(column) if isinstance(column.type, String) else column
        if query.sort_dir is SortDirection.ASC:
            return [key.asc(), self.id_column.asc()]
        return [key.desc(), self.id_column.desc()]

    async def _add_and_refresh(self, record: ModelT) -> ModelT:
        """
        Add a record and refresh it from the database with error handling.

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: For other database errors
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
            return record
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            if "unique" in error_msg.lower() or "duplicate" in error_msg.lower():
                raise DuplicateEntryError(detail=error_msg) from e
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e
        except Exception as e:
            await self.session.rollback()
            raise DatabaseConnectionError(
                detail=f"Failed to save record: {e}",
            ) from e

    async def _check_exists_by_field(
        self,
        field_name: str,
        value: FilterValue,
        exclude_id: UUID | None = None,
    ) -> bool:
        """
        Check if a record exists with a specific field value.

        Args:
            field_name: Name of the field to check
            value: Value to check for
            exclude_id: Optional ID to exclude from check (for updates)

        Returns:
            bool: True if record exists, False otherwise
        """
        field = getattr(self.model, field_name)
        statement = select(1).where(field == value)

        if exclude_id is not None:
            statement = statement.where(self.id_column != exclude_id)

        statement = statement.limit(1)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none() is not None
