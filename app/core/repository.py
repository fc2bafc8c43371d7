"""Read-only repository pattern implementation.

This module provides the narrow query capability the analytics services
depend on: counting, finding, grouped counts and grouped sums over one
model. Every call opens its own session, so calls may run concurrently.
"""

from collections.abc import Callable, Sequence
from decimal import Decimal
from typing import Any, Generic, TypeVar, cast

import structlog
from sqlalchemy import ColumnElement, Result, Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import InstrumentedAttribute, selectinload

from app.core.exceptions import DataAccessError

ModelType = TypeVar("ModelType")
T = TypeVar("T")

logger = structlog.get_logger(__name__)


class ReadRepository(Generic[ModelType]):
    """Generic read-only repository over a single model.

    Criteria are SQLAlchemy boolean expressions built from the model's
    columns. Any driver, network or SQL failure surfaces as ``DataAccessError``.

    Example:
        ```python
        users = ReadRepository(async_session_factory, User)
        verified = await users.count(User.verified_at >= month_start)
        by_role = await users.group_count_by("role")
        ```
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession], model: type[ModelType]):
        """Initialize repository with a session factory and model class.

        Args:
            session_factory: Factory producing a fresh AsyncSession per query.
            model: The model class this repository reads.
        """
        self.session_factory = session_factory
        self.model = model

    @property
    def resource(self) -> str:
        return cast(str, getattr(self.model, "__tablename__", self.model.__name__))

    def _column(self, field: str) -> InstrumentedAttribute[Any]:
        column = getattr(self.model, field, None)
        if column is None:
            raise DataAccessError(
                f"Unknown field '{field}' on {self.resource}", resource=self.resource
            )
        return cast(InstrumentedAttribute[Any], column)

    async def _execute(self, statement: Select[Any], consume: Callable[[Result[Any]], T]) -> T:
        try:
            async with self.session_factory() as session:
                result = await session.execute(statement)
                return consume(result)
        except (SQLAlchemyError, OSError) as e:
            logger.error("data_access_failed", model=self.resource, error=str(e))
            raise DataAccessError(f"Query on {self.resource} failed", resource=self.resource) from e

    async def count(self, *criteria: ColumnElement[bool]) -> int:
        """Count rows matching all criteria.

        Returns:
            Number of matching rows (0 when nothing matches).
        """
        statement = select(func.count()).select_from(self.model).where(*criteria)  # type: ignore[arg-type]
        total = await self._execute(statement, lambda r: r.scalar())
        return int(total or 0)

    async def find(
        self,
        *criteria: ColumnElement[bool],
        order_by: Sequence[Any] | Any | None = None,
        limit: int | None = None,
        relations: Sequence[str] = (),
    ) -> list[ModelType]:
        """Load full records.

        Args:
            *criteria: Filter expressions.
            order_by: Column expression(s), e.g. ``Booking.created_at.desc()``.
            limit: Maximum number of rows.
            relations: Relationship names to eager-load.

        Returns:
            Detached model instances with the requested relations loaded.
        """
        statement = select(self.model).where(*criteria)
        if order_by is not None:
            clauses = order_by if isinstance(order_by, (list, tuple)) else (order_by,)
            statement = statement.order_by(*clauses)
        if limit is not None:
            statement = statement.limit(limit)
        for name in relations:
            statement = statement.options(selectinload(self._column(name)))

        rows = await self._execute(statement, lambda r: list(r.scalars().all()))
        return cast(list[ModelType], rows)

    async def sum(self, amount_field: str, *criteria: ColumnElement[bool]) -> Decimal:
        """Sum a numeric column over matching rows (``Decimal("0")`` if none)."""
        statement = select(func.sum(self._column(amount_field))).where(*criteria)
        total = await self._execute(statement, lambda r: r.scalar())
        return Decimal(str(total)) if total is not None else Decimal("0")

    async def group_count_by(
        self, field: str, *criteria: ColumnElement[bool]
    ) -> list[tuple[Any, int]]:
        """Return raw ``(label, count)`` rows grouped by ``field``."""
        column = self._column(field)
        statement = select(column, func.count()).where(*criteria).group_by(column)
        return await self._execute(statement, lambda r: [(row[0], row[1]) for row in r.all()])

    async def group_sum_by(
        self, field: str, amount_field: str, *criteria: ColumnElement[bool]
    ) -> list[tuple[Any, Any]]:
        """Return raw ``(label, sum)`` rows grouped by ``field``."""
        column = self._column(field)
        statement = (
            select(column, func.sum(self._column(amount_field))).where(*criteria).group_by(column)
        )
        return await self._execute(statement, lambda r: [(row[0], row[1]) for row in r.all()])
