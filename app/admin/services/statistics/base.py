"""Period windows and concurrent query helpers for statistics services."""

import asyncio
import time
from collections.abc import Coroutine
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Any

import structlog
from sqlalchemy import ColumnElement, and_

from app.core.config import settings
from app.core.datetime_utils import ensure_utc
from app.core.exceptions import DataAccessError, InvalidPeriodError

logger = structlog.get_logger(__name__)


class Period(str, Enum):
    """Comparison granularity for period-over-period reports."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


@dataclass(frozen=True)
class TimeWindow:
    """Half-open interval ``[start, end)``, applied to queries with ``in_window``."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"Window start {self.start} is after end {self.end}")


@dataclass(frozen=True)
class PeriodPair:
    """Current window and the window it is compared against."""

    current: TimeWindow
    previous: TimeWindow


def parse_period(period: Period | str) -> Period:
    """Convert a period token into a Period.

    Raises:
        InvalidPeriodError: If the token is not daily, weekly or monthly.
    """
    if isinstance(period, Period):
        return period
    try:
        return Period(period)
    except ValueError:
        raise InvalidPeriodError(period, allowed=[p.value for p in Period]) from None


def start_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def start_of_month(moment: datetime) -> datetime:
    return start_of_day(moment).replace(day=1)


def start_of_previous_month(moment: datetime) -> datetime:
    month_start = start_of_month(moment)
    if month_start.month == 1:
        return month_start.replace(year=month_start.year - 1, month=12)
    return month_start.replace(month=month_start.month - 1)


def compute_windows(period: Period | str, now: datetime) -> PeriodPair:
    """Get the current window and its comparison window for a period.

    Args:
        period: daily, weekly or monthly.
        now: Reference instant; naive values are treated as UTC.

    Returns:
        PeriodPair where, for daily and weekly, ``previous.end == current.start``.
        For monthly the previous window is the whole preceding calendar month
        while the current one is the month so far.

    Raises:
        InvalidPeriodError: If ``period`` is not a supported token.
    """
    period = parse_period(period)
    now = ensure_utc(now)

    if period == Period.DAILY:
        today_start = start_of_day(now)
        return PeriodPair(
            current=TimeWindow(today_start, now),
            previous=TimeWindow(today_start - timedelta(days=1), today_start),
        )
    elif period == Period.WEEKLY:
        week_start = now - timedelta(days=7)
        return PeriodPair(
            current=TimeWindow(week_start, now),
            previous=TimeWindow(week_start - timedelta(days=7), week_start),
        )
    else:
        month_start = start_of_month(now)
        return PeriodPair(
            current=TimeWindow(month_start, now),
            previous=TimeWindow(start_of_previous_month(now), month_start),
        )


def in_window(column: Any, window: TimeWindow) -> ColumnElement[bool]:
    """Build a ``start <= column < end`` filter."""
    return and_(column >= window.start, column < window.end)


async def gather_queries(*queries: Coroutine[Any, Any, Any], report: str = "report") -> list[Any]:
    """Run independent read queries concurrently and wait for all of them.

    If any query fails, the remaining ones are cancelled and the first
    failure is raised as-is, so no partial result ever reaches the caller.

    Args:
        *queries: Coroutines, one per query.
        report: Name used in log lines.

    Returns:
        Query results in the order the queries were given.

    Raises:
        DataAccessError: If a query fails or the fan-out exceeds
            ``ANALYTICS_QUERY_TIMEOUT_SECONDS``.
    """
    start = time.perf_counter()
    try:
        async with asyncio.timeout(settings.ANALYTICS_QUERY_TIMEOUT_SECONDS):
            async with asyncio.TaskGroup() as group:
                tasks = [group.create_task(query) for query in queries]
    except TimeoutError:
        logger.error("report_timed_out", report=report, queries=len(queries))
        raise DataAccessError(f"Queries for {report} timed out") from None
    except ExceptionGroup as eg:
        logger.error("report_failed", report=report, errors=[str(e) for e in eg.exceptions])
        raise eg.exceptions[0]

    logger.debug(
        "report_queries_completed",
        report=report,
        queries=len(queries),
        duration_ms=round((time.perf_counter() - start) * 1000, 2),
    )
    return [task.result() for task in tasks]

