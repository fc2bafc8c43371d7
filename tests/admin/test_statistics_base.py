"""Unit tests for period windows and concurrent query fan-out."""

import asyncio
from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from app.admin.services.statistics.base import (
    Period,
    TimeWindow,
    compute_windows,
    gather_queries,
    parse_period,
    start_of_previous_month,
)
from app.core.config import settings
from app.core.exceptions import DataAccessError, InvalidPeriodError

NOW = datetime(2026, 3, 15, 12, 30, tzinfo=UTC)


class TestParsePeriod:
    """Tests for parse_period function."""

    def test_accepts_tokens(self):
        assert parse_period("daily") == Period.DAILY
        assert parse_period("weekly") == Period.WEEKLY
        assert parse_period("monthly") == Period.MONTHLY

    def test_passes_enum_through(self):
        assert parse_period(Period.WEEKLY) is Period.WEEKLY

    def test_rejects_unknown_token(self):
        with pytest.raises(InvalidPeriodError) as exc_info:
            parse_period("yearly")

        assert exc_info.value.error_code == "INVALID_PERIOD"
        assert exc_info.value.status_code == 400
        assert exc_info.value.period == "yearly"
        assert exc_info.value.details["allowed"] == ["daily", "weekly", "monthly"]

    def test_tokens_are_case_sensitive(self):
        with pytest.raises(InvalidPeriodError):
            parse_period("Monthly")


class TestTimeWindow:
    """Tests for TimeWindow."""

    def test_start_after_end_rejected(self):
        with pytest.raises(ValueError):
            TimeWindow(NOW, NOW - timedelta(seconds=1))

    def test_empty_window_allowed(self):
        window = TimeWindow(NOW, NOW)
        assert window.start == window.end


class TestComputeWindows:
    """Tests for compute_windows function."""

    def test_daily(self):
        windows = compute_windows(Period.DAILY, NOW)

        assert windows.current.start == datetime(2026, 3, 15, tzinfo=UTC)
        assert windows.current.end == NOW
        assert windows.previous.start == datetime(2026, 3, 14, tzinfo=UTC)
        assert windows.previous.end == windows.current.start

    def test_weekly_windows_are_seven_days_and_contiguous(self):
        windows = compute_windows("weekly", NOW)

        assert windows.current.end == NOW
        assert windows.current.end - windows.current.start == timedelta(days=7)
        assert windows.previous.end - windows.previous.start == timedelta(days=7)
        assert windows.previous.end == windows.current.start

    def test_monthly_compares_with_whole_previous_month(self):
        windows = compute_windows(Period.MONTHLY, NOW)

        assert windows.current.start == datetime(2026, 3, 1, tzinfo=UTC)
        assert windows.current.end == NOW
        assert windows.previous.start == datetime(2026, 2, 1, tzinfo=UTC)
        assert windows.previous.end == datetime(2026, 3, 1, tzinfo=UTC)

    def test_monthly_january_rolls_back_to_december(self):
        windows = compute_windows(Period.MONTHLY, datetime(2026, 1, 15, tzinfo=UTC))

        assert windows.previous.start == datetime(2025, 12, 1, tzinfo=UTC)
        assert windows.previous.end == datetime(2026, 1, 1, tzinfo=UTC)

    def test_monthly_leap_february(self):
        windows = compute_windows(Period.MONTHLY, datetime(2024, 3, 10, tzinfo=UTC))

        assert windows.previous.end - windows.previous.start == timedelta(days=29)

    def test_first_instant_of_month_gives_empty_current_window(self):
        month_start = datetime(2026, 3, 1, tzinfo=UTC)
        windows = compute_windows(Period.MONTHLY, month_start)

        assert windows.current.start == windows.current.end == month_start
        assert windows.previous.start == datetime(2026, 2, 1, tzinfo=UTC)

    def test_naive_now_treated_as_utc(self):
        windows = compute_windows(Period.DAILY, datetime(2026, 3, 15, 12, 30))

        assert windows.current.start == datetime(2026, 3, 15, tzinfo=UTC)
        assert windows.current.end.tzinfo is not None

    def test_windows_never_invert(self):
        for period in Period:
            windows = compute_windows(period, NOW)
            assert windows.previous.start <= windows.previous.end <= windows.current.end
            assert windows.current.start <= windows.current.end

    def test_invalid_period(self):
        with pytest.raises(InvalidPeriodError):
            compute_windows("quarterly", NOW)

    def test_start_of_previous_month(self):
        assert start_of_previous_month(datetime(2026, 1, 31, 23, tzinfo=UTC)) == datetime(
            2025, 12, 1, tzinfo=UTC
        )
        assert start_of_previous_month(datetime(2026, 7, 4, tzinfo=UTC)) == datetime(
            2026, 6, 1, tzinfo=UTC
        )


class TestGatherQueries:
    """Tests for gather_queries function."""

    @pytest.mark.asyncio
    async def test_results_keep_query_order(self):
        async def delayed(value, delay):
            await asyncio.sleep(delay)
            return value

        results = await gather_queries(delayed("a", 0.03), delayed("b", 0), delayed("c", 0.01))

        assert results == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_no_queries(self):
        assert await gather_queries() == []

    @pytest.mark.asyncio
    async def test_failure_is_raised_unwrapped(self):
        failing = AsyncMock(side_effect=DataAccessError("boom", resource="payments"))
        succeeding = AsyncMock(return_value=3)

        with pytest.raises(DataAccessError) as exc_info:
            await gather_queries(succeeding(), failing())

        assert exc_info.value.details == {"resource": "payments"}

    @pytest.mark.asyncio
    async def test_failure_cancels_pending_queries(self):
        cancelled = asyncio.Event()

        async def slow():
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                cancelled.set()
                raise

        async def failing():
            raise DataAccessError("boom")

        with pytest.raises(DataAccessError):
            await gather_queries(slow(), failing())

        assert cancelled.is_set()

    @pytest.mark.asyncio
    async def test_caller_cancellation_cancels_all_queries(self):
        started = 0
        cancelled = 0

        async def slow():
            nonlocal started, cancelled
            started += 1
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                cancelled += 1
                raise
            return "finished"

        report = asyncio.create_task(gather_queries(slow(), slow()))
        while started < 2:
            await asyncio.sleep(0)

        report.cancel()

        with pytest.raises(asyncio.CancelledError):
            await report
        assert cancelled == 2

    @pytest.mark.asyncio
    async def test_unexpected_error_propagates(self):
        async def broken():
            raise RuntimeError("unexpected")

        with pytest.raises(RuntimeError, match="unexpected"):
            await gather_queries(broken(), report="dashboard_stats")

    @pytest.mark.asyncio
    async def test_timeout_becomes_data_access_error(self, monkeypatch):
        monkeypatch.setattr(settings, "ANALYTICS_QUERY_TIMEOUT_SECONDS", 0.01)

        async def hanging():
            await asyncio.sleep(10)

        with pytest.raises(DataAccessError, match="timed out"):
            await gather_queries(hanging(), report="revenue_overview")
