"""Tests for admin statistics API routes."""

from unittest.mock import AsyncMock, patch

import pytest
from httpx import AsyncClient

from app.admin.services.statistics_service import StatisticsService
from app.core.exceptions import DataAccessError

BASE_URL = "/api/v1/admin/dashboard"


class TestDashboardStatsRoute:
    """Tests for GET /admin/dashboard/stats."""

    @pytest.mark.asyncio
    async def test_camel_case_payload(self, test_client: AsyncClient, seeded):
        response = await test_client.get(f"{BASE_URL}/stats")

        assert response.status_code == 200
        data = response.json()
        assert set(data) == {
            "totalUsers",
            "newUsersToday",
            "totalHostels",
            "verifiedHostels",
            "totalBookings",
            "activeBookings",
            "totalRevenue",
            "revenueThisMonth",
            "userGrowth",
            "bookingGrowth",
            "revenueGrowth",
        }
        assert data["totalUsers"] == 5
        assert data["totalHostels"] == 3
        assert data["activeBookings"] == 1

    @pytest.mark.asyncio
    async def test_data_access_failure(self, test_client: AsyncClient):
        failing = AsyncMock(side_effect=DataAccessError("Query on users failed", resource="users"))

        with patch.object(StatisticsService, "get_dashboard_stats", failing):
            response = await test_client.get(f"{BASE_URL}/stats")

        assert response.status_code == 503
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "DATA_ACCESS_ERROR"
        assert body["error"]["details"] == {"resource": "users"}


class TestOverviewRoutes:
    """Tests for the overview endpoints."""

    @pytest.mark.asyncio
    async def test_users_overview(self, test_client: AsyncClient, seeded):
        response = await test_client.get(f"{BASE_URL}/users/overview")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 5
        assert sum(data["byRole"].values()) == 5

    @pytest.mark.asyncio
    async def test_bookings_overview(self, test_client: AsyncClient, seeded):
        response = await test_client.get(f"{BASE_URL}/bookings/overview")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 4
        assert data["byStatus"]["checked_in"] == 1
        assert data["byType"] == {"semester": 3, "monthly": 1}

    @pytest.mark.asyncio
    async def test_hostels_overview_empty(self, test_client: AsyncClient):
        response = await test_client.get(f"{BASE_URL}/hostels/overview")

        assert response.status_code == 200
        assert response.json() == {
            "total": 0,
            "verified": 0,
            "acceptingBookings": 0,
            "verificationRate": 0.0,
            "byVerificationStatus": {},
            "byBookingStatus": {},
        }

    @pytest.mark.asyncio
    async def test_revenue_overview_default_period(self, test_client: AsyncClient):
        response = await test_client.get(f"{BASE_URL}/revenue/overview")

        assert response.status_code == 200
        data = response.json()
        assert data["period"] == "monthly"
        assert data["total"] == 0.0
        assert data["growth"] == 0.0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("period", ["daily", "weekly", "monthly"])
    async def test_revenue_overview_periods(self, test_client: AsyncClient, period):
        response = await test_client.get(f"{BASE_URL}/revenue/overview", params={"period": period})

        assert response.status_code == 200
        assert response.json()["period"] == period

    @pytest.mark.asyncio
    async def test_revenue_overview_invalid_period(self, test_client: AsyncClient):
        response = await test_client.get(
            f"{BASE_URL}/revenue/overview", params={"period": "yearly"}
        )

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "INVALID_PERIOD"
        assert error["details"]["field"] == "period"
        assert error["details"]["allowed"] == ["daily", "weekly", "monthly"]


class TestRecentActivitiesRoute:
    """Tests for GET /admin/dashboard/recent-activities."""

    @pytest.mark.asyncio
    async def test_feed(self, test_client: AsyncClient, seeded):
        response = await test_client.get(f"{BASE_URL}/recent-activities", params={"limit": 3})

        assert response.status_code == 200
        feed = response.json()
        assert len(feed) == 3
        timestamps = [item["timestamp"] for item in feed]
        assert timestamps == sorted(timestamps, reverse=True)
        assert all(item["timestamp"].endswith("+00:00") for item in feed)

    @pytest.mark.asyncio
    async def test_default_limit(self, test_client: AsyncClient, seeded):
        response = await test_client.get(f"{BASE_URL}/recent-activities")

        assert response.status_code == 200
        # 4 verified users + 4 bookings + 5 payments, each source capped at 5
        assert len(response.json()) == 10

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", [0, -5, 51, "ten"])
    async def test_invalid_limit(self, test_client: AsyncClient, limit):
        response = await test_client.get(f"{BASE_URL}/recent-activities", params={"limit": limit})

        assert response.status_code == 422


class TestServiceRoutes:
    @pytest.mark.asyncio
    async def test_root(self, test_client: AsyncClient):
        response = await test_client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "running"
