from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.admin.services.statistics_service import StatisticsService
from app.db.session import get_session_factory


def get_statistics_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> StatisticsService:
    """Build a statistics service backed by the shared session factory."""
    return StatisticsService.from_session_factory(session_factory)
