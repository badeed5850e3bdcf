"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from session_analytics.adapters.sql_engine import create_database_engine
from session_analytics.adapters.sql_session_repository import SqlSessionRepository
from session_analytics.adapters.sql_user_repository import SqlUserRepository
from session_analytics.config import Settings
from session_analytics.services.analytics import AnalyticsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    analytics_service: AnalyticsService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    engine = create_database_engine(resolved_settings)
    analytics_service = AnalyticsService(
        session_repository=SqlSessionRepository(engine),
        user_repository=SqlUserRepository(engine),
    )

    async def close_resources() -> None:
        engine.dispose()

    return AppContainer(
        settings=resolved_settings,
        analytics_service=analytics_service,
        close_resources=close_resources,
    )
