"""Shared test fixtures."""

from collections.abc import Iterator
from dataclasses import asdict, dataclass, field
from datetime import datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from session_analytics.adapters.sql_schema import (
    create_schema,
    sessions_table,
    users_table,
)
from session_analytics.config import Settings
from session_analytics.containers import AppContainer
from session_analytics.domain.models import DeviceType, SessionRecord, UserRecord
from session_analytics.domain.sessions import SessionRow
from session_analytics.services.analytics import (
    AnalyticsService,
    SessionRepository,
    UserRepository,
)


@dataclass
class InMemorySessionRepository(SessionRepository):
    """In-memory session repository returning canned rows."""

    first_rows: dict[DeviceType, SessionRow] = field(default_factory=dict)
    ended_rows: list[SessionRow] = field(default_factory=list)
    cutoffs: list[datetime] = field(default_factory=list)

    def first_session_by_device_type(
        self, device_type: DeviceType
    ) -> SessionRow | None:
        return self.first_rows.get(device_type)

    def sessions_ended_before_for_active_users(
        self, cutoff: datetime
    ) -> list[SessionRow]:
        self.cutoffs.append(cutoff)
        return list(self.ended_rows)


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository returning canned users."""

    top_user: UserRecord | None = None
    users_by_device: dict[DeviceType, list[UserRecord]] = field(default_factory=dict)
    requested_devices: list[DeviceType] = field(default_factory=list)

    def user_with_most_sessions(self) -> UserRecord | None:
        return self.top_user

    def users_with_session_of_device_type(
        self, device_type: DeviceType
    ) -> list[UserRecord]:
        self.requested_devices.append(device_type)
        return list(self.users_by_device.get(device_type, []))


def make_row(**overrides: object) -> SessionRow:
    values: dict[str, object] = {
        "id": 1,
        "started_at_utc": datetime(2024, 1, 1, 9, 0),
        "ended_at_utc": datetime(2024, 1, 1, 10, 0),
        "device_type": 2,
        "user_id": 10,
        "user_full_name": "Ada Lovelace",
    }
    values.update(overrides)
    return SessionRow(**values)


def seed(
    engine: Engine,
    users: list[UserRecord],
    sessions: list[SessionRecord],
) -> None:
    with engine.begin() as connection:
        if users:
            connection.execute(
                users_table.insert(), [asdict(user) for user in users]
            )
        if sessions:
            connection.execute(
                sessions_table.insert(),
                [
                    {**asdict(session), "device_type": int(session.device_type)}
                    for session in sessions
                ],
            )


@pytest.fixture
def settings() -> Settings:
    return Settings(database_url="sqlite://")


@pytest.fixture
def engine() -> Iterator[Engine]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_repository() -> InMemorySessionRepository:
    return InMemorySessionRepository()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def container(
    settings: Settings,
    session_repository: InMemorySessionRepository,
    user_repository: InMemoryUserRepository,
) -> AppContainer:
    analytics_service = AnalyticsService(
        session_repository=session_repository,
        user_repository=user_repository,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        analytics_service=analytics_service,
        close_resources=close_resources,
    )
