"""SQL-backed user queries."""

from dataclasses import dataclass

from sqlalchemy import Boolean, text
from sqlalchemy.engine import Engine, Row

from session_analytics.adapters.sql_engine import fetch_all
from session_analytics.domain.models import DeviceType, UserRecord
from session_analytics.services.analytics import UserRepository

# Equal counts resolve to the lowest user id.
_USER_WITH_MOST_SESSIONS = text(
    """
    SELECT u.id, u.first_name, u.last_name, u.deleted
    FROM users u
    JOIN sessions s ON s.user_id = u.id
    GROUP BY u.id, u.first_name, u.last_name, u.deleted
    ORDER BY COUNT(s.id) DESC, u.id ASC
    LIMIT 1
"""
).columns(deleted=Boolean)

_USERS_WITH_SESSION_OF_DEVICE_TYPE = text(
    """
    SELECT u.id, u.first_name, u.last_name, u.deleted
    FROM users u
    WHERE u.id IN (
        SELECT s.user_id FROM sessions s WHERE s.device_type = :device_type
    )
    ORDER BY (
        SELECT MAX(s2.started_at_utc)
        FROM sessions s2
        WHERE s2.user_id = u.id AND s2.device_type = :device_type
    ) DESC, u.id ASC
"""
).columns(deleted=Boolean)


@dataclass
class SqlUserRepository(UserRepository):
    """SQL implementation for user queries."""

    engine: Engine

    def user_with_most_sessions(self) -> UserRecord | None:
        """Return the user owning the most sessions, if any user has one."""
        rows = fetch_all(
            self.engine,
            _USER_WITH_MOST_SESSIONS,
            {},
            operation="user_with_most_sessions",
        )
        if rows:
            return _parse_user(rows[0])
        return None

    def users_with_session_of_device_type(
        self, device_type: DeviceType
    ) -> list[UserRecord]:
        """Return users with at least one session of the device type."""
        rows = fetch_all(
            self.engine,
            _USERS_WITH_SESSION_OF_DEVICE_TYPE,
            {"device_type": int(device_type)},
            operation="users_with_session_of_device_type",
        )
        return [_parse_user(row) for row in rows]


def _parse_user(row: Row) -> UserRecord:
    values = row._mapping
    return UserRecord(
        id=int(values["id"]),
        first_name=values["first_name"],
        last_name=values["last_name"],
        deleted=bool(values["deleted"]),
    )
