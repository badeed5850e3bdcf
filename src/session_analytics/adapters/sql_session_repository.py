"""SQL-backed session queries.

Timestamps are returned as the driver delivers them and parsed by the row
mapper. A session whose owner row is missing comes back with a NULL full name.
"""

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import DateTime, bindparam, text
from sqlalchemy.engine import Engine, Row

from session_analytics.adapters.sql_engine import fetch_all
from session_analytics.domain.models import DeviceType
from session_analytics.domain.sessions import SessionRow
from session_analytics.services.analytics import SessionRepository

_SESSION_COLUMNS = """
    SELECT
        s.id,
        s.started_at_utc,
        s.ended_at_utc,
        s.device_type,
        s.user_id,
        u.first_name || ' ' || u.last_name AS user_full_name
    FROM sessions s
    LEFT JOIN users u ON s.user_id = u.id
"""

_FIRST_SESSION_BY_DEVICE_TYPE = text(
    _SESSION_COLUMNS
    + """
    WHERE s.device_type = :device_type
    ORDER BY s.started_at_utc ASC, s.id ASC
    LIMIT 1
"""
)

# Open sessions have no end time and never qualify.
_SESSIONS_ENDED_BEFORE_FOR_ACTIVE_USERS = (
    text(
        _SESSION_COLUMNS
        + """
    WHERE s.device_type IN (:mobile, :desktop)
      AND u.deleted = FALSE
      AND s.ended_at_utc IS NOT NULL
      AND s.ended_at_utc < :cutoff
    ORDER BY s.started_at_utc DESC, s.id DESC
"""
    )
    .bindparams(bindparam("cutoff", type_=DateTime))
)


@dataclass
class SqlSessionRepository(SessionRepository):
    """SQL implementation for session queries."""

    engine: Engine

    def first_session_by_device_type(
        self, device_type: DeviceType
    ) -> SessionRow | None:
        """Return the earliest session of the device type, if any."""
        rows = fetch_all(
            self.engine,
            _FIRST_SESSION_BY_DEVICE_TYPE,
            {"device_type": int(device_type)},
            operation="first_session_by_device_type",
        )
        if rows:
            return _parse_row(rows[0])
        return None

    def sessions_ended_before_for_active_users(
        self, cutoff: datetime
    ) -> list[SessionRow]:
        """Return sessions of non-deleted users that ended before the cutoff."""
        rows = fetch_all(
            self.engine,
            _SESSIONS_ENDED_BEFORE_FOR_ACTIVE_USERS,
            {
                "mobile": int(DeviceType.MOBILE),
                "desktop": int(DeviceType.DESKTOP),
                "cutoff": cutoff,
            },
            operation="sessions_ended_before_for_active_users",
        )
        return [_parse_row(row) for row in rows]


def _parse_row(row: Row) -> SessionRow:
    values = row._mapping
    return SessionRow(
        id=values["id"],
        started_at_utc=values["started_at_utc"],
        ended_at_utc=values["ended_at_utc"],
        device_type=values["device_type"],
        user_id=values["user_id"],
        user_full_name=values["user_full_name"],
    )
