"""Session query rows and response records."""

from dataclasses import dataclass
from datetime import datetime

from session_analytics.domain.models import DeviceType


@dataclass(frozen=True)
class SessionRow:
    """Raw session row joined with its owner's full name.

    Values are kept exactly as the database driver returned them; coercion
    happens in the row mapper.
    """

    id: object
    started_at_utc: object
    ended_at_utc: object
    device_type: object
    user_id: object
    user_full_name: object


@dataclass(frozen=True)
class SessionResponse:
    """Session projected for API consumers."""

    id: int
    started_at_utc: datetime
    ended_at_utc: datetime | None
    device_type: DeviceType
    user_id: int
    user_full_name: str
