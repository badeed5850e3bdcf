"""Domain models for users and sessions."""

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum


class DeviceType(IntEnum):
    """Device that originated a session, stored as an integer code."""

    MOBILE = 1
    DESKTOP = 2

    @classmethod
    def from_code(cls, code: int) -> "DeviceType":
        """Decode a stored code, rejecting anything outside the enumeration."""
        if isinstance(code, bool) or not isinstance(code, int):
            raise ValueError(f"Device type code must be an integer, got {code!r}")
        try:
            return cls(code)
        except ValueError:
            raise ValueError(f"Unknown device type code: {code}") from None


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: int
    first_name: str
    last_name: str
    deleted: bool


@dataclass(frozen=True)
class SessionRecord:
    """Represents a persisted user session."""

    id: int
    started_at_utc: datetime
    ended_at_utc: datetime | None
    device_type: DeviceType
    user_id: int
