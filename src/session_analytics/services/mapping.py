"""Row-to-response mapping for analytics results."""

from datetime import UTC, datetime
from decimal import Decimal

from session_analytics.domain.models import DeviceType, UserRecord
from session_analytics.domain.sessions import SessionResponse, SessionRow
from session_analytics.domain.users import UserResponse
from session_analytics.errors import MappingError


def to_session_response(row: SessionRow) -> SessionResponse:
    """Convert a raw session row into a session response.

    Raises MappingError when a value cannot be coerced, including an unknown
    device type code or a missing owner name.
    """
    return SessionResponse(
        id=_coerce_int("id", row.id),
        started_at_utc=_coerce_timestamp("started_at_utc", row.started_at_utc),
        ended_at_utc=_coerce_optional_timestamp("ended_at_utc", row.ended_at_utc),
        device_type=_decode_device_type(row.device_type),
        user_id=_coerce_int("user_id", row.user_id),
        user_full_name=_require_full_name(row.user_full_name),
    )


def to_user_response(user: UserRecord) -> UserResponse:
    """Copy a user record into its response shape."""
    return UserResponse(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        deleted=user.deleted,
    )


def _coerce_int(field: str, value: object) -> int:
    if isinstance(value, bool):
        raise MappingError(field, value, "expected an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, Decimal) and value.is_finite() and value == int(value):
        return int(value)
    raise MappingError(field, value, "expected an integer")


def _coerce_timestamp(field: str, value: object) -> datetime:
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            raise MappingError(field, value, "malformed timestamp") from None
    else:
        raise MappingError(field, value, "expected a timestamp")
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(UTC).replace(tzinfo=None)
    return parsed


def _coerce_optional_timestamp(field: str, value: object) -> datetime | None:
    if value is None:
        return None
    return _coerce_timestamp(field, value)


def _decode_device_type(value: object) -> DeviceType:
    code = _coerce_int("device_type", value)
    try:
        return DeviceType.from_code(code)
    except ValueError as exc:
        raise MappingError("device_type", value, str(exc)) from None


def _require_full_name(value: object) -> str:
    if not isinstance(value, str):
        raise MappingError("user_full_name", value, "session has no owning user")
    return value
