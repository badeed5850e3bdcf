"""Pydantic payload models for API responses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from session_analytics.domain.sessions import SessionResponse
from session_analytics.domain.users import UserResponse


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SessionPayload(CamelModel):
    """Session response payload."""

    id: int
    started_at_utc: datetime
    ended_at_utc: datetime | None = None
    device_type: str
    user_id: int
    user_full_name: str

    @classmethod
    def from_response(cls, session: SessionResponse) -> "SessionPayload":
        return cls(
            id=session.id,
            started_at_utc=session.started_at_utc,
            ended_at_utc=session.ended_at_utc,
            device_type=session.device_type.name,
            user_id=session.user_id,
            user_full_name=session.user_full_name,
        )


class UserPayload(CamelModel):
    """User response payload."""

    id: int
    first_name: str
    last_name: str
    deleted: bool

    @classmethod
    def from_response(cls, user: UserResponse) -> "UserPayload":
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            deleted=user.deleted,
        )
