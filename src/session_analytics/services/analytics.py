"""Analytics use cases over users and sessions."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from session_analytics.domain.models import DeviceType, UserRecord
from session_analytics.domain.sessions import SessionResponse, SessionRow
from session_analytics.domain.users import UserResponse
from session_analytics.errors import NotFoundError
from session_analytics.services.mapping import to_session_response, to_user_response

_logger = logging.getLogger(__name__)

SESSION_CUTOFF = datetime(2025, 1, 1, 0, 0)


class SessionRepository(Protocol):
    """Read interface for session queries."""

    def first_session_by_device_type(
        self, device_type: DeviceType
    ) -> SessionRow | None:
        """Return the earliest session of the device type, if any."""

    def sessions_ended_before_for_active_users(
        self, cutoff: datetime
    ) -> list[SessionRow]:
        """Return sessions of non-deleted users that ended before the cutoff."""


class UserRepository(Protocol):
    """Read interface for user queries."""

    def user_with_most_sessions(self) -> UserRecord | None:
        """Return the user owning the most sessions, if any user has one."""

    def users_with_session_of_device_type(
        self, device_type: DeviceType
    ) -> list[UserRecord]:
        """Return users with at least one session of the device type."""


@dataclass
class AnalyticsService:
    """Application service answering the fixed analytics questions."""

    session_repository: SessionRepository
    user_repository: UserRepository

    def get_first_desktop_session(self) -> SessionResponse:
        """Return the earliest desktop session."""
        row = self.session_repository.first_session_by_device_type(
            DeviceType.DESKTOP
        )
        if row is None:
            _logger.info(
                "No sessions found for device_type=%s", DeviceType.DESKTOP.name
            )
            raise NotFoundError(
                "get_first_desktop_session", "No desktop session found"
            )
        return to_session_response(row)

    def get_sessions_from_active_users_ended_before_cutoff(
        self,
    ) -> list[SessionResponse]:
        """Return sessions of active users that ended before the cutoff."""
        rows = self.session_repository.sessions_ended_before_for_active_users(
            SESSION_CUTOFF
        )
        return [to_session_response(row) for row in rows]

    def get_user_with_most_sessions(self) -> UserResponse:
        """Return the user with the highest session count."""
        user = self.user_repository.user_with_most_sessions()
        if user is None:
            _logger.info("No user with sessions found")
            raise NotFoundError(
                "get_user_with_most_sessions", "No user with sessions found"
            )
        return to_user_response(user)

    def get_users_with_at_least_one_mobile_session(self) -> list[UserResponse]:
        """Return users with a mobile session, most recent first."""
        users = self.user_repository.users_with_session_of_device_type(
            DeviceType.MOBILE
        )
        return [to_user_response(user) for user in users]
