"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from session_analytics.api.schemas import SessionPayload, UserPayload
from session_analytics.app_logging import configure_logging
from session_analytics.containers import AppContainer
from session_analytics.errors import MappingError, NotFoundError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(NotFoundError)
    async def handle_not_found(_request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(MappingError)
    async def handle_mapping_error(
        _request: Request, exc: MappingError
    ) -> JSONResponse:
        logger.exception(
            "Failed to map query row: field=%s value=%r",
            exc.field,
            exc.value,
            exc_info=exc,
        )
        return _internal_error()

    @app.exception_handler(SQLAlchemyError)
    async def handle_database_error(
        _request: Request, exc: SQLAlchemyError
    ) -> JSONResponse:
        logger.error("Request failed on database error: %s", type(exc).__name__)
        return _internal_error()

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/v1/sessions/first-desktop")
    def first_desktop_session(request: Request) -> SessionPayload:
        """Return the earliest desktop session."""
        state_container: AppContainer = request.app.state.container
        session = state_container.analytics_service.get_first_desktop_session()
        return SessionPayload.from_response(session)

    @app.get("/api/v1/sessions/ended-before-cutoff")
    def sessions_ended_before_cutoff(request: Request) -> list[SessionPayload]:
        """Return sessions of active users that ended before the cutoff."""
        state_container: AppContainer = request.app.state.container
        service = state_container.analytics_service
        sessions = service.get_sessions_from_active_users_ended_before_cutoff()
        return [SessionPayload.from_response(session) for session in sessions]

    @app.get("/api/v1/users/most-sessions")
    def user_with_most_sessions(request: Request) -> UserPayload:
        """Return the user with the most sessions."""
        state_container: AppContainer = request.app.state.container
        user = state_container.analytics_service.get_user_with_most_sessions()
        return UserPayload.from_response(user)

    @app.get("/api/v1/users/with-mobile-sessions")
    def users_with_mobile_sessions(request: Request) -> list[UserPayload]:
        """Return users with at least one mobile session."""
        state_container: AppContainer = request.app.state.container
        service = state_container.analytics_service
        users = service.get_users_with_at_least_one_mobile_session()
        return [UserPayload.from_response(user) for user in users]

    return app


def _internal_error() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )
