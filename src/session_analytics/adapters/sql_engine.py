"""Engine construction and query execution helpers."""

import logging
from collections.abc import Mapping, Sequence

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, Row
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql.expression import Executable

from session_analytics.config import Settings

_logger = logging.getLogger(__name__)


def create_database_engine(settings: Settings) -> Engine:
    """Create the SQLAlchemy engine described by the settings."""
    connect_args: dict[str, object] = {}
    if settings.database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
    return create_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=settings.database_pool_pre_ping,
        connect_args=connect_args,
    )


def fetch_all(
    engine: Engine,
    statement: Executable,
    params: Mapping[str, object],
    *,
    operation: str,
) -> Sequence[Row]:
    """Run a read-only statement on a fresh connection and return every row.

    Database errors are logged with the operation name and bound parameters
    and re-raised unchanged.
    """
    try:
        with engine.connect() as connection:
            return connection.execute(statement, dict(params)).all()
    except SQLAlchemyError:
        _logger.exception("Query %s failed: params=%s", operation, dict(params))
        raise
