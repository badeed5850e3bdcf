"""SQLAlchemy table metadata for the users and sessions tables."""

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
)
from sqlalchemy.engine import Engine

metadata = MetaData()

users_table = Table(
    "users",
    metadata,
    Column("id", BigInteger().with_variant(Integer, "sqlite"), primary_key=True),
    Column("first_name", String(255), nullable=False),
    Column("last_name", String(255), nullable=False),
    Column("deleted", Boolean, nullable=False, default=False),
)

sessions_table = Table(
    "sessions",
    metadata,
    Column("id", BigInteger().with_variant(Integer, "sqlite"), primary_key=True),
    Column("started_at_utc", DateTime, nullable=False),
    Column("ended_at_utc", DateTime, nullable=True),
    Column("device_type", Integer, nullable=False),
    Column("user_id", ForeignKey("users.id"), nullable=False),
)


def create_schema(engine: Engine) -> None:
    """Create both tables if missing. Intended for tests and local runs."""
    metadata.create_all(engine)
