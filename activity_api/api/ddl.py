"""DDL helpers for the status and log tables."""

from __future__ import annotations

from sqlalchemy import TIMESTAMP, Column, Integer, MetaData, Table, Text, func, text
from sqlalchemy.engine import Engine

STATUS_TABLE = "status_items"
LOG_TABLE = "logs"

metadata = MetaData()

status_items = Table(
    STATUS_TABLE,
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("section", Text, nullable=False),
    Column("title", Text, nullable=False),
    Column("description", Text),
    Column("position", Integer, server_default=text("0")),
    Column("is_active", Integer, server_default=text("1")),
    Column("created_at", TIMESTAMP, server_default=func.current_timestamp()),
    sqlite_autoincrement=True,
)

logs = Table(
    LOG_TABLE,
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("type", Text, nullable=False),
    Column("message", Text, nullable=False),
    Column("created_at", TIMESTAMP, server_default=func.current_timestamp()),
    sqlite_autoincrement=True,
)


def apply_schema(engine: Engine) -> None:
    """Create the service tables if they do not exist yet."""

    metadata.create_all(engine, checkfirst=True)
