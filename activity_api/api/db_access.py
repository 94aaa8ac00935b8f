# This file wraps database access so API services can run parameterized SQL safely.
# It exists to keep SQL execution details out of router code and make testing easier.
# Services only need two operations: `execute` for writes and `fetch_all` for reads.
# Keeping this layer small makes query behavior easier to audit and troubleshoot.

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError


class DatabaseClient:
    """Minimal SQLAlchemy wrapper for API read/write access."""

    def __init__(self, *, database_url: str) -> None:
        self._engine: Engine = create_engine(database_url, pool_pre_ping=True, future=True)

    @property
    def engine(self) -> Engine:
        return self._engine

    def can_connect(self) -> bool:
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            return False

    def table_exists(self, table_name: str) -> bool:
        return inspect(self._engine).has_table(table_name)

    def fetch_all(self, query: str, params: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        with self._engine.connect() as connection:
            rows = connection.execute(text(query), dict(params or {})).mappings().all()
        return [dict(row) for row in rows]

    def execute(self, query: str, params: Mapping[str, Any] | None = None) -> None:
        with self._engine.begin() as connection:
            connection.execute(text(query), dict(params or {}))

    def dispose(self) -> None:
        self._engine.dispose()
