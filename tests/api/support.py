# This file provides shared helpers for API endpoint and service tests.
# It exists so tests can run against a throwaway SQLite database or a recording fake instead of a real server.
# The helpers build consistent config objects and scoped TestClient contexts.
# Centralized test wiring keeps API tests small and focused on behavior.

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from fastapi.testclient import TestClient

from activity_api.api.api_config import ApiConfig
from activity_api.api.app import app
from activity_api.api.db_access import DatabaseClient
from activity_api.api.ddl import apply_schema
from activity_api.api.dependencies import get_config, get_database_client

ADMIN_TOKEN = "test-secret"
ADMIN_HEADERS = {"x-admin-token": ADMIN_TOKEN}


def build_test_config(**overrides: Any) -> ApiConfig:
    """Create deterministic API config for tests."""

    values: dict[str, Any] = {
        "api_name": "activity-api",
        "host": "0.0.0.0",
        "port": 8000,
        "environment": "test",
        "database_url": "sqlite://",
        "admin_token": ADMIN_TOKEN,
        "admin_token_header": "x-admin-token",
        "log_level": "INFO",
        "log_default_limit": 10,
        "log_max_limit": 10,
        "allowed_origins": ["http://localhost:3000"],
        "create_schema_on_startup": False,
        "app_version": "0.1.0",
    }
    values.update(overrides)
    return ApiConfig(**values)


def build_sqlite_client(tmp_path: Path) -> DatabaseClient:
    """Return a DatabaseClient on a fresh SQLite file with both tables created."""

    client = DatabaseClient(database_url=f"sqlite:///{tmp_path / 'activity.db'}")
    apply_schema(client.engine)
    return client


def seed_status_item(
    db: DatabaseClient,
    *,
    section: str,
    title: str,
    position: int = 0,
    is_active: int = 1,
    description: str = "",
) -> int:
    db.execute(
        """
        INSERT INTO status_items (section, title, description, position, is_active)
        VALUES (:section, :title, :description, :position, :is_active)
        """,
        {
            "section": section,
            "title": title,
            "description": description,
            "position": position,
            "is_active": is_active,
        },
    )
    return int(db.fetch_all("SELECT MAX(id) AS id FROM status_items")[0]["id"])


def seed_log_entry(db: DatabaseClient, *, type_: str, message: str, created_at: str) -> None:
    db.execute(
        "INSERT INTO logs (type, message, created_at) VALUES (:type, :message, :created_at)",
        {"type": type_, "message": message, "created_at": created_at},
    )


def fetch_status_row(db: DatabaseClient, status_id: int) -> dict[str, Any] | None:
    rows = db.fetch_all(
        "SELECT id, section, title, description, position, is_active FROM status_items WHERE id = :id",
        {"id": status_id},
    )
    return rows[0] if rows else None


class RecordingDBClient:
    """Fake store that records every statement and returns canned rows."""

    def __init__(self, *, rows: list[dict[str, Any]] | None = None) -> None:
        self.rows = list(rows or [])
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def fetch_all(self, query: str, params: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        self.calls.append(("fetch_all", query, dict(params or {})))
        return [dict(row) for row in self.rows]

    def execute(self, query: str, params: Mapping[str, Any] | None = None) -> None:
        self.calls.append(("execute", query, dict(params or {})))

    def can_connect(self) -> bool:
        return True

    def table_exists(self, table_name: str) -> bool:
        return True

    @property
    def executed(self) -> list[dict[str, Any]]:
        return [params for kind, _, params in self.calls if kind == "execute"]


class FailingDBClient(RecordingDBClient):
    """Fake store whose every operation fails like an unreachable database."""

    def fetch_all(self, query: str, params: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        raise RuntimeError("store unavailable")

    def execute(self, query: str, params: Mapping[str, Any] | None = None) -> None:
        raise RuntimeError("store unavailable")


@contextmanager
def api_test_client(
    *,
    config: ApiConfig | None = None,
    db_client: Any | None = None,
    raise_server_exceptions: bool = True,
) -> Iterator[TestClient]:
    """Yield a TestClient with scoped dependency overrides."""

    resolved_config = config or build_test_config()

    app.dependency_overrides[get_config] = lambda: resolved_config
    if db_client is not None:
        app.dependency_overrides[get_database_client] = lambda: db_client

    try:
        with TestClient(app, raise_server_exceptions=raise_server_exceptions) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
