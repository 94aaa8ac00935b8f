# This file implements the append-only log feed.
# Reads are capped by configuration so a caller can never pull more than the configured maximum.
# There is no retention; rows accumulate until removed outside this service.

from __future__ import annotations

import logging
from typing import Any

from activity_api.api.api_config import ApiConfig
from activity_api.api.db_access import DatabaseClient
from activity_api.api.ddl import LOG_TABLE
from activity_api.api.error_handlers import InvalidInput
from activity_api.api.pagination import resolve_limit
from activity_api.api.schemas.log_schemas import LogCreateRequest

logger = logging.getLogger(__name__)


class LogService:
    """Validation and store access for log entries."""

    def __init__(self, *, config: ApiConfig, db: DatabaseClient) -> None:
        self.config = config
        self.db = db

    def list_recent(self, *, raw_limit: str | None) -> list[dict[str, Any]]:
        limit = resolve_limit(
            raw_limit,
            default=self.config.log_default_limit,
            maximum=self.config.log_max_limit,
        )
        return self.db.fetch_all(
            f"""
            SELECT id, type, message, created_at
            FROM {LOG_TABLE}
            ORDER BY created_at DESC, id DESC
            LIMIT :limit
            """,
            {"limit": limit},
        )

    def append(self, payload: LogCreateRequest) -> None:
        if not payload.type or not payload.message:
            raise InvalidInput("Missing fields")

        self.db.execute(
            f"INSERT INTO {LOG_TABLE} (type, message) VALUES (:type, :message)",
            {"type": payload.type, "message": payload.message},
        )
        logger.info("Appended log entry type=%s", payload.type)
