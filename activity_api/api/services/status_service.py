# This file implements the status collection: grouped listing, upsert, soft delete, and reorder.
# It exists so routers can hand over parsed request models without embedding SQL or input rules.
# Every rule is checked before the first statement is issued, so rejected input never mutates the store.
# Reorder issues one UPDATE per id and is not atomic; a failure midway leaves earlier positions written.

from __future__ import annotations

import logging
from typing import Any

from activity_api.api.db_access import DatabaseClient
from activity_api.api.ddl import STATUS_TABLE
from activity_api.api.error_handlers import InvalidInput
from activity_api.api.schemas.status_schemas import StatusReorderRequest, StatusUpsertRequest

logger = logging.getLogger(__name__)

VALID_SECTIONS: tuple[str, ...] = ("building", "learning")
NON_NULLABLE_UPDATE_FIELDS: tuple[str, ...] = ("title", "is_active")


class StatusService:
    """Validation and store access for status items."""

    def __init__(self, *, db: DatabaseClient) -> None:
        self.db = db

    def list_active(self) -> dict[str, list[dict[str, Any]]]:
        rows = self.db.fetch_all(
            f"""
            SELECT id, section, title, description, position
            FROM {STATUS_TABLE}
            WHERE is_active = 1
            ORDER BY section, position
            """
        )

        grouped: dict[str, list[dict[str, Any]]] = {section: [] for section in VALID_SECTIONS}
        for row in rows:
            if row["section"] in grouped:
                grouped[row["section"]].append(row)
        return grouped

    def upsert(self, payload: StatusUpsertRequest) -> None:
        if payload.is_present("section") and payload.section not in VALID_SECTIONS:
            raise InvalidInput("Invalid section")

        if not payload.id:
            self._create(payload)
            return
        self._update(payload.id, payload.present_updates())

    def soft_delete(self, status_id: int) -> None:
        if not status_id:
            raise InvalidInput("Invalid ID")

        self.db.execute(
            f"UPDATE {STATUS_TABLE} SET is_active = 0 WHERE id = :id",
            {"id": status_id},
        )
        logger.info("Soft-deleted status item id=%s", status_id)

    def reorder(self, payload: StatusReorderRequest) -> None:
        if not payload.section or payload.ids is None:
            raise InvalidInput("Invalid payload")
        if payload.section not in VALID_SECTIONS:
            raise InvalidInput("Invalid section")

        query = f"UPDATE {STATUS_TABLE} SET position = :position WHERE id = :id AND section = :section"
        for position, status_id in enumerate(payload.ids):
            self.db.execute(
                query,
                {"position": position, "id": status_id, "section": payload.section},
            )
        logger.info("Reordered %d status items in section=%s", len(payload.ids), payload.section)

    def _create(self, payload: StatusUpsertRequest) -> None:
        if not payload.section or not payload.title:
            raise InvalidInput("Missing fields")

        is_active = True if payload.is_active is None else payload.is_active
        self.db.execute(
            f"""
            INSERT INTO {STATUS_TABLE} (section, title, description, position, is_active)
            VALUES (:section, :title, :description, :position, :is_active)
            """,
            {
                "section": payload.section,
                "title": payload.title,
                "description": payload.description if payload.description is not None else "",
                "position": payload.position if payload.position is not None else 0,
                "is_active": int(is_active),
            },
        )
        logger.info("Created status item in section=%s", payload.section)

    def _update(self, status_id: int, updates: dict[str, Any]) -> None:
        if not updates:
            raise InvalidInput("No fields to update")
        for column in NON_NULLABLE_UPDATE_FIELDS:
            if column in updates and updates[column] is None:
                raise InvalidInput(f"{column} must not be null")

        params: dict[str, Any] = {"id": status_id}
        assignments: list[str] = []
        for column, value in updates.items():
            if column == "is_active":
                value = int(value)
            assignments.append(f"{column} = :{column}")
            params[column] = value

        # Matches inactive rows too and reports success even when no row matches.
        self.db.execute(
            f"UPDATE {STATUS_TABLE} SET {', '.join(assignments)} WHERE id = :id",
            params,
        )
        logger.info("Updated status item id=%s fields=%s", status_id, sorted(updates))
