# This file defines request and response models for the status collection endpoints.
# Request models keep every field optional so the service can tell "absent" from "sent as null".
# Presence is read from `model_fields_set`, which drives the partial-update semantics.

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

UPDATABLE_STATUS_FIELDS: tuple[str, ...] = (
    "section",
    "title",
    "description",
    "position",
    "is_active",
)


class StatusUpsertRequest(BaseModel):
    """Create (no id) or partial update (with id) of one status item."""

    model_config = ConfigDict(extra="ignore")

    id: int | None = None
    section: str | None = None
    title: str | None = None
    description: str | None = None
    position: int | None = None
    is_active: bool | None = None

    def is_present(self, field_name: str) -> bool:
        return field_name in self.model_fields_set

    def present_updates(self) -> dict[str, Any]:
        """Return only the updatable fields that were explicitly sent."""

        return {
            name: getattr(self, name)
            for name in UPDATABLE_STATUS_FIELDS
            if self.is_present(name)
        }


class StatusReorderRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    section: str | None = None
    ids: list[int] | None = None


class StatusItemV1(BaseModel):
    id: int
    section: str
    title: str
    description: str | None = None
    position: int | None = None


class StatusListResponseV1(BaseModel):
    building: list[StatusItemV1]
    learning: list[StatusItemV1]
