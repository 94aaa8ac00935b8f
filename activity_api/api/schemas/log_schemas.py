# This file defines request and response models for the log feed endpoints.

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class LogCreateRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: str | None = None
    message: str | None = None


class LogEntryV1(BaseModel):
    id: int
    type: str
    message: str
    # SQLite returns the stored text; PostgreSQL returns a datetime.
    created_at: str | datetime
