# This file defines response schemas for health and readiness endpoints.
# It keeps operational status contracts explicit for monitoring consumers.

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    request_id: str
    status: str
    environment: str
    service_name: str
    timestamp: datetime


class ReadinessResponse(BaseModel):
    request_id: str
    db_connected: bool
    status_source_ready: bool
    log_source_ready: bool
    ready: bool
    database: str
    timestamp: datetime
