# This file defines liveness and readiness endpoints for API operations.
# It exists so orchestration and monitoring systems can verify service health quickly.
# The readiness check confirms database connectivity and that both tables exist.

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from activity_api.api.api_config import ApiConfig
from activity_api.api.db_access import DatabaseClient
from activity_api.api.ddl import LOG_TABLE, STATUS_TABLE
from activity_api.api.dependencies import get_config, get_database_client
from activity_api.api.schemas.health_schemas import HealthResponse, ReadinessResponse

router = APIRouter(tags=["health"])
ConfigDep = Annotated[ApiConfig, Depends(get_config)]
DBDep = Annotated[DatabaseClient, Depends(get_database_client)]


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@router.get("/health", response_model=HealthResponse)
def health(
    request: Request,
    config: ConfigDep,
) -> dict[str, object]:
    return {
        "request_id": request.state.request_id,
        "status": "ok",
        "environment": config.environment,
        "service_name": config.api_name,
        "timestamp": _utc_now(),
    }


@router.get("/ready", response_model=ReadinessResponse)
def ready(
    request: Request,
    db: DBDep,
) -> dict[str, object]:
    db_connected = db.can_connect()
    status_source_ready = db_connected and db.table_exists(STATUS_TABLE)
    log_source_ready = db_connected and db.table_exists(LOG_TABLE)

    return {
        "request_id": request.state.request_id,
        "db_connected": db_connected,
        "status_source_ready": status_source_ready,
        "log_source_ready": log_source_ready,
        "ready": db_connected and status_source_ready and log_source_ready,
        "database": "reachable" if db_connected else "unreachable",
        "timestamp": _utc_now(),
    }
