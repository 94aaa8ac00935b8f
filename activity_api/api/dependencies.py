# This file provides dependency factories for FastAPI routes and middleware.
# It exists so services are created from one shared database client through dependency injection.
# The setup keeps routers thin and makes endpoint tests easy to override.

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from activity_api.api.api_config import ApiConfig, get_api_config
from activity_api.api.db_access import DatabaseClient
from activity_api.api.services.log_service import LogService
from activity_api.api.services.status_service import StatusService


@lru_cache(maxsize=1)
def get_database_client() -> DatabaseClient:
    config = get_api_config()
    return DatabaseClient(database_url=config.database_url)


def get_config() -> ApiConfig:
    return get_api_config()


def get_status_service(db: Annotated[DatabaseClient, Depends(get_database_client)]) -> StatusService:
    return StatusService(db=db)


def get_log_service(
    config: Annotated[ApiConfig, Depends(get_config)],
    db: Annotated[DatabaseClient, Depends(get_database_client)],
) -> LogService:
    return LogService(config=config, db=db)
