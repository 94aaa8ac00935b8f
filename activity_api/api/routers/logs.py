# This file defines the log feed endpoints.
# Reading is public and bounded; appending requires the admin token.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from activity_api.api.auth import require_admin
from activity_api.api.dependencies import get_log_service
from activity_api.api.response_envelope import build_success_envelope
from activity_api.api.schemas.common import MUTATION_ERROR_RESPONSES, SuccessResponse
from activity_api.api.schemas.log_schemas import LogCreateRequest, LogEntryV1
from activity_api.api.services.log_service import LogService

router = APIRouter(prefix="/logs", tags=["logs"], responses=MUTATION_ERROR_RESPONSES)
LogServiceDep = Annotated[LogService, Depends(get_log_service)]


@router.get("", response_model=list[LogEntryV1])
def list_logs(
    service: LogServiceDep,
    limit: str | None = Query(default=None),
) -> list[dict[str, object]]:
    return service.list_recent(raw_limit=limit)


@router.post("", response_model=SuccessResponse, dependencies=[Depends(require_admin)])
def create_log(payload: LogCreateRequest, service: LogServiceDep) -> dict[str, bool]:
    service.append(payload)
    return build_success_envelope()
