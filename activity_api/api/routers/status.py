# This file defines the status collection endpoints.
# Reads are public; create, update, delete, and reorder require the admin token.
# The routers only parse input and hand it to StatusService, which owns validation and SQL.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from activity_api.api.auth import require_admin
from activity_api.api.dependencies import get_status_service
from activity_api.api.response_envelope import build_success_envelope
from activity_api.api.routing import parse_status_id
from activity_api.api.schemas.common import MUTATION_ERROR_RESPONSES, SuccessResponse
from activity_api.api.schemas.status_schemas import (
    StatusListResponseV1,
    StatusReorderRequest,
    StatusUpsertRequest,
)
from activity_api.api.services.status_service import StatusService

router = APIRouter(prefix="/status", tags=["status"], responses=MUTATION_ERROR_RESPONSES)
StatusServiceDep = Annotated[StatusService, Depends(get_status_service)]
AdminOnly = [Depends(require_admin)]


@router.get("", response_model=StatusListResponseV1)
def list_status(service: StatusServiceDep) -> dict[str, object]:
    return service.list_active()


@router.post("", response_model=SuccessResponse, dependencies=AdminOnly)
def upsert_status(payload: StatusUpsertRequest, service: StatusServiceDep) -> dict[str, bool]:
    service.upsert(payload)
    return build_success_envelope()


@router.post("/reorder", response_model=SuccessResponse, dependencies=AdminOnly)
def reorder_status(payload: StatusReorderRequest, service: StatusServiceDep) -> dict[str, bool]:
    service.reorder(payload)
    return build_success_envelope()


@router.delete("/{status_id:path}", response_model=SuccessResponse, dependencies=AdminOnly)
def delete_status(status_id: str, service: StatusServiceDep) -> dict[str, bool]:
    service.soft_delete(parse_status_id(status_id))
    return build_success_envelope()
