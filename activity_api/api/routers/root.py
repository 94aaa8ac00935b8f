# This file serves the service-info document at the root path.
# The endpoint list is static and describes the public and admin routes.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from activity_api.api.api_config import ApiConfig
from activity_api.api.dependencies import get_config
from activity_api.api.schemas.common import ServiceInfoResponse

router = APIRouter(tags=["service"])
ConfigDep = Annotated[ApiConfig, Depends(get_config)]

ENDPOINTS: tuple[str, ...] = (
    "GET /status",
    "GET /logs",
    "POST /logs (admin)",
    "POST /status (admin)",
    "DELETE /status/:id (admin)",
    "POST /status/reorder (admin)",
)


@router.get("/", response_model=ServiceInfoResponse)
def service_info(config: ConfigDep) -> dict[str, object]:
    return {
        "service": config.api_name,
        "status": "ok",
        "endpoints": list(ENDPOINTS),
    }
