# This file implements the admin-token guard used by every mutating endpoint.
# The secret arrives through ApiConfig so the guard never reads process environment on its own.
# Rejections raise Unauthorized from a dependency, which runs before the route body touches the store.

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, Request

from activity_api.api.api_config import ApiConfig
from activity_api.api.dependencies import get_config
from activity_api.api.error_handlers import Unauthorized

logger = logging.getLogger(__name__)


class AdminGuard:
    """Exact-match comparison of a request credential against the configured secret."""

    def __init__(self, *, config: ApiConfig) -> None:
        self._secret = config.admin_token
        self.header_name = config.admin_token_header

    def is_authorized(self, credential: str | None) -> bool:
        if credential is None:
            return False
        return credential == self._secret

    def credential_from(self, request: Request) -> str | None:
        return request.headers.get(self.header_name)


def get_admin_guard(config: Annotated[ApiConfig, Depends(get_config)]) -> AdminGuard:
    return AdminGuard(config=config)


def require_admin(request: Request, guard: Annotated[AdminGuard, Depends(get_admin_guard)]) -> None:
    if not guard.is_authorized(guard.credential_from(request)):
        logger.warning("Rejected admin request %s %s", request.method, request.url.path)
        raise Unauthorized()
