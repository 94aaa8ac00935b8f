# This file normalizes request paths and methods before FastAPI matches a route.
# It exists so `/status/` and `/status` hit the same handler and HEAD requests are served by GET handlers.
# OPTIONS requests that the CORS middleware did not already answer are short-circuited here.
# The middleware rewrites a copy of the ASGI scope, so the server still sees the original method.

from __future__ import annotations

from collections.abc import Sequence

from starlette.responses import Response
from starlette.routing import BaseRoute, Match
from starlette.types import ASGIApp, Receive, Scope, Send

METRIC_METHODS: frozenset[str] = frozenset({"GET", "POST", "DELETE", "OPTIONS"})
UNMATCHED_ROUTE_LABEL = "unmatched"


def normalize_path(path: str) -> str:
    """Strip a single trailing slash unless the path is the root."""

    if len(path) > 1 and path.endswith("/"):
        return path[:-1]
    return path


def normalize_method(method: str) -> str:
    method = method.upper()
    if method == "HEAD":
        return "GET"
    return method


def parse_status_id(raw: str) -> int:
    """Parse the `/status/{id}` segment; anything that is not an integer becomes 0."""

    try:
        return int(raw.split("/", 1)[0])
    except ValueError:
        return 0


def method_label(method: str) -> str:
    method = normalize_method(method)
    return method if method in METRIC_METHODS else "OTHER"


def route_label(routes: Sequence[BaseRoute], path: str, method: str) -> str:
    """Return the route template a request resolves to, for bounded metric labels.

    Paths that match no route share one label so arbitrary URLs cannot add series.
    """

    scope = {
        "type": "http",
        "path": normalize_path(path),
        "method": normalize_method(method),
        "root_path": "",
    }
    partial: str | None = None
    for route in routes:
        match, _ = route.matches(scope)
        template = getattr(route, "path", None)
        if template is None:
            continue
        if match == Match.FULL:
            return template
        if match == Match.PARTIAL and partial is None:
            partial = template
    return partial or UNMATCHED_ROUTE_LABEL


class RequestNormalizationMiddleware:
    """Pure ASGI middleware applying path and method normalization."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        method = normalize_method(scope["method"])
        if method == "OPTIONS":
            response = Response(status_code=204)
            await response(scope, receive, send)
            return

        normalized_scope = dict(scope)
        normalized_scope["method"] = method
        normalized_scope["path"] = normalize_path(scope["path"])
        await self.app(normalized_scope, receive, send)
