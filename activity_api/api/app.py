# This file builds the FastAPI application and registers all API routers.
# It exists so startup behavior, middleware, and error handling are configured in one place.
# The app adds request IDs, timing headers, and Prometheus request metrics for operations visibility.
# Keeping bootstrap logic centralized makes deployment and testing more predictable.

from __future__ import annotations

import logging
import time
import uuid

from fastapi import FastAPI, Request, Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest
from starlette.middleware.base import RequestResponseEndpoint

from activity_api.api.api_config import get_api_config
from activity_api.api.cors import FallbackOriginCORSMiddleware
from activity_api.api.ddl import apply_schema
from activity_api.api.dependencies import get_database_client
from activity_api.api.error_handlers import register_error_handlers
from activity_api.api.routers.health import router as health_router
from activity_api.api.routers.logs import router as logs_router
from activity_api.api.routers.root import router as root_router
from activity_api.api.routers.status import router as status_router
from activity_api.api.routing import RequestNormalizationMiddleware, method_label, route_label
from activity_api.common.logging import configure_logging

logger = logging.getLogger(__name__)

API_HTTP_REQUESTS_TOTAL = Counter(
    "api_http_requests_total",
    "Total number of HTTP requests processed by the API.",
    ["method", "path", "status_code"],
)
API_HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "api_http_request_duration_seconds",
    "API request duration in seconds.",
    ["method", "path"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10),
)
API_HTTP_INFLIGHT_REQUESTS = Gauge(
    "api_http_inflight_requests",
    "Number of API requests currently being processed.",
    ["method", "path"],
)


def create_app() -> FastAPI:
    """Create configured FastAPI application instance."""

    config = get_api_config()
    configure_logging(config.log_level)

    app = FastAPI(
        title=config.api_name,
        description=(
            "Ordered status items grouped by section and an append-only activity log. "
            "Reads are public; mutations require the admin token header."
        ),
        version=config.app_version,
        openapi_tags=[
            {"name": "service", "description": "Service info and endpoint listing."},
            {"name": "status", "description": "Status items grouped into building and learning."},
            {"name": "logs", "description": "Append-only activity log feed."},
            {"name": "health", "description": "Service liveness and readiness."},
        ],
    )

    app.add_middleware(RequestNormalizationMiddleware)

    @app.middleware("http")
    async def request_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        metric_method = method_label(request.method)
        metric_path = route_label(request.app.router.routes, request.url.path, request.method)
        started = time.perf_counter()
        status_code = 500
        API_HTTP_INFLIGHT_REQUESTS.labels(method=metric_method, path=metric_path).inc()
        try:
            response: Response = await call_next(request)
            status_code = response.status_code
            duration_ms = (time.perf_counter() - started) * 1000.0

            response.headers["x-request-id"] = request_id
            response.headers["x-response-time-ms"] = f"{duration_ms:.2f}"
            return response
        finally:
            duration_s = time.perf_counter() - started
            API_HTTP_REQUESTS_TOTAL.labels(
                method=metric_method,
                path=metric_path,
                status_code=str(status_code),
            ).inc()
            API_HTTP_REQUEST_DURATION_SECONDS.labels(
                method=metric_method,
                path=metric_path,
            ).observe(duration_s)
            API_HTTP_INFLIGHT_REQUESTS.labels(method=metric_method, path=metric_path).dec()

    app.add_middleware(
        FallbackOriginCORSMiddleware,
        allow_origins=config.allowed_origins,
        allow_origin_regex=config.allowed_origin_regex,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", config.admin_token_header],
        max_age=86400,
    )

    @app.get("/metrics", include_in_schema=False)
    def metrics() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.on_event("startup")
    def startup_checks() -> None:
        try:
            db = get_database_client()
            if config.create_schema_on_startup:
                apply_schema(db.engine)
            app.state.db_connected_at_startup = db.can_connect()
        except Exception:
            logger.exception("Database startup checks failed")
            app.state.db_connected_at_startup = False

    register_error_handlers(app)

    app.include_router(root_router)
    app.include_router(status_router)
    app.include_router(logs_router)
    app.include_router(health_router)

    return app


app = create_app()
