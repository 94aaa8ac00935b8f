# This file builds the small set of response bodies shared by every endpoint.
# It exists so success, not-found, and error payloads keep one shape across routers and handlers.
# The helpers return plain dictionaries that Pydantic response models or JSONResponse serialize.

from __future__ import annotations

from typing import Any

NOT_FOUND = "Not Found"
BAD_REQUEST = "Bad Request"
INTERNAL_SERVER_ERROR = "Internal Server Error"


def build_success_envelope() -> dict[str, bool]:
    """Body returned by every successful mutation."""

    return {"success": True}


def build_not_found_body() -> dict[str, str]:
    return {"error": NOT_FOUND}


def build_error_body(*, error: str, message: str | None = None) -> dict[str, Any]:
    """Build the `{error, message}` body used for 400 and 500 responses."""

    body: dict[str, Any] = {"error": error}
    if message is not None:
        body["message"] = message
    return body
