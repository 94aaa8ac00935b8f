# This file adapts Starlette's CORS middleware to the API's origin policy.
# Listed origins (or ones matching the configured regex) are echoed back; every other origin gets `*`.
# Preflights are always answered with 200 so browsers never see a CORS 4xx from this service.

from __future__ import annotations

from starlette.datastructures import Headers, MutableHeaders
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import PlainTextResponse, Response
from starlette.types import Message, Send


class FallbackOriginCORSMiddleware(CORSMiddleware):
    """CORS middleware that falls back to a wildcard origin instead of refusing."""

    def allow_origin_for(self, origin: str | None) -> str:
        if origin and self.is_allowed_origin(origin=origin):
            return origin
        return "*"

    def preflight_response(self, request_headers: Headers) -> Response:
        headers = dict(self.preflight_headers)
        headers["Access-Control-Allow-Origin"] = self.allow_origin_for(request_headers.get("origin"))
        return PlainTextResponse("OK", status_code=200, headers=headers)

    async def send(self, message: Message, send: Send, request_headers: Headers) -> None:
        if message["type"] != "http.response.start":
            await send(message)
            return

        message.setdefault("headers", [])
        headers = MutableHeaders(scope=message)
        headers.update(self.simple_headers)
        # The header value depends on Origin even when it falls back to `*`.
        self.allow_explicit_origin(headers, self.allow_origin_for(request_headers.get("origin")))

        await send(message)
