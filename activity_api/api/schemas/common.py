# This file defines schema pieces shared by several endpoints.
# Shared models keep the success and service-info contracts consistent and easy to review.

from __future__ import annotations

from pydantic import BaseModel


class SuccessResponse(BaseModel):
    success: bool


class ErrorResponse(BaseModel):
    error: str
    message: str | None = None


class ServiceInfoResponse(BaseModel):
    service: str
    status: str
    endpoints: list[str]


MUTATION_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"model": ErrorResponse, "description": "Invalid input."},
    401: {"description": "Missing or incorrect admin token."},
    500: {"model": ErrorResponse, "description": "Unexpected failure."},
}
