"""Pydantic models for the docs API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error payload returned with 4xx/5xx responses.

    Attributes
    ----------
    detail : str
        Error message describing what went wrong.

    """

    detail: str = Field(..., description="Error message")


class HealthResponse(BaseModel):
    """Liveness payload for the /health endpoint."""

    status: str = Field(default="ok", description="Service status")


COMMON_ERROR_RESPONSES: dict[int | str, dict] = {
    404: {"model": ErrorResponse, "description": "Documentation not found"},
    500: {"model": ErrorResponse, "description": "Documentation could not be read"},
}
