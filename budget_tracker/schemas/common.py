"""
Shared Pydantic v2 schemas reused across the project, sub-budget and
position modules.

Write endpoints do not echo the stored resource back: creates return the new
primary key, updates and deletes a status envelope.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from budget_tracker.utils.constants import STATUS_OK


class CreatedResponse(BaseModel):
    """Envelope returned by POST endpoints.

    Attributes:
        id: Primary key assigned to the new row.
    """

    id: int = Field(..., ge=1, description="Primary key of the created record.")


class StatusResponse(BaseModel):
    """Envelope returned by PUT and DELETE endpoints.

    Attributes:
        status: Always ``"ok"`` on success.
    """

    status: str = Field(default=STATUS_OK, description="Operation result.")


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx response produced by the exception handlers."""

    detail: str = Field(..., description="Human-readable error description.")
