"""
Positions router.

Mounted under the API prefix (``/api`` by default, set in ``main.py``).

Endpoints
---------
GET    /subbudgets/{id}/positions  — Positions of a sub-budget with used_amount.
POST   /subbudgets/{id}/positions  — Create a position under a sub-budget.
PUT    /positions/{id}             — Replace a position (also toggles ``done``).
DELETE /positions/{id}             — Delete a position.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from budget_tracker.database import get_db
from budget_tracker.schemas.common import CreatedResponse, ErrorResponse, StatusResponse
from budget_tracker.schemas.position import (
    PositionCreate,
    PositionResponse,
    PositionUpdate,
)
from budget_tracker.services import position_service
from budget_tracker.utils.constants import MAX_ID

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Positions"])


@router.get(
    "/subbudgets/{subbudget_id}/positions",
    response_model=list[PositionResponse],
    summary="List the positions of a sub-budget",
    responses={404: {"model": ErrorResponse, "description": "Sub-budget not found."}},
)
def list_positions(
    subbudget_id: Annotated[int, Path(description="ID of the owning sub-budget.", ge=1, le=MAX_ID)],
    db: Annotated[Session, Depends(get_db)],
) -> list[PositionResponse]:
    logger.debug("GET /subbudgets/%d/positions", subbudget_id)
    return position_service.list_positions(db, subbudget_id)


@router.post(
    "/subbudgets/{subbudget_id}/positions",
    response_model=CreatedResponse,
    summary="Create a position",
    responses={
        400: {"model": ErrorResponse, "description": "Malformed amount."},
        404: {"model": ErrorResponse, "description": "Sub-budget not found."},
    },
)
def create_position(
    subbudget_id: Annotated[int, Path(description="ID of the owning sub-budget.", ge=1, le=MAX_ID)],
    data: PositionCreate,
    db: Annotated[Session, Depends(get_db)],
) -> CreatedResponse:
    """Create a position; ``actual`` defaults to 0 and ``done`` to false."""
    logger.info("POST /subbudgets/%d/positions name='%s'", subbudget_id, data.name)
    position = position_service.create_position(db, subbudget_id, data)
    return CreatedResponse(id=position.id)


@router.put(
    "/positions/{position_id}",
    response_model=StatusResponse,
    summary="Replace a position",
    responses={
        400: {"model": ErrorResponse, "description": "Malformed amount."},
        404: {"model": ErrorResponse, "description": "Position not found."},
    },
)
def update_position(
    position_id: Annotated[int, Path(description="ID of the position.", ge=1, le=MAX_ID)],
    data: PositionUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> StatusResponse:
    logger.info("PUT /positions/%d done=%s", position_id, data.done)
    position_service.update_position(db, position_id, data)
    return StatusResponse()


@router.delete(
    "/positions/{position_id}",
    response_model=StatusResponse,
    summary="Delete a position",
)
def delete_position(
    position_id: Annotated[int, Path(description="ID of the position.", ge=1, le=MAX_ID)],
    db: Annotated[Session, Depends(get_db)],
) -> StatusResponse:
    logger.info("DELETE /positions/%d", position_id)
    position_service.delete_position(db, position_id)
    return StatusResponse()
