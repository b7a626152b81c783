"""
Sub-budgets router.

Mounted under the API prefix (``/api`` by default, set in ``main.py``).

Endpoints
---------
GET    /projects/{id}/subbudgets  — Sub-budgets of a project with used/warning.
POST   /projects/{id}/subbudgets  — Create a sub-budget under a project.
PUT    /subbudgets/{id}           — Replace a sub-budget.
DELETE /subbudgets/{id}           — Delete a sub-budget and its positions.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from budget_tracker.database import get_db
from budget_tracker.schemas.common import CreatedResponse, ErrorResponse, StatusResponse
from budget_tracker.schemas.subbudget import (
    SubBudgetCreate,
    SubBudgetResponse,
    SubBudgetUpdate,
)
from budget_tracker.services import subbudget_service
from budget_tracker.utils.constants import MAX_ID

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Sub-budgets"])


@router.get(
    "/projects/{project_id}/subbudgets",
    response_model=list[SubBudgetResponse],
    summary="List the sub-budgets of a project",
    description=(
        "Each sub-budget carries ``used`` (sum of its positions' effective spend), "
        "``warning`` (used/budget >= threshold) and ``percent``."
    ),
    responses={404: {"model": ErrorResponse, "description": "Project not found."}},
)
def list_subbudgets(
    project_id: Annotated[int, Path(description="ID of the owning project.", ge=1, le=MAX_ID)],
    db: Annotated[Session, Depends(get_db)],
) -> list[SubBudgetResponse]:
    logger.debug("GET /projects/%d/subbudgets", project_id)
    return subbudget_service.list_subbudgets(db, project_id)


@router.post(
    "/projects/{project_id}/subbudgets",
    response_model=CreatedResponse,
    summary="Create a sub-budget",
    responses={
        400: {"model": ErrorResponse, "description": "Malformed amount."},
        404: {"model": ErrorResponse, "description": "Project not found."},
    },
)
def create_subbudget(
    project_id: Annotated[int, Path(description="ID of the owning project.", ge=1, le=MAX_ID)],
    data: SubBudgetCreate,
    db: Annotated[Session, Depends(get_db)],
) -> CreatedResponse:
    """Create a sub-budget; ``threshold`` defaults to 0.9."""
    logger.info("POST /projects/%d/subbudgets name='%s'", project_id, data.name)
    subbudget = subbudget_service.create_subbudget(db, project_id, data)
    return CreatedResponse(id=subbudget.id)


@router.put(
    "/subbudgets/{subbudget_id}",
    response_model=StatusResponse,
    summary="Replace a sub-budget",
    responses={
        400: {"model": ErrorResponse, "description": "Malformed amount."},
        404: {"model": ErrorResponse, "description": "Sub-budget not found."},
    },
)
def update_subbudget(
    subbudget_id: Annotated[int, Path(description="ID of the sub-budget.", ge=1, le=MAX_ID)],
    data: SubBudgetUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> StatusResponse:
    logger.info("PUT /subbudgets/%d", subbudget_id)
    subbudget_service.update_subbudget(db, subbudget_id, data)
    return StatusResponse()


@router.delete(
    "/subbudgets/{subbudget_id}",
    response_model=StatusResponse,
    summary="Delete a sub-budget",
)
def delete_subbudget(
    subbudget_id: Annotated[int, Path(description="ID of the sub-budget.", ge=1, le=MAX_ID)],
    db: Annotated[Session, Depends(get_db)],
) -> StatusResponse:
    """Delete a sub-budget with its positions; unknown ids also succeed."""
    logger.info("DELETE /subbudgets/%d", subbudget_id)
    subbudget_service.delete_subbudget(db, subbudget_id)
    return StatusResponse()
