"""
Projects router.

Mounted under the API prefix (``/api`` by default, set in ``main.py``).

Endpoints
---------
GET    /projects               — All projects, stored fields only.
POST   /projects               — Create a project.
PUT    /projects/{id}          — Replace a project.
DELETE /projects/{id}          — Delete a project and everything below it.
GET    /projects/{id}/summary  — Project with spend rolled up from its sub-budgets.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from budget_tracker.database import get_db
from budget_tracker.schemas.common import CreatedResponse, ErrorResponse, StatusResponse
from budget_tracker.schemas.project import (
    ProjectCreate,
    ProjectResponse,
    ProjectSummaryResponse,
    ProjectUpdate,
)
from budget_tracker.services import project_service
from budget_tracker.utils.constants import MAX_ID

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Projects"])

ProjectId = Annotated[int, Path(description="ID of the project.", ge=1, le=MAX_ID)]


@router.get(
    "/projects",
    response_model=list[ProjectResponse],
    summary="List projects",
)
def list_projects(db: Annotated[Session, Depends(get_db)]) -> list[ProjectResponse]:
    """Return every project without aggregated figures."""
    logger.debug("GET /projects")
    return [ProjectResponse.model_validate(p) for p in project_service.list_projects(db)]


@router.post(
    "/projects",
    response_model=CreatedResponse,
    summary="Create a project",
    responses={400: {"model": ErrorResponse, "description": "Invalid total_budget."}},
)
def create_project(
    data: ProjectCreate,
    db: Annotated[Session, Depends(get_db)],
) -> CreatedResponse:
    """Create a project and return its new id."""
    logger.info("POST /projects name='%s'", data.name)
    project = project_service.create_project(db, data)
    return CreatedResponse(id=project.id)


@router.put(
    "/projects/{project_id}",
    response_model=StatusResponse,
    summary="Replace a project",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid total_budget."},
        404: {"model": ErrorResponse, "description": "Project not found."},
    },
)
def update_project(
    project_id: ProjectId,
    data: ProjectUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> StatusResponse:
    """Overwrite name and total_budget of an existing project."""
    logger.info("PUT /projects/%d", project_id)
    project_service.update_project(db, project_id, data)
    return StatusResponse()


@router.delete(
    "/projects/{project_id}",
    response_model=StatusResponse,
    summary="Delete a project",
    description=(
        "Deletes the project with all of its sub-budgets and positions. "
        "Deleting an unknown id also succeeds."
    ),
)
def delete_project(
    project_id: ProjectId,
    db: Annotated[Session, Depends(get_db)],
) -> StatusResponse:
    logger.info("DELETE /projects/%d", project_id)
    project_service.delete_project(db, project_id)
    return StatusResponse()


@router.get(
    "/projects/{project_id}/summary",
    response_model=ProjectSummaryResponse,
    summary="Project spend summary",
    description=(
        "Returns the project together with used, remaining and percent rolled up "
        "from its sub-budgets, plus each sub-budget's used, warning and percent."
    ),
    responses={404: {"model": ErrorResponse, "description": "Project not found."}},
)
def get_project_summary(
    project_id: ProjectId,
    db: Annotated[Session, Depends(get_db)],
) -> ProjectSummaryResponse:
    logger.debug("GET /projects/%d/summary", project_id)
    return project_service.get_summary(db, project_id)
