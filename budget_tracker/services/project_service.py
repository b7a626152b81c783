"""
Project service layer.

All database access for the ``/api/projects`` endpoints lives here.
Functions receive a SQLAlchemy ``Session`` and validated request schemas,
and return ORM rows or response schemas ready for serialisation.

Design notes
------------
- ``list_projects`` returns the stored columns only; spend figures are
  fetched per project through the sub-budget endpoints or ``get_summary``.
- Deleting a project relies on the ``ON DELETE CASCADE`` foreign keys to
  remove its sub-budgets and their positions in the same statement.
- Deleting an unknown id is a successful no-op.
"""

from __future__ import annotations

import logging
import math

from sqlalchemy.orm import Session, selectinload

from budget_tracker.exceptions import ValidationError
from budget_tracker.models.project import Project
from budget_tracker.models.subbudget import SubBudget
from budget_tracker.schemas.project import ProjectBase, ProjectSummaryResponse
from budget_tracker.services import aggregation, storage
from budget_tracker.services.subbudget_service import build_response as build_subbudget_response

logger = logging.getLogger(__name__)


def _validate(data: ProjectBase) -> None:
    """Reject non-finite or negative total budgets.

    Raises:
        ValidationError: If ``total_budget`` is NaN, infinite or below zero.
    """
    if not math.isfinite(data.total_budget):
        raise ValidationError("total_budget must be a finite number.")
    if data.total_budget < 0:
        raise ValidationError("total_budget must not be negative.")


# ---------------------------------------------------------------------------
# Read operations
# ---------------------------------------------------------------------------


def list_projects(db: Session) -> list[Project]:
    """Return every project ordered by id, without aggregation."""
    rows = db.query(Project).order_by(Project.id).all()
    logger.debug("list_projects: %d rows", len(rows))
    return rows


def get_summary(db: Session, project_id: int) -> ProjectSummaryResponse:
    """Return a project with spend rolled up from its sub-budgets.

    Args:
        db: Active SQLAlchemy session.
        project_id: Primary key of the project.

    Returns:
        A ``ProjectSummaryResponse`` with ``used``, ``remaining``,
        ``percent`` and the per-sub-budget figures.

    Raises:
        NotFoundError: If the project does not exist.
    """
    project = storage.get_or_raise(db, Project, project_id, "Project")

    subbudgets = (
        db.query(SubBudget)
        .options(selectinload(SubBudget.positions))
        .filter(SubBudget.project_id == project_id)
        .order_by(SubBudget.id)
        .all()
    )
    items = [build_subbudget_response(s) for s in subbudgets]
    used = aggregation.compute_project_used(item.used for item in items)

    logger.debug("get_summary: project_id=%d used=%.2f", project_id, used)
    return ProjectSummaryResponse(
        id=project.id,
        name=project.name,
        total_budget=project.total_budget,
        used=used,
        remaining=project.total_budget - used,
        percent=aggregation.compute_percent(used, project.total_budget),
        subbudgets=items,
    )


# ---------------------------------------------------------------------------
# Write operations
# ---------------------------------------------------------------------------


def create_project(db: Session, data: ProjectBase) -> Project:
    """Create a project and return the persisted row.

    Raises:
        ValidationError: If ``total_budget`` is negative or not finite.
        StorageError: If the insert fails.
    """
    _validate(data)
    project = storage.insert(db, Project(name=data.name, total_budget=data.total_budget))
    logger.info("create_project: id=%d name='%s'", project.id, project.name)
    return project


def update_project(db: Session, project_id: int, data: ProjectBase) -> Project:
    """Replace every stored field of a project.

    Raises:
        NotFoundError: If the project does not exist.
        ValidationError: If ``total_budget`` is negative or not finite.
    """
    _validate(data)
    project = storage.get_or_raise(db, Project, project_id, "Project")
    project.name = data.name
    project.total_budget = data.total_budget
    storage.commit(db)
    logger.info("update_project: id=%d", project_id)
    return project


def delete_project(db: Session, project_id: int) -> None:
    """Delete a project together with its sub-budgets and positions."""
    project = storage.find(db, Project, project_id)
    if project is None:
        logger.debug("delete_project: id=%d absent, nothing to do", project_id)
        return
    storage.delete(db, project)
    logger.info("delete_project: id=%d", project_id)
