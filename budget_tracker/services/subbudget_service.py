"""
Sub-budget service layer.

All database access for the sub-budget endpoints lives here.  Read paths
attach ``used``, ``warning`` and ``percent`` computed by
``budget_tracker.services.aggregation`` from the sub-budget's current
positions; nothing derived is ever written back to the table.
"""

from __future__ import annotations

import logging
import math

from sqlalchemy.orm import Session, selectinload

from budget_tracker.exceptions import ValidationError
from budget_tracker.models.project import Project
from budget_tracker.models.subbudget import SubBudget
from budget_tracker.schemas.subbudget import SubBudgetBase, SubBudgetResponse
from budget_tracker.services import aggregation, storage

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _validate(data: SubBudgetBase) -> None:
    """Reject NaN and infinite amounts, which JSON clients cannot round-trip.

    Raises:
        ValidationError: If ``budget`` or ``threshold`` is not finite.
    """
    for field in ("budget", "threshold"):
        if not math.isfinite(getattr(data, field)):
            raise ValidationError(f"{field} must be a finite number.")


def build_response(row: SubBudget) -> SubBudgetResponse:
    """Construct a ``SubBudgetResponse`` from a ``SubBudget`` ORM object.

    Args:
        row: A ``SubBudget`` instance; its ``positions`` are loaded on access
             if the query did not eager-load them.

    Returns:
        The stored fields plus ``used``, ``warning`` and ``percent``.
    """
    used = aggregation.compute_used(row.positions or [])
    return SubBudgetResponse(
        id=row.id,
        project_id=row.project_id,
        name=row.name,
        budget=row.budget,
        threshold=row.threshold,
        used=used,
        warning=aggregation.compute_warning(used, row.budget, row.threshold),
        percent=aggregation.compute_percent(used, row.budget),
    )


# ---------------------------------------------------------------------------
# Read operations
# ---------------------------------------------------------------------------


def list_subbudgets(db: Session, project_id: int) -> list[SubBudgetResponse]:
    """Return the sub-budgets of a project with their derived figures.

    Args:
        db: Active SQLAlchemy session.
        project_id: Primary key of the owning project.

    Returns:
        One ``SubBudgetResponse`` per sub-budget, ordered by id.

    Raises:
        NotFoundError: If the project does not exist.
    """
    storage.get_or_raise(db, Project, project_id, "Project")

    rows = (
        db.query(SubBudget)
        .options(selectinload(SubBudget.positions))
        .filter(SubBudget.project_id == project_id)
        .order_by(SubBudget.id)
        .all()
    )
    logger.debug("list_subbudgets: project_id=%d rows=%d", project_id, len(rows))
    return [build_response(r) for r in rows]


# ---------------------------------------------------------------------------
# Write operations
# ---------------------------------------------------------------------------


def create_subbudget(db: Session, project_id: int, data: SubBudgetBase) -> SubBudget:
    """Create a sub-budget under an existing project.

    Raises:
        NotFoundError: If the project does not exist; no row is created.
        ValidationError: If an amount is not finite.
    """
    _validate(data)
    storage.get_or_raise(db, Project, project_id, "Project")

    subbudget = storage.insert(
        db,
        SubBudget(
            project_id=project_id,
            name=data.name,
            budget=data.budget,
            threshold=data.threshold,
        ),
    )
    logger.info(
        "create_subbudget: id=%d project_id=%d name='%s'",
        subbudget.id, project_id, subbudget.name,
    )
    return subbudget


def update_subbudget(db: Session, subbudget_id: int, data: SubBudgetBase) -> SubBudget:
    """Replace every client-editable field of a sub-budget.

    Raises:
        NotFoundError: If the sub-budget does not exist.
        ValidationError: If an amount is not finite.
    """
    _validate(data)
    subbudget = storage.get_or_raise(db, SubBudget, subbudget_id, "SubBudget")
    subbudget.name = data.name
    subbudget.budget = data.budget
    subbudget.threshold = data.threshold
    storage.commit(db)
    logger.info("update_subbudget: id=%d", subbudget_id)
    return subbudget


def delete_subbudget(db: Session, subbudget_id: int) -> None:
    """Delete a sub-budget together with its positions."""
    subbudget = storage.find(db, SubBudget, subbudget_id)
    if subbudget is None:
        logger.debug("delete_subbudget: id=%d absent, nothing to do", subbudget_id)
        return
    storage.delete(db, subbudget)
    logger.info("delete_subbudget: id=%d", subbudget_id)
