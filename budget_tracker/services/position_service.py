"""
Position service layer.

All database access for the position endpoints lives here.  Positions are
the leaves of the budget tree; their ``used_amount`` is derived on every
read from ``done``, ``planned`` and ``actual``.
"""

from __future__ import annotations

import logging
import math

from sqlalchemy.orm import Session

from budget_tracker.exceptions import ValidationError
from budget_tracker.models.position import Position
from budget_tracker.models.subbudget import SubBudget
from budget_tracker.schemas.position import PositionBase, PositionResponse
from budget_tracker.services import aggregation, storage

logger = logging.getLogger(__name__)


def _validate(data: PositionBase) -> None:
    for field in ("planned", "actual"):
        if not math.isfinite(getattr(data, field)):
            raise ValidationError(f"{field} must be a finite number.")


def build_response(row: Position) -> PositionResponse:
    """Construct a ``PositionResponse`` with its ``used_amount``."""
    return PositionResponse(
        id=row.id,
        subbudget_id=row.subbudget_id,
        name=row.name,
        planned=row.planned,
        actual=row.actual,
        done=row.done,
        used_amount=aggregation.used_amount(row),
    )


def list_positions(db: Session, subbudget_id: int) -> list[PositionResponse]:
    """Return the positions of a sub-budget ordered by id.

    Raises:
        NotFoundError: If the sub-budget does not exist.
    """
    storage.get_or_raise(db, SubBudget, subbudget_id, "SubBudget")

    rows = (
        db.query(Position)
        .filter(Position.subbudget_id == subbudget_id)
        .order_by(Position.id)
        .all()
    )
    logger.debug("list_positions: subbudget_id=%d rows=%d", subbudget_id, len(rows))
    return [build_response(r) for r in rows]


def create_position(db: Session, subbudget_id: int, data: PositionBase) -> Position:
    """Create a position under an existing sub-budget.

    Raises:
        NotFoundError: If the sub-budget does not exist; no row is created.
        ValidationError: If an amount is not finite.
    """
    _validate(data)
    storage.get_or_raise(db, SubBudget, subbudget_id, "SubBudget")

    position = storage.insert(
        db,
        Position(
            subbudget_id=subbudget_id,
            name=data.name,
            planned=data.planned,
            actual=data.actual,
            done=data.done,
        ),
    )
    logger.info(
        "create_position: id=%d subbudget_id=%d name='%s'",
        position.id, subbudget_id, position.name,
    )
    return position


def update_position(db: Session, position_id: int, data: PositionBase) -> Position:
    """Replace every client-editable field of a position.

    ``done`` can be switched on and off freely.

    Raises:
        NotFoundError: If the position does not exist.
        ValidationError: If an amount is not finite.
    """
    _validate(data)
    position = storage.get_or_raise(db, Position, position_id, "Position")
    position.name = data.name
    position.planned = data.planned
    position.actual = data.actual
    position.done = data.done
    storage.commit(db)
    logger.info("update_position: id=%d done=%s", position_id, data.done)
    return position


def delete_position(db: Session, position_id: int) -> None:
    """Delete a single position; deleting an unknown id is a no-op."""
    position = storage.find(db, Position, position_id)
    if position is None:
        logger.debug("delete_position: id=%d absent, nothing to do", position_id)
        return
    storage.delete(db, position)
    logger.info("delete_position: id=%d", position_id)
