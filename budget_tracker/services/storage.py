"""
Storage primitives shared by the CRUD services.

Wraps the handful of ``Session`` calls the services need so that every write
commits exactly once and every engine failure surfaces as ``StorageError``
after the session has been rolled back.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from budget_tracker.exceptions import NotFoundError, StorageError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


def find(db: Session, model: type[ModelT], entity_id: int) -> ModelT | None:
    """Load ``model`` by primary key, returning None when absent.

    Raises:
        StorageError: If the lookup itself fails.
    """
    try:
        return db.get(model, entity_id)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Lookup of %s id=%d failed", model.__name__, entity_id)
        raise StorageError(f"Could not load {model.__name__} {entity_id}: {exc}") from exc


def get_or_raise(db: Session, model: type[ModelT], entity_id: int, entity: str) -> ModelT:
    """Load ``model`` by primary key or raise ``NotFoundError``.

    Args:
        db: Active SQLAlchemy session.
        model: Mapped class to load.
        entity_id: Primary key value.
        entity: Name used in the error message, e.g. ``"Project"``.

    Returns:
        The ORM instance.

    Raises:
        NotFoundError: If no row has that primary key.
        StorageError: If the lookup itself fails.
    """
    row = find(db, model, entity_id)
    if row is None:
        raise NotFoundError(entity, entity_id)
    return row


def insert(db: Session, row: ModelT) -> ModelT:
    """Persist a new row, commit, and return it with its primary key set."""
    db.add(row)
    commit(db)
    try:
        db.refresh(row)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Reload of %s after insert failed", type(row).__name__)
        raise StorageError(f"Could not reload {type(row).__name__}: {exc}") from exc
    return row


def delete(db: Session, row: Any) -> None:
    """Delete ``row`` and commit; children go with it via FK cascade."""
    db.delete(row)
    commit(db)


def commit(db: Session) -> None:
    """Commit the session, rolling back and raising ``StorageError`` on failure."""
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Commit failed, transaction rolled back")
        raise StorageError(f"Storage operation failed: {exc}") from exc
