"""
Domain exceptions raised by the service layer.

The HTTP boundary (``budget_tracker.main``) maps each class to a status code:

- ``ValidationError`` → 400
- ``NotFoundError``   → 404
- ``StorageError``    → 500
"""

from __future__ import annotations


class BudgetTrackerError(Exception):
    """Base class for all errors raised by the service layer."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(BudgetTrackerError):
    """Raised when a request carries a malformed or out-of-range value."""

    status_code = 400


class NotFoundError(BudgetTrackerError):
    """Raised when a target or parent entity does not exist."""

    status_code = 404

    def __init__(self, entity: str, entity_id: int) -> None:
        super().__init__(f"{entity} with id {entity_id} not found.")
        self.entity = entity
        self.entity_id = entity_id


class StorageError(BudgetTrackerError):
    """Raised when the storage engine fails to complete an operation."""

    status_code = 500
