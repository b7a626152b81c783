"""SQLAlchemy models package for the Budget Tracker.

Importing all models here ensures that SQLAlchemy's mapper registry is
populated before ``Base.metadata.create_all()`` or Alembic migrations run.
The import order follows the foreign-key dependency graph so that parent
tables are always registered before their children.

Usage from other modules:
    from budget_tracker.models import Project, SubBudget
"""

from budget_tracker.models.project import Project  # noqa: F401
from budget_tracker.models.subbudget import SubBudget  # noqa: F401
from budget_tracker.models.position import Position  # noqa: F401

__all__ = [
    "Project",
    "SubBudget",
    "Position",
]
