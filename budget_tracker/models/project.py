"""Project model — top level of the budget hierarchy."""

from sqlalchemy import Column, Float, Integer, String
from sqlalchemy.orm import relationship

from budget_tracker.database import Base


class Project(Base):
    """A project with an overall budget, split into sub-budgets.

    Attributes:
        id: Primary key.
        name: Display name.
        total_budget: Overall budget of the project (non-negative).
    """

    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    total_budget = Column(Float, nullable=False, default=0)

    # Relationships
    subbudgets = relationship(
        "SubBudget",
        back_populates="project",
        lazy="select",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="SubBudget.id",
    )
