"""SubBudget model — budget slice of a project with a warning threshold."""

from sqlalchemy import Column, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from budget_tracker.database import Base
from budget_tracker.utils.constants import DEFAULT_THRESHOLD


class SubBudget(Base):
    """Allocated slice of a project's budget.

    Attributes:
        id: Primary key.
        project_id: FK to Project; rows vanish with their project.
        name: Display name.
        budget: Allocated amount.
        threshold: Fraction of ``budget`` at which the sub-budget warns.
    """

    __tablename__ = "subbudgets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(
        Integer,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String, nullable=False)
    budget = Column(Float, nullable=False, default=0)
    threshold = Column(Float, nullable=False, default=DEFAULT_THRESHOLD)

    # Relationships
    project = relationship("Project", back_populates="subbudgets", lazy="select")
    positions = relationship(
        "Position",
        back_populates="subbudget",
        lazy="select",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Position.id",
    )
