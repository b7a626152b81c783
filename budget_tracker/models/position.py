"""Position model — a single planned or booked expense line."""

from sqlalchemy import Boolean, Column, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from budget_tracker.database import Base


class Position(Base):
    """Line item of a sub-budget.

    While ``done`` is false the position counts with its ``planned`` amount;
    once done, the ``actual`` amount replaces it.

    Attributes:
        id: Primary key.
        subbudget_id: FK to SubBudget; rows vanish with their sub-budget.
        name: Display name.
        planned: Planned amount.
        actual: Amount actually spent.
        done: Whether the position is settled.
    """

    __tablename__ = "positions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    subbudget_id = Column(
        Integer,
        ForeignKey("subbudgets.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String, nullable=False)
    planned = Column(Float, nullable=False, default=0)
    actual = Column(Float, nullable=False, default=0)
    done = Column(Boolean, nullable=False, default=False)

    # Relationships
    subbudget = relationship("SubBudget", back_populates="positions", lazy="select")
