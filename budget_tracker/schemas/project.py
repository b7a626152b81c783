"""
Pydantic v2 schemas for projects.

Numeric fields rely on Pydantic's lax coercion, so ``"1500"`` is accepted as
``1500.0`` while ``"abc"`` is rejected.  A missing or null ``total_budget``
becomes 0.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from budget_tracker.schemas.subbudget import SubBudgetResponse


class ProjectBase(BaseModel):
    """Fields supplied by the client on create and full update.

    Attributes:
        name: Display name of the project.
        total_budget: Overall budget; must not be negative.
    """

    name: str = Field(..., description="Project name.")
    total_budget: float = Field(default=0.0, description="Overall project budget.")

    @field_validator("total_budget", mode="before")
    @classmethod
    def none_as_zero(cls, value: object) -> object:
        return 0.0 if value is None else value


class ProjectCreate(ProjectBase):
    """Body of ``POST /projects``."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"name": "Garden renovation", "total_budget": 12000}}
    )


class ProjectUpdate(ProjectBase):
    """Body of ``PUT /projects/{id}``; replaces every stored field."""


class ProjectResponse(BaseModel):
    """Stored project fields, without any aggregation."""

    id: int
    name: str
    total_budget: float

    model_config = ConfigDict(from_attributes=True)


class ProjectSummaryResponse(ProjectResponse):
    """Project with spend rolled up from all of its sub-budgets.

    Attributes:
        used: Sum of ``used`` over the project's sub-budgets.
        remaining: ``total_budget - used`` (negative when overspent).
        percent: ``used / total_budget * 100``; 0 for a zero budget.
        subbudgets: Sub-budgets with their own derived figures.
    """

    used: float = Field(..., description="Spend rolled up from all sub-budgets.")
    remaining: float = Field(..., description="total_budget minus used.")
    percent: float = Field(..., description="used / total_budget × 100.")
    subbudgets: list[SubBudgetResponse] = Field(default_factory=list)

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Garden renovation",
                "total_budget": 1000.0,
                "used": 450.0,
                "remaining": 550.0,
                "percent": 45.0,
                "subbudgets": [
                    {
                        "id": 1,
                        "project_id": 1,
                        "name": "Plants",
                        "budget": 500.0,
                        "threshold": 0.8,
                        "used": 450.0,
                        "warning": True,
                        "percent": 90.0,
                    }
                ],
            }
        },
    )
