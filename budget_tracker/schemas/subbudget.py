"""Pydantic v2 schemas for sub-budgets."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from budget_tracker.utils.constants import DEFAULT_THRESHOLD


class SubBudgetBase(BaseModel):
    """Fields supplied by the client on create and full update.

    Attributes:
        name: Display name.
        budget: Allocated amount.
        threshold: Warning threshold as a fraction of ``budget``.
    """

    name: str = Field(..., description="Sub-budget name.")
    budget: float = Field(default=0.0, description="Allocated amount.")
    threshold: float = Field(
        default=DEFAULT_THRESHOLD,
        description="Fraction of budget at which a warning is raised.",
    )

    @field_validator("budget", mode="before")
    @classmethod
    def budget_none_as_zero(cls, value: object) -> object:
        return 0.0 if value is None else value

    @field_validator("threshold", mode="before")
    @classmethod
    def threshold_none_as_default(cls, value: object) -> object:
        return DEFAULT_THRESHOLD if value is None else value


class SubBudgetCreate(SubBudgetBase):
    """Body of ``POST /projects/{id}/subbudgets``."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"name": "Plants", "budget": 500, "threshold": 0.8}}
    )


class SubBudgetUpdate(SubBudgetBase):
    """Body of ``PUT /subbudgets/{id}``; replaces every stored field."""


class SubBudgetResponse(BaseModel):
    """Stored sub-budget fields plus figures derived from its positions.

    Attributes:
        used: Sum of the effective spend of the sub-budget's positions.
        warning: True when ``used / budget >= threshold`` (and budget > 0).
        percent: ``used / budget × 100``; 0 for a zero budget.
    """

    id: int
    project_id: int
    name: str
    budget: float
    threshold: float
    used: float = Field(..., description="Effective spend of all positions.")
    warning: bool = Field(..., description="Threshold reached.")
    percent: float = Field(..., description="used / budget × 100.")

    model_config = ConfigDict(from_attributes=True)
