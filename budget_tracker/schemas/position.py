"""Pydantic v2 schemas for positions."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from budget_tracker.utils.constants import DEFAULT_ACTUAL, DEFAULT_DONE


class PositionBase(BaseModel):
    """Fields supplied by the client on create and full update.

    ``done`` accepts anything Pydantic coerces to a boolean, including the
    ``0``/``1`` integers older clients send.
    """

    name: str = Field(..., description="Position name.")
    planned: float = Field(default=0.0, description="Planned amount.")
    actual: float = Field(default=DEFAULT_ACTUAL, description="Amount actually spent.")
    done: bool = Field(default=DEFAULT_DONE, description="Whether the position is settled.")

    @field_validator("planned", "actual", mode="before")
    @classmethod
    def amount_none_as_zero(cls, value: object) -> object:
        return 0.0 if value is None else value

    @field_validator("done", mode="before")
    @classmethod
    def done_none_as_false(cls, value: object) -> object:
        return DEFAULT_DONE if value is None else value


class PositionCreate(PositionBase):
    """Body of ``POST /subbudgets/{id}/positions``."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"name": "Roses", "planned": 100, "actual": 40, "done": False}
        }
    )


class PositionUpdate(PositionBase):
    """Body of ``PUT /positions/{id}``; replaces every stored field."""


class PositionResponse(BaseModel):
    """Stored position fields plus its effective spend.

    Attributes:
        used_amount: ``actual`` when ``done``, otherwise ``planned``.
    """

    id: int
    subbudget_id: int
    name: str
    planned: float
    actual: float
    done: bool
    used_amount: float = Field(..., description="Amount counted against the sub-budget.")

    model_config = ConfigDict(from_attributes=True)
