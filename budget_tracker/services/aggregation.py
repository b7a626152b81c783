"""
Aggregation engine.

Pure functions that derive spend figures from already-loaded rows.  Nothing
here touches the database or caches results: callers re-run them on every
read so derived values always reflect the current positions.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def used_amount(position: Any) -> float:
    """Return the effective spend of one position.

    Settled positions (``done``) count with their ``actual`` amount, open
    ones with their ``planned`` amount.

    Args:
        position: Any object exposing ``planned``, ``actual`` and ``done``.

    Returns:
        The amount that counts against the owning sub-budget.
    """
    if position.done:
        return float(position.actual or 0)
    return float(position.planned or 0)


def compute_used(positions: Iterable[Any]) -> float:
    """Sum ``used_amount`` over ``positions``; 0.0 for an empty iterable."""
    return sum((used_amount(p) for p in positions), 0.0)


def compute_project_used(subbudget_used: Iterable[float]) -> float:
    """Roll already-computed sub-budget ``used`` values up to the project."""
    return sum(subbudget_used, 0.0)


def compute_warning(used: float, budget: float, threshold: float) -> bool:
    """Return True when ``used`` has reached ``threshold`` of ``budget``.

    A zero or negative budget never warns.

    Args:
        used: Current spend.
        budget: Allocated amount.
        threshold: Fraction of ``budget`` at which the warning triggers.

    Returns:
        ``budget > 0 and used / budget >= threshold``.
    """
    if budget <= 0:
        return False
    return used / budget >= threshold


def compute_percent(used: float, budget: float) -> float:
    """Return ``used`` as a percentage of ``budget``, or 0.0 if budget <= 0.

    Not capped at 100 so that overspending stays visible.
    """
    if budget <= 0:
        return 0.0
    return round((used / budget) * 100, 2)
