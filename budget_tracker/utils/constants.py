"""
Application-wide constants for the Budget Tracker.

Defines default values and business rule thresholds shared across
models, schemas and services.
"""

from typing import Final

# ---------------------------------------------------------------------------
# Sub-budget warning threshold
# ---------------------------------------------------------------------------

# Fraction of a sub-budget's allocation at which a warning is raised
DEFAULT_THRESHOLD: Final[float] = 0.9

# ---------------------------------------------------------------------------
# Position defaults
# ---------------------------------------------------------------------------

DEFAULT_ACTUAL: Final[float] = 0.0
DEFAULT_DONE: Final[bool] = False

# ---------------------------------------------------------------------------
# Response envelopes
# ---------------------------------------------------------------------------

STATUS_OK: Final[str] = "ok"

# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------

# Largest primary key the storage engine can hold (signed 64-bit INTEGER)
MAX_ID: Final[int] = 2**63 - 1
