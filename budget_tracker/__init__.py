"""Budget Tracker: projects, sub-budgets and positions with spend roll-ups."""

__version__ = "1.0.0"
