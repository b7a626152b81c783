"""Seed data script for the Budget Tracker database.

Populates the database with a small demo project tree for development.
The script is idempotent: it skips projects whose name already exists.

Usage (from the repository root):
    python seed_data.py
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from budget_tracker.database import SessionLocal, init_db
from budget_tracker.models import Position, Project, SubBudget

# ---------------------------------------------------------------------------
# Demo data
# ---------------------------------------------------------------------------

# project name -> (total_budget, [(subbudget name, budget, threshold, positions)])
# position tuples are (name, planned, actual, done)
DEMO_PROJECTS: dict[str, tuple[float, list]] = {
    "Garden renovation": (
        1000.0,
        [
            ("Plants", 500.0, 0.8, [("Roses", 450.0, 0.0, False)]),
            (
                "Tools",
                300.0,
                0.9,
                [
                    ("Spade", 40.0, 35.5, True),
                    ("Wheelbarrow", 120.0, 0.0, False),
                ],
            ),
        ],
    ),
    "Office move": (
        5000.0,
        [
            (
                "Furniture",
                3000.0,
                0.9,
                [
                    ("Desks", 1800.0, 1950.0, True),
                    ("Chairs", 900.0, 0.0, False),
                ],
            ),
            ("Movers", 1500.0, 0.75, [("Truck rental", 600.0, 0.0, False)]),
        ],
    ),
}


# ---------------------------------------------------------------------------
# Seed functions
# ---------------------------------------------------------------------------


def seed_project(session: Session, name: str, total_budget: float, subbudgets: list) -> Project | None:
    """Insert one project with its sub-budgets and positions unless it exists."""
    if session.query(Project).filter(Project.name == name).first() is not None:
        print(f"  [SKIP] Project '{name}' already exists.")
        return None

    project = Project(name=name, total_budget=total_budget)
    for sb_name, budget, threshold, positions in subbudgets:
        subbudget = SubBudget(name=sb_name, budget=budget, threshold=threshold)
        subbudget.positions = [
            Position(name=p_name, planned=planned, actual=actual, done=done)
            for p_name, planned, actual, done in positions
        ]
        project.subbudgets.append(subbudget)

    session.add(project)
    print(f"  [OK] Project '{name}' with {len(subbudgets)} sub-budgets.")
    return project


def main() -> None:
    """Run the complete seed process within a single database transaction."""
    print("=" * 60)
    print("  Budget Tracker — Seed Data Script")
    print("=" * 60)

    init_db()
    session = SessionLocal()
    try:
        for name, (total_budget, subbudgets) in DEMO_PROJECTS.items():
            seed_project(session, name, total_budget, subbudgets)

        session.commit()
        print("\n" + "=" * 60)
        print("  Seed completed successfully.")
        print("=" * 60)

    except Exception as exc:
        session.rollback()
        print("\n[ERROR] Seed failed — rolled back.")
        print(f"  Detail: {exc}")
        raise
    finally:
        session.close()


if __name__ == "__main__":
    main()
