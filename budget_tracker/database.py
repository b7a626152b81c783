"""
Database engine, session factory and declarative base.

``get_db`` is the FastAPI dependency that hands one ``Session`` to each
request; service functions receive that session explicitly instead of
reaching for a module-level connection.

SQLite only enforces foreign keys (and therefore ``ON DELETE CASCADE``) when
``PRAGMA foreign_keys`` is switched on for every connection, so a connect
listener does that for SQLite URLs.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from budget_tracker.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, **kwargs: Any) -> Engine:
    """Create an engine for ``url`` with foreign-key enforcement on SQLite.

    Args:
        url: SQLAlchemy database URL.
        **kwargs: Extra keyword arguments forwarded to ``create_engine``.

    Returns:
        A configured ``Engine``.
    """
    if url.startswith("sqlite"):
        connect_args = kwargs.pop("connect_args", {})
        # FastAPI runs sync endpoints in a threadpool
        connect_args.setdefault("check_same_thread", False)
        kwargs["connect_args"] = connect_args

    new_engine = create_engine(url, **kwargs)

    if new_engine.dialect.name == "sqlite":
        event.listen(new_engine, "connect", _enable_sqlite_foreign_keys)

    return new_engine


engine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def init_db(bind: Engine | None = None) -> None:
    """Create every table registered on ``Base.metadata`` if missing."""
    # Registers the mapped classes on Base.metadata
    import budget_tracker.models  # noqa: F401

    target = bind if bind is not None else engine
    Base.metadata.create_all(bind=target)
    logger.info("Database schema ensured on %s", target.url.render_as_string(hide_password=True))


def get_db() -> Generator[Session, None, None]:
    """Yield a request-scoped session and always close it afterwards."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
