"""Database configuration and session management."""

from __future__ import annotations

import logging
from collections.abc import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from filegate.config import Settings, get_settings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


settings = get_settings()

logger = logging.getLogger(__name__)

_SQLITE_BUSY_TIMEOUT_SECONDS = 30


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def build_engine(settings: Settings) -> Engine:
    """Create the SQLAlchemy engine for ``settings.database_url``."""

    connect_args: dict[str, object] = {}
    if _is_sqlite(settings.database_url):
        connect_args = {
            "check_same_thread": False,
            "timeout": _SQLITE_BUSY_TIMEOUT_SECONDS,
        }
    created = create_engine(
        settings.database_url, pool_pre_ping=True, connect_args=connect_args
    )
    if _is_sqlite(settings.database_url):
        event.listen(created, "connect", _enable_sqlite_foreign_keys)
    return created


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA foreign_keys=ON")
    finally:
        cursor.close()


engine = build_engine(settings)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def initialize_database() -> None:
    """Ensure all ORM models have tables and the first-run records exist."""

    from filegate.infrastructure import models  # noqa: F401  # ensure models are imported
    from filegate.application.use_cases.bootstrap import bootstrap

    Base.metadata.create_all(bind=engine, checkfirst=True)
    logger.info("Database schema ready (%s)", engine.url.render_as_string(hide_password=True))
    with SessionLocal() as session:
        bootstrap(session, get_settings())


def get_db() -> Generator[Session, None, None]:
    """Yield a database session and close it afterwards."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


__all__ = [
    "Base",
    "SessionLocal",
    "build_engine",
    "engine",
    "get_db",
    "initialize_database",
]
