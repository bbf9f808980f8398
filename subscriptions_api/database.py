"""
Database connection and session management.
"""
from __future__ import annotations

import logging
from typing import Any, Generator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from subscriptions_api.config import settings

logger = logging.getLogger(__name__)


def create_db_engine(url: str | URL) -> Engine:
    """
    Build an engine for PostgreSQL (pooled) or SQLite.

    In-memory SQLite is pinned to a single shared connection so every
    thread sees the same database.
    """
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        kwargs: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if parsed.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(parsed, echo=False, **kwargs)

    return create_engine(
        parsed,
        pool_pre_ping=True,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
        pool_recycle=settings.db_pool_recycle,
        connect_args={"connect_timeout": settings.db_connect_timeout},
        echo=False,
    )


engine: Engine = create_db_engine(settings.sqlalchemy_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for getting a database session.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Create tables for every registered model.
    """
    from subscriptions_api.models import Base

    target = bind or engine
    Base.metadata.create_all(bind=target)
    logger.info(f"Database schema ready ({target.dialect.name})")


def check_database_connection(bind: Optional[Engine] = None) -> bool:
    """
    Return True when the database connection is healthy.
    """
    try:
        with (bind or engine).connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError:
        return False


def database_health(bind: Optional[Engine] = None) -> dict[str, Any]:
    """
    Return structured database health details.
    """
    target = bind or engine
    try:
        with target.connect() as connection:
            connection.execute(text("SELECT 1"))
        return {
            "ok": True,
            "dialect": target.dialect.name,
            "database": target.url.database,
        }
    except SQLAlchemyError as exc:
        logger.error(f"Database health check failed: {exc}")
        return {
            "ok": False,
            "error": "Database unavailable",
        }
