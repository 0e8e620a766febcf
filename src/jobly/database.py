"""Database configuration, session management and query execution."""

import logging
import re
import sqlite3
from collections.abc import Sequence
from typing import Any

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

# Positional placeholders ($1, $2, ...) as produced by jobly.utils.sql
_PLACEHOLDER = re.compile(r"\$(\d+)")

# Create Base class for declarative models
Base = declarative_base()


def create_db_engine(database_url: str) -> Engine:
    """
    Create a SQLAlchemy engine for ``database_url``.

    In-memory SQLite (``sqlite://``) shares one connection so every session
    sees the same database.

    Args:
        database_url: SQLAlchemy database URL

    Returns:
        Engine bound to the URL
    """
    kwargs: dict[str, Any] = {"echo": False}
    if database_url.startswith("sqlite"):
        # Needed for SQLite
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    """Create the session factory used for request-scoped sessions."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """Turn on FK enforcement for SQLite so job -> company cascades apply."""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def get_db(request: Request):
    """
    Dependency function to get database session.

    Sessions come from the factory the application was built with.

    Yields:
        Session: SQLAlchemy database session
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def execute(db: Session, sql: str, values: Sequence[Any] = ()) -> list[dict[str, Any]]:
    """
    Run a statement with positional ``$n`` placeholders.

    The placeholders are rewritten to SQLAlchemy named binds (``:p1``, ``:p2``,
    ...) so the same statement text runs on any backend SQLAlchemy supports.

    Args:
        db: Open database session
        sql: Statement text using ``$1``-style placeholders
        values: Bind values, positionally aligned with the placeholders

    Returns:
        Result rows as plain dicts keyed by column label (empty when the
        statement returns no rows)
    """
    params = {f"p{idx}": value for idx, value in enumerate(values, start=1)}
    logger.debug("SQL: %s | params: %s", sql, params)
    result = db.execute(text(_PLACEHOLDER.sub(r":p\1", sql)), params)
    if not result.returns_rows:
        return []
    return [dict(row) for row in result.mappings()]
