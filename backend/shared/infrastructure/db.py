"""
Database configuration and session management.
Uses SQLAlchemy 2.0 patterns.

Two engines are configured: the catalog database and the audit database.
Both point to the same server unless AUDIT_DATABASE_URL is set.
"""

import os
from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from shared.config.settings import settings


def _calculate_pool_size() -> int:
    """
    Calculate pool size based on CPU cores.
    Formula: (2 * CPU cores) + 1, capped at 20.
    """
    cores = os.cpu_count() or 4
    return min(cores * 2 + 1, 20)


def _engine_options(url: str) -> dict[str, Any]:
    """Connection pool options; SQLite manages its own pooling."""
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,  # Verify connections before using
        "pool_size": _calculate_pool_size(),
        "max_overflow": 15,
        "pool_timeout": 30,  # Wait max 30s for connection from pool
        "pool_recycle": 1800,  # Recycle connections after 30 minutes
        "connect_args": {"connect_timeout": 10},
    }


def enable_sqlite_foreign_keys(target: Engine) -> None:
    """
    SQLite ignores FOREIGN KEY constraints unless asked per connection.
    No-op for other dialects.
    """
    if target.dialect.name != "sqlite":
        return

    @event.listens_for(target, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(url: str) -> Engine:
    """Create an engine with the project's pool settings."""
    new_engine = create_engine(url, echo=False, **_engine_options(url))
    enable_sqlite_foreign_keys(new_engine)
    return new_engine


engine = build_engine(settings.database_url)

if settings.resolved_audit_database_url == settings.database_url:
    audit_engine = engine
else:
    audit_engine = build_engine(settings.resolved_audit_database_url)

# Session factories
SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
)

AuditSessionLocal = sessionmaker(
    bind=audit_engine,
    autoflush=False,
    autocommit=False,
)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency for database sessions.

    Usage:
        @app.get("/items")
        def get_items(db: Session = Depends(get_db)):
            return db.scalars(select(Item)).all()

    The session is automatically closed after the request completes.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def safe_commit(db: Session) -> None:
    """
    Safe commit with automatic rollback on failure.

    Raises the original exception after rolling back.
    """
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
