"""
Infrastructure module: Database sessions and request correlation.

Provides:
- Database sessions and transactions (db.py)
- Correlation IDs for request tracing (correlation.py)
"""

from shared.infrastructure.db import (
    engine,
    audit_engine,
    SessionLocal,
    AuditSessionLocal,
    get_db,
    safe_commit,
)

__all__ = [
    # db
    "engine",
    "audit_engine",
    "SessionLocal",
    "AuditSessionLocal",
    "get_db",
    "safe_commit",
]
