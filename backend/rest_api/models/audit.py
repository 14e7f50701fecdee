"""
Audit Log Model.

Lives on its own declarative base so it can be created in a separate
audit database (AUDIT_DATABASE_URL) independently of the catalog tables.
"""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Index, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from .base import utc_now


class AuditBase(DeclarativeBase):
    """Base class for audit models."""

    pass


class AuditLog(AuditBase):
    """
    Append-only record of a mutation outcome.
    One row per audit event (success or failure).
    """

    __tablename__ = "audit_log"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    status: Mapped[str] = mapped_column(String(16), nullable=False)  # success, failure
    action: Mapped[str] = mapped_column(String(16), nullable=False)  # create, update, delete
    entity_type: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    body: Mapped[str] = mapped_column(Text, nullable=False)  # JSON of the event payload
    date: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utc_now)

    __table_args__ = (
        Index("ix_audit_log_entity_type_date", "entity_type", "date"),
    )

    def __repr__(self) -> str:
        return f"<AuditLog({self.status} {self.action} {self.entity_type} at {self.date})>"
