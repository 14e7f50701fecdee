"""
Base class and TimestampMixin for all SQLAlchemy ORM models.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from shared.config.constants import Limits


def utc_now() -> datetime:
    """
    Current UTC time as a naive datetime.

    Timestamps are stored as "timestamp without time zone" in UTC so that
    values read back from any backend compare with values created in memory.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Base(DeclarativeBase):
    """Base class for all catalog models."""

    pass


class TimestampMixin:
    """
    Mixin providing identity and audit timestamps.

    Fields added:
    - id: integer identity assigned by the database
    - created: set once at creation
    - updated: refreshed on every successful mutation

    Methods:
    - touch(): move updated forward, strictly past its previous value
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    created: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utc_now)
    updated: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utc_now)

    def touch(self, now: datetime | None = None) -> None:
        now = now or utc_now()
        previous = self.updated
        if previous is not None and now <= previous:
            # Clock did not advance (or went back): keep updated monotonic
            now = previous + timedelta(microseconds=1)
        self.updated = now

    def __repr__(self) -> str:
        class_name = self.__class__.__name__
        title = getattr(self, "title", None)
        if title is not None:
            return f"<{class_name}(id={self.id}, title={title!r})>"
        return f"<{class_name}(id={self.id})>"


class TitledMixin(TimestampMixin):
    """Entities identified to users by a short title."""

    title: Mapped[str] = mapped_column(String(Limits.TITLE_MAX_LENGTH), nullable=False)
