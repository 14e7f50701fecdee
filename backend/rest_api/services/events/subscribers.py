"""
Audit sinks: consumers subscribed to the AuditEventBus.

- LoggingAuditSubscriber: writes every event to the audit logger
- DatabaseAuditSink: appends every event to the audit_log table

Both run on the bus worker thread. A sink that raises is logged by the bus
and the event is lost for that sink only (best effort).
"""

import json

from sqlalchemy.orm import Session, sessionmaker

from rest_api.models import AuditLog
from shared.config.logging import audit_logger, StructuredLogger
from shared.infrastructure.db import safe_commit
from .audit_event import AuditEvent, serialize_payload


class LoggingAuditSubscriber:
    """Structured log line per event; failures at error level."""

    def __init__(self, logger: StructuredLogger = audit_logger):
        self._logger = logger

    def consume(self, event: AuditEvent) -> None:
        log_fn = self._logger.error if event.is_failure else self._logger.info
        log_fn(
            f"{event.entity_type} {event.action.value} {event.status.value}",
            status=event.status.value,
            action=event.action.value,
            entity_type=event.entity_type,
            payload=serialize_payload(event.payload),
            event_time=event.timestamp.isoformat(),
        )


class DatabaseAuditSink:
    """
    Append-only audit trail in the audit database.

    Opens a short-lived session per event from its own session factory,
    never sharing the request's session.
    """

    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def consume(self, event: AuditEvent) -> None:
        entry = AuditLog(
            status=event.status.value,
            action=event.action.value,
            entity_type=event.entity_type,
            body=json.dumps(serialize_payload(event.payload)),
            date=event.timestamp,
        )
        with self._session_factory() as session:
            session.add(entry)
            safe_commit(session)
