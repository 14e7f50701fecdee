"""
Audit event system.

Provides:
- AuditEvent: Immutable event value object
- AuditEventBus: Ordered, non-blocking in-process dispatcher
- LoggingAuditSubscriber / DatabaseAuditSink: audit sinks

Usage:
    from rest_api.services.events import AuditEvent, AuditEventBus

    bus.publish(AuditEvent.success(AuditAction.UPDATE, EntityType.NUTRIENT, dto))
"""

from .audit_event import AuditEvent, serialize_payload
from .bus import AuditEventBus, AuditSubscriber
from .subscribers import LoggingAuditSubscriber, DatabaseAuditSink

__all__ = [
    # Event
    "AuditEvent",
    "serialize_payload",
    # Bus
    "AuditEventBus",
    "AuditSubscriber",
    # Sinks
    "LoggingAuditSubscriber",
    "DatabaseAuditSink",
]
