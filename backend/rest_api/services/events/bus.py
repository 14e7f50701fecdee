"""
Audit Event Bus.

In-process dispatcher owned by the application: created in the lifespan
handler (or by a test), started before the first request and stopped at
shutdown. Events are handed to a single background worker so publishing
never blocks the request and subscribers see events in publish order.

Usage:
    bus = AuditEventBus()
    bus.subscribe(LoggingAuditSubscriber())
    bus.start()

    bus.publish(AuditEvent.success(AuditAction.CREATE, EntityType.PRODUCT, dto))

    bus.drain()   # wait for delivery (tests)
    bus.stop()    # drains, then releases the worker
"""

import concurrent.futures
import threading
from typing import Any, Callable, Protocol

from shared.config.logging import get_logger
from .audit_event import AuditEvent

logger = get_logger(__name__)


class AuditSubscriber(Protocol):
    """Anything with consume(event). Plain callables are accepted too."""

    def consume(self, event: AuditEvent) -> None: ...


class AuditEventBus:
    """
    Publish/subscribe dispatcher for audit events.

    Subscriber failures are logged and never reach the publisher.
    Publishing while the bus is stopped is logged and dropped.
    """

    def __init__(self, name: str = "audit-bus"):
        self._name = name
        self._subscribers: list[Callable[[AuditEvent], Any]] = []
        self._executor: concurrent.futures.ThreadPoolExecutor | None = None
        self._lock = threading.Lock()

    @property
    def is_running(self) -> bool:
        return self._executor is not None

    def subscribe(self, subscriber: AuditSubscriber | Callable[[AuditEvent], Any]) -> None:
        handler = getattr(subscriber, "consume", subscriber)
        if not callable(handler):
            raise TypeError(f"{subscriber!r} is not an audit subscriber")
        with self._lock:
            self._subscribers.append(handler)

    def start(self) -> None:
        with self._lock:
            if self._executor is not None:
                return
            # One worker: delivery order equals publish order
            self._executor = concurrent.futures.ThreadPoolExecutor(
                max_workers=1, thread_name_prefix=self._name
            )
        logger.info("Audit bus started", bus=self._name, subscribers=len(self._subscribers))

    def stop(self) -> None:
        """Deliver everything already published, then release the worker."""
        with self._lock:
            executor, self._executor = self._executor, None
        if executor is None:
            return
        executor.shutdown(wait=True)
        logger.info("Audit bus stopped", bus=self._name)

    def publish(self, event: AuditEvent) -> bool:
        """
        Queue an event for delivery.

        Returns:
            True if queued, False if the bus is not running.
        """
        with self._lock:
            if self._executor is None:
                logger.warning(
                    "Audit event dropped: bus not running",
                    bus=self._name,
                    status=event.status.value,
                    action=event.action.value,
                    entity_type=event.entity_type,
                )
                return False
            self._executor.submit(self._deliver, event)
        return True

    def drain(self, timeout: float | None = 5.0) -> None:
        """Block until every event published before this call was delivered."""
        with self._lock:
            if self._executor is None:
                return
            marker = self._executor.submit(lambda: None)
        marker.result(timeout=timeout)

    def _deliver(self, event: AuditEvent) -> None:
        with self._lock:
            subscribers = tuple(self._subscribers)

        for handler in subscribers:
            try:
                handler(event)
            except Exception as e:
                logger.error(
                    "Audit subscriber failed",
                    bus=self._name,
                    subscriber=getattr(handler, "__qualname__", repr(handler)),
                    action=event.action.value,
                    entity_type=event.entity_type,
                    error=str(e),
                    error_type=type(e).__name__,
                )

    def __enter__(self) -> "AuditEventBus":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()
