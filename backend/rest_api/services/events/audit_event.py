"""
Audit Event definition.
Immutable value object describing the outcome of a mutation.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
import json

from pydantic import BaseModel

from rest_api.models.base import utc_now
from shared.config.constants import AuditAction, AuditStatus, EntityType


def serialize_payload(payload: Any) -> Any:
    """JSON-compatible form of an event payload (DTOs use their camelCase aliases)."""
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True)
    return payload


@dataclass(frozen=True, slots=True)
class AuditEvent:
    """
    Immutable audit event.

    Attributes:
        status: success or failure
        action: create, update or delete
        entity_type: Entity tag (e.g., "ProductCategory")
        payload: The transfer object on success, "with ID: <id>" for a
            successful delete, a diagnostic message on failure
        timestamp: When the event was raised (naive UTC)
    """

    status: AuditStatus
    action: AuditAction
    entity_type: str
    payload: Any = None
    timestamp: datetime = field(default_factory=utc_now)

    @property
    def is_failure(self) -> bool:
        return self.status == AuditStatus.FAILURE

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "status": self.status.value,
            "action": self.action.value,
            "entity_type": self.entity_type,
            "payload": serialize_payload(self.payload),
            "timestamp": self.timestamp.isoformat(),
        }

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AuditEvent":
        """Create from dictionary."""
        timestamp = data.get("timestamp")
        if isinstance(timestamp, str):
            timestamp = datetime.fromisoformat(timestamp)
        elif timestamp is None:
            timestamp = utc_now()

        return cls(
            status=AuditStatus(data["status"]),
            action=AuditAction(data["action"]),
            entity_type=data["entity_type"],
            payload=data.get("payload"),
            timestamp=timestamp,
        )

    @classmethod
    def from_json(cls, json_str: str) -> "AuditEvent":
        """Create from JSON string."""
        return cls.from_dict(json.loads(json_str))

    # ==========================================================================
    # Factory methods
    # ==========================================================================

    @classmethod
    def success(
        cls,
        action: AuditAction,
        entity_type: EntityType | str,
        payload: Any,
    ) -> "AuditEvent":
        """Event for a mutation the database accepted."""
        return cls(
            status=AuditStatus.SUCCESS,
            action=action,
            entity_type=_entity_tag(entity_type),
            payload=payload,
        )

    @classmethod
    def failure(
        cls,
        action: AuditAction,
        entity_type: EntityType | str,
        message: str,
    ) -> "AuditEvent":
        """Event for a mutation the database rejected."""
        return cls(
            status=AuditStatus.FAILURE,
            action=action,
            entity_type=_entity_tag(entity_type),
            payload=message,
        )

    @classmethod
    def deleted(cls, entity_type: EntityType | str, entity_id: int) -> "AuditEvent":
        """Success event for a delete (the payload only names the id)."""
        return cls.success(AuditAction.DELETE, entity_type, f"with ID: {entity_id}")


def _entity_tag(entity_type: EntityType | str) -> str:
    return entity_type.value if isinstance(entity_type, EntityType) else entity_type
