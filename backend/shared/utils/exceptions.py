"""
Centralized exceptions for consistent error handling.

Every error carries an explicit ErrorKind so callers (and the single
exception handler registered by the application) can branch on the kind
instead of on the concrete class:

    ValidationError   -> ErrorKind.VALIDATION   (400, caller's fault)
    NotFoundError     -> ErrorKind.NOT_FOUND    (404, caller's fault)
    PersistenceError  -> ErrorKind.PERSISTENCE  (500, system failure, audited)

Usage:
    from shared.utils.exceptions import NotFoundError, ValidationError

    raise NotFoundError("Product", 123)
    raise ValidationError("Title is required", field="title")
"""

from enum import Enum
from typing import Any

from fastapi import HTTPException, status

from shared.config.logging import get_logger

logger = get_logger(__name__)


class ErrorKind(str, Enum):
    """Error taxonomy of the catalog services."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    PERSISTENCE = "persistence"


class AppException(HTTPException):
    """
    Base exception with automatic logging.

    All custom exceptions should inherit from this class
    to ensure consistent logging and response format.
    """

    kind: ErrorKind

    def __init__(
        self,
        status_code: int,
        detail: str,
        log_level: str = "warning",
        headers: dict[str, str] | None = None,
        **log_context: Any,
    ):
        log_fn = getattr(logger, log_level, logger.warning)
        log_fn(detail, status_code=status_code, kind=self.kind.value, **log_context)

        super().__init__(status_code=status_code, detail=detail, headers=headers)

    def to_dict(self) -> dict[str, Any]:
        """Response body for this error."""
        return {"detail": self.detail, "kind": self.kind.value}


# =============================================================================
# 400 Bad Request Errors
# =============================================================================


class ValidationError(AppException):
    """
    Input validation error (400).

    Usage:
        raise ValidationError("Object Id can't be null.")
        raise ValidationError("Title is too long", errors=["title: ..."])
    """

    kind = ErrorKind.VALIDATION

    def __init__(self, detail: str, *, errors: list[str] | None = None, **log_context: Any):
        self.errors = errors or [detail]
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            log_level="warning",
            **log_context,
        )

    def to_dict(self) -> dict[str, Any]:
        body = super().to_dict()
        body["errors"] = self.errors
        return body


# =============================================================================
# 404 Not Found Errors
# =============================================================================


class NotFoundError(AppException):
    """
    Entity not found error (404).

    Usage:
        raise NotFoundError("Product", 123)
        raise NotFoundError("Product", 123, message="There is no object to delete.")
    """

    kind = ErrorKind.NOT_FOUND

    def __init__(
        self,
        entity: str,
        entity_id: int | str | None = None,
        *,
        message: str | None = None,
        **log_context: Any,
    ):
        if message is not None:
            detail = message
        elif entity_id is not None:
            detail = f"{entity} with Id {entity_id} not found"
        else:
            detail = f"{entity} not found"

        self.entity = entity
        self.entity_id = entity_id
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            log_level="warning",
            entity=entity,
            entity_id=entity_id,
            **log_context,
        )


# =============================================================================
# 500 Internal Server Errors
# =============================================================================


class PersistenceError(AppException):
    """
    The database rejected a create/update/delete (500).

    The underlying driver/ORM exception is kept as __cause__ when raised
    with ``raise PersistenceError(...) from exc``.
    """

    kind = ErrorKind.PERSISTENCE

    def __init__(self, detail: str, *, operation: str, **log_context: Any):
        self.operation = operation
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            log_level="error",
            operation=operation,
            **log_context,
        )
