"""
Centralized constants for the backend application.
Avoid magic strings and repeated constants.

Usage:
    from shared.config.constants import EntityType, AuditAction, Limits

    if event.action == AuditAction.CREATE:
        ...
"""

from enum import Enum
from typing import Final


# =============================================================================
# Catalog Entities
# =============================================================================


class EntityType(str, Enum):
    """Entity type tags used in audit events and error messages."""

    PRODUCT_CATEGORY = "ProductCategory"
    PRODUCT_SUB_CATEGORY = "ProductSubCategory"
    PRODUCT = "Product"
    NUTRIENT_CATEGORY = "NutrientCategory"
    NUTRIENT = "Nutrient"
    TREATING_TYPE = "TreatingType"
    PRODUCT_NUTRIENT = "ProductNutrient"


# =============================================================================
# Audit Events
# =============================================================================


class AuditStatus(str, Enum):
    """Outcome of a mutation."""

    SUCCESS = "success"
    FAILURE = "failure"


class AuditAction(str, Enum):
    """Mutation kind reported by an audit event."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


# =============================================================================
# Validation Rule Sets
# =============================================================================


class RuleSets:
    """Operation labels that key validation rule sets."""

    CREATE: Final[str] = "create"
    UPDATE: Final[str] = "update"


# =============================================================================
# Limits
# =============================================================================


class Limits:
    """Field and paging limits."""

    TITLE_MIN_LENGTH: Final[int] = 1
    TITLE_MAX_LENGTH: Final[int] = 30

    DEFAULT_SKIP: Final[int] = 0
    DEFAULT_TAKE: Final[int] = 10


# =============================================================================
# Messages
# =============================================================================


class Messages:
    """User-facing messages, keyed the same way as the resource strings."""

    OBJECT_ID_CANT_BE_NULL: Final[str] = "Object Id can't be null."
    INVALID_OBJECT_ID: Final[str] = "Invalid object Id."
    OBJECT_NOT_CREATED: Final[str] = "Object was not created."
    OBJECT_NOT_UPDATED: Final[str] = "Object was not updated."
    OBJECT_NOT_DELETED: Final[str] = "Object was not deleted."
    NOT_EXIST_OBJECT_FOR_UPDATING: Final[str] = "There is no object to update."
    NOT_EXIST_OBJECT_FOR_DELETING: Final[str] = "There is no object to delete."
    NOT_EXIST_OBJECT_WITH_THIS_ID: Final[str] = "There is no object with this Id."
    CHANGES_NOT_SAVED: Final[str] = "Changes was not saved in data base: {error}"
