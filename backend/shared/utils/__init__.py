"""
Utilities module: Exceptions, validators, schemas.
"""

from shared.utils.exceptions import (
    ErrorKind,
    AppException,
    NotFoundError,
    ValidationError,
    PersistenceError,
)
from shared.utils.validators import (
    Validator,
    Rule,
    Required,
    Length,
    Pattern,
    PositiveInt,
    MinValue,
    title_rules,
)
from shared.utils.schemas import ErrorResponse, PaginationRequest, PaginationResponse

__all__ = [
    # exceptions
    "ErrorKind",
    "AppException",
    "NotFoundError",
    "ValidationError",
    "PersistenceError",
    # validators
    "Validator",
    "Rule",
    "Required",
    "Length",
    "Pattern",
    "PositiveInt",
    "MinValue",
    "title_rules",
    # schemas
    "ErrorResponse",
    "PaginationRequest",
    "PaginationResponse",
]
