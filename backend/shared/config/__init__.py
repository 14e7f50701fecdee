"""
Configuration module: Settings, logging, constants.
"""

from shared.config.settings import settings
from shared.config.logging import get_logger, setup_logging
from shared.config.constants import (
    EntityType,
    AuditStatus,
    AuditAction,
    RuleSets,
    Limits,
    Messages,
)

__all__ = [
    # settings
    "settings",
    # logging
    "get_logger",
    "setup_logging",
    # constants
    "EntityType",
    "AuditStatus",
    "AuditAction",
    "RuleSets",
    "Limits",
    "Messages",
]
