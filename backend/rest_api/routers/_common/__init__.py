"""
Common utilities shared across routers.
"""

from .dependencies import get_audit_bus, service_provider
from .crud_router import build_crud_router, ERROR_RESPONSES

__all__ = [
    # Dependencies
    "get_audit_bus",
    "service_provider",
    # Router factory
    "build_crud_router",
    "ERROR_RESPONSES",
]
