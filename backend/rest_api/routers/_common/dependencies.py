"""
FastAPI dependencies shared by the catalog routers.

Services are built per request from the request's database session and the
application's audit bus (``app.state.audit_bus``, set by the lifespan
handler or passed to ``create_app``).
"""

from typing import Callable, TypeVar

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from rest_api.services.base_service import BaseCRUDService
from rest_api.services.events import AuditEventBus
from shared.infrastructure.db import get_db

ServiceT = TypeVar("ServiceT", bound=BaseCRUDService)


def get_audit_bus(request: Request) -> AuditEventBus:
    """The audit bus owned by the running application."""
    bus = getattr(request.app.state, "audit_bus", None)
    if bus is None:
        raise RuntimeError("Audit bus is not configured; was the application started?")
    return bus


def service_provider(service_cls: type[ServiceT]) -> Callable[..., ServiceT]:
    """
    Build a dependency returning a request-scoped service.

    Usage:
        get_product_service = service_provider(ProductService)

        @router.get("")
        def list_products(service: ProductService = Depends(get_product_service)):
            ...
    """

    def provide(
        db: Session = Depends(get_db),
        audit_bus: AuditEventBus = Depends(get_audit_bus),
    ) -> ServiceT:
        return service_cls(db, audit_bus)

    provide.__name__ = f"get_{service_cls.__name__}"
    return provide
