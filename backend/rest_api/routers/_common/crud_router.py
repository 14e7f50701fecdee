"""
Router factory for catalog entities.

Every entity exposes the same six endpoints:

    GET    ""             list of transfers
    POST   /pagination    {total, values}
    GET    /{entity_id}   transfer, 404 when absent
    POST   /create        created transfer
    PUT    /update        updated transfer
    DELETE /{entity_id}   204

Mutations publish their success audit event here, after the service
returned; failure events are published by the service itself.
"""

from typing import Any, Callable

from fastapi import APIRouter, Depends, Response, status

from rest_api.services.events import AuditEvent, AuditEventBus
from shared.config.constants import AuditAction, EntityType, Messages
from shared.utils.exceptions import NotFoundError
from shared.utils.schemas import ErrorResponse, PaginationRequest, PaginationResponse
from .dependencies import get_audit_bus

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def build_crud_router(
    *,
    resource: str,
    entity_type: EntityType,
    dto_type: type,
    get_service: Callable[..., Any],
) -> APIRouter:
    """
    Create the router of one catalog entity.

    Args:
        resource: Path segment (e.g. "productCategory")
        entity_type: Tag used in audit events and error messages
        dto_type: Transfer schema used for bodies and responses
        get_service: Dependency returning the entity's service
    """
    router = APIRouter(prefix=f"/{resource}", tags=[resource], responses=ERROR_RESPONSES)

    @router.get("", response_model=list[dto_type])
    def get_all(service=Depends(get_service)):
        """All records ordered by id."""
        return service.get_all()

    @router.post("/pagination", response_model=PaginationResponse[dto_type])
    def get_pagination(body: PaginationRequest, service=Depends(get_service)):
        """Filtered total plus one page of records."""
        return service.get_pagination(body)

    @router.get("/{entity_id}", response_model=dto_type)
    def get_by_id(entity_id: int, service=Depends(get_service)):
        dto = service.get_by_id(entity_id)
        if dto is None:
            raise NotFoundError(
                entity_type.value,
                entity_id,
                message=Messages.NOT_EXIST_OBJECT_WITH_THIS_ID,
            )
        return dto

    @router.post("/create", response_model=dto_type)
    def create(
        body: dto_type,
        service=Depends(get_service),
        audit_bus: AuditEventBus = Depends(get_audit_bus),
    ):
        created = service.create(body)
        audit_bus.publish(AuditEvent.success(AuditAction.CREATE, entity_type, created))
        return created

    @router.put("/update", response_model=dto_type)
    def update(
        body: dto_type,
        service=Depends(get_service),
        audit_bus: AuditEventBus = Depends(get_audit_bus),
    ):
        updated = service.update(body)
        audit_bus.publish(AuditEvent.success(AuditAction.UPDATE, entity_type, updated))
        return updated

    @router.delete("/{entity_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete(
        entity_id: int,
        service=Depends(get_service),
        audit_bus: AuditEventBus = Depends(get_audit_bus),
    ):
        service.delete(entity_id)
        audit_bus.publish(AuditEvent.deleted(entity_type, entity_id))
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
