"""
Treating Type Service.
"""

from sqlalchemy.orm import Session

from rest_api.models import TreatingType
from rest_api.services.base_service import BaseCRUDService
from rest_api.services.events import AuditEventBus
from shared.config.constants import EntityType
from shared.utils.schemas import TreatingTypeDTO
from .builders import treating_type_builder
from .rules import treating_type_validator


class TreatingTypeService(BaseCRUDService[TreatingType, TreatingTypeDTO]):
    def __init__(self, db: Session, audit_bus: AuditEventBus):
        super().__init__(
            db,
            audit_bus,
            model=TreatingType,
            builder=treating_type_builder,
            entity_type=EntityType.TREATING_TYPE,
            validator=treating_type_validator,
            mutable_fields=("title",),
        )
