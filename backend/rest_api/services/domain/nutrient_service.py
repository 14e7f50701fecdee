"""
Nutrient Service.

Nutrients can also be ordered by their daily dose.
"""

from operator import attrgetter

from sqlalchemy.orm import Session

from rest_api.models import Nutrient
from rest_api.services.base_service import BaseCRUDService, TITLE_SORT_FIELDS
from rest_api.services.events import AuditEventBus
from shared.config.constants import EntityType
from shared.utils.schemas import NutrientDTO
from .builders import nutrient_builder
from .rules import nutrient_validator


class NutrientService(BaseCRUDService[Nutrient, NutrientDTO]):
    def __init__(self, db: Session, audit_bus: AuditEventBus):
        super().__init__(
            db,
            audit_bus,
            model=Nutrient,
            builder=nutrient_builder,
            entity_type=EntityType.NUTRIENT,
            validator=nutrient_validator,
            mutable_fields=("title", "daily_dose", "nutrient_category_id"),
            sortable_fields={**TITLE_SORT_FIELDS, "daily_dose": attrgetter("daily_dose")},
        )
