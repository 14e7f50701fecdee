"""
Nutrient Category Service.
"""

from sqlalchemy.orm import Session

from rest_api.models import NutrientCategory
from rest_api.services.base_service import BaseCRUDService
from rest_api.services.events import AuditEventBus
from shared.config.constants import EntityType
from shared.utils.schemas import NutrientCategoryDTO
from .builders import nutrient_category_builder
from .rules import nutrient_category_validator


class NutrientCategoryService(BaseCRUDService[NutrientCategory, NutrientCategoryDTO]):
    def __init__(self, db: Session, audit_bus: AuditEventBus):
        super().__init__(
            db,
            audit_bus,
            model=NutrientCategory,
            builder=nutrient_category_builder,
            entity_type=EntityType.NUTRIENT_CATEGORY,
            validator=nutrient_category_validator,
            mutable_fields=("title",),
        )
