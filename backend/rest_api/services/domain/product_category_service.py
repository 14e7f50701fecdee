"""
Product Category Service.
"""

from sqlalchemy.orm import Session

from rest_api.models import ProductCategory
from rest_api.services.base_service import BaseCRUDService
from rest_api.services.events import AuditEventBus
from shared.config.constants import EntityType
from shared.utils.schemas import ProductCategoryDTO
from .builders import product_category_builder
from .rules import product_category_validator


class ProductCategoryService(BaseCRUDService[ProductCategory, ProductCategoryDTO]):
    def __init__(self, db: Session, audit_bus: AuditEventBus):
        super().__init__(
            db,
            audit_bus,
            model=ProductCategory,
            builder=product_category_builder,
            entity_type=EntityType.PRODUCT_CATEGORY,
            validator=product_category_validator,
            mutable_fields=("title",),
        )
