"""
Product Sub-Category Service.

Sub-categories belong to exactly one product category. The parent is
embedded in every transfer object returned; on create/update only
``product_category_id`` is taken from the input, never the embedded parent.
"""

from sqlalchemy.orm import Session

from rest_api.models import ProductSubCategory
from rest_api.services.base_service import BaseCRUDService
from rest_api.services.events import AuditEventBus
from shared.config.constants import EntityType
from shared.utils.schemas import ProductSubCategoryDTO
from .builders import product_sub_category_builder
from .rules import product_sub_category_validator


class ProductSubCategoryService(BaseCRUDService[ProductSubCategory, ProductSubCategoryDTO]):
    """
    Business rules:
    - Title required, letters only, 1-30 characters
    - Parent category must exist (enforced by the database)
    """

    def __init__(self, db: Session, audit_bus: AuditEventBus):
        super().__init__(
            db,
            audit_bus,
            model=ProductSubCategory,
            builder=product_sub_category_builder,
            entity_type=EntityType.PRODUCT_SUB_CATEGORY,
            validator=product_sub_category_validator,
            mutable_fields=("title", "product_category_id"),
        )
