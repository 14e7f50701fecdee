"""
Product Service.
"""

from sqlalchemy.orm import Session

from rest_api.models import Product
from rest_api.services.base_service import BaseCRUDService
from rest_api.services.events import AuditEventBus
from shared.config.constants import EntityType
from shared.utils.schemas import ProductDTO
from .builders import product_builder
from .rules import product_validator


class ProductService(BaseCRUDService[Product, ProductDTO]):
    """Products hang off a sub-category, which in turn carries its category."""

    def __init__(self, db: Session, audit_bus: AuditEventBus):
        super().__init__(
            db,
            audit_bus,
            model=Product,
            builder=product_builder,
            entity_type=EntityType.PRODUCT,
            validator=product_validator,
            mutable_fields=("title", "product_sub_category_id"),
        )
