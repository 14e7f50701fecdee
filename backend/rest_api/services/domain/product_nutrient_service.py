"""
Product Nutrient Service.

A product-nutrient links one product, one nutrient and one treating type
with the nutrient quantity (``quality``). It has no title: searching
matches the linked product and nutrient titles, and sorting by "title"
is not offered.
"""

from operator import attrgetter

from sqlalchemy.orm import Session

from rest_api.models import ProductNutrient
from rest_api.services.base_service import BaseCRUDService, BASE_SORT_FIELDS
from rest_api.services.events import AuditEventBus
from shared.config.constants import EntityType
from shared.utils.schemas import ProductNutrientDTO
from .builders import product_nutrient_builder
from .rules import product_nutrient_validator


def product_nutrient_search_text(record: ProductNutrient) -> str:
    """Product title and nutrient title, space separated (missing links skipped)."""
    titles = [
        related.title
        for related in (record.product, record.nutrient)
        if related is not None
    ]
    return " ".join(titles)


class ProductNutrientService(BaseCRUDService[ProductNutrient, ProductNutrientDTO]):
    """
    Business rules:
    - product, nutrient and treating type ids are positive and must exist
    - quality is required and not negative
    """

    def __init__(self, db: Session, audit_bus: AuditEventBus):
        super().__init__(
            db,
            audit_bus,
            model=ProductNutrient,
            builder=product_nutrient_builder,
            entity_type=EntityType.PRODUCT_NUTRIENT,
            validator=product_nutrient_validator,
            mutable_fields=("product_id", "nutrient_id", "treating_type_id", "quality"),
            sortable_fields={**BASE_SORT_FIELDS, "quality": attrgetter("quality")},
            search_text=product_nutrient_search_text,
        )
