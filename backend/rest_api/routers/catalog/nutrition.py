"""
Nutrition endpoints: nutrient categories, nutrients, treating types and
product nutrients.
"""

from rest_api.routers._common import build_crud_router, service_provider
from rest_api.services.domain import (
    NutrientCategoryService,
    NutrientService,
    ProductNutrientService,
    TreatingTypeService,
)
from shared.config.constants import EntityType
from shared.utils.schemas import (
    NutrientCategoryDTO,
    NutrientDTO,
    ProductNutrientDTO,
    TreatingTypeDTO,
)


get_nutrient_category_service = service_provider(NutrientCategoryService)
get_nutrient_service = service_provider(NutrientService)
get_treating_type_service = service_provider(TreatingTypeService)
get_product_nutrient_service = service_provider(ProductNutrientService)


nutrient_category_router = build_crud_router(
    resource="nutrientCategory",
    entity_type=EntityType.NUTRIENT_CATEGORY,
    dto_type=NutrientCategoryDTO,
    get_service=get_nutrient_category_service,
)

nutrient_router = build_crud_router(
    resource="nutrient",
    entity_type=EntityType.NUTRIENT,
    dto_type=NutrientDTO,
    get_service=get_nutrient_service,
)

treating_type_router = build_crud_router(
    resource="treatingType",
    entity_type=EntityType.TREATING_TYPE,
    dto_type=TreatingTypeDTO,
    get_service=get_treating_type_service,
)

product_nutrient_router = build_crud_router(
    resource="productNutrient",
    entity_type=EntityType.PRODUCT_NUTRIENT,
    dto_type=ProductNutrientDTO,
    get_service=get_product_nutrient_service,
)
