"""
Product hierarchy endpoints: categories, sub-categories and products.
"""

from rest_api.routers._common import build_crud_router, service_provider
from rest_api.services.domain import (
    ProductCategoryService,
    ProductService,
    ProductSubCategoryService,
)
from shared.config.constants import EntityType
from shared.utils.schemas import ProductCategoryDTO, ProductDTO, ProductSubCategoryDTO


get_product_category_service = service_provider(ProductCategoryService)
get_product_sub_category_service = service_provider(ProductSubCategoryService)
get_product_service = service_provider(ProductService)


product_category_router = build_crud_router(
    resource="productCategory",
    entity_type=EntityType.PRODUCT_CATEGORY,
    dto_type=ProductCategoryDTO,
    get_service=get_product_category_service,
)

product_sub_category_router = build_crud_router(
    resource="productSubCategory",
    entity_type=EntityType.PRODUCT_SUB_CATEGORY,
    dto_type=ProductSubCategoryDTO,
    get_service=get_product_sub_category_service,
)

product_router = build_crud_router(
    resource="product",
    entity_type=EntityType.PRODUCT,
    dto_type=ProductDTO,
    get_service=get_product_service,
)
