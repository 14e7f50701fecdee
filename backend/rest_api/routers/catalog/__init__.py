"""
Catalog API router - combines the routers of every catalog entity.

- productCategory, productSubCategory, product: product hierarchy
- nutrientCategory, nutrient, treatingType, productNutrient: nutrition

All routes are prefixed with /api/v1.0
"""

from fastapi import APIRouter

from .products import (
    product_category_router,
    product_sub_category_router,
    product_router,
)
from .nutrition import (
    nutrient_category_router,
    nutrient_router,
    treating_type_router,
    product_nutrient_router,
)

API_PREFIX = "/api/v1.0"

router = APIRouter(prefix=API_PREFIX)

router.include_router(product_category_router)
router.include_router(product_sub_category_router)
router.include_router(product_router)
router.include_router(nutrient_category_router)
router.include_router(nutrient_router)
router.include_router(treating_type_router)
router.include_router(product_nutrient_router)

__all__ = ["router", "API_PREFIX"]
