"""
Domain Services - Clean Architecture Application Layer.

CLEAN-ARCH: Services contain business logic and orchestrate operations.
They use Repositories for data access and report persistence failures
to the audit bus.

Structure:
    Router (thin controller)
        ↓
    Service (business logic)  ← YOU ARE HERE
        ↓
    Repository (data access)
        ↓
    Model (entity)

Usage:
    from rest_api.services.domain import ProductService

    # In router
    service = ProductService(db, audit_bus)
    page = service.get_pagination(PaginationRequest(query="apple"))
"""

from .product_category_service import ProductCategoryService
from .product_sub_category_service import ProductSubCategoryService
from .product_service import ProductService
from .nutrient_category_service import NutrientCategoryService
from .nutrient_service import NutrientService
from .treating_type_service import TreatingTypeService
from .product_nutrient_service import ProductNutrientService, product_nutrient_search_text

__all__ = [
    # Product hierarchy
    "ProductCategoryService",
    "ProductSubCategoryService",
    "ProductService",
    # Nutrition
    "NutrientCategoryService",
    "NutrientService",
    "TreatingTypeService",
    "ProductNutrientService",
    "product_nutrient_search_text",
]
