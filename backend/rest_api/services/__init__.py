"""
Application services.

- base_service: generic CRUD service (read, paginate, mutation pipeline)
- crud: repository, record mapper, pagination engine
- domain: one service per catalog entity
- events: audit events, bus and sinks
"""

from .base_service import BaseService, BaseCRUDService
from .domain import (
    ProductCategoryService,
    ProductSubCategoryService,
    ProductService,
    NutrientCategoryService,
    NutrientService,
    TreatingTypeService,
    ProductNutrientService,
)
from .events import AuditEvent, AuditEventBus

__all__ = [
    "BaseService",
    "BaseCRUDService",
    "ProductCategoryService",
    "ProductSubCategoryService",
    "ProductService",
    "NutrientCategoryService",
    "NutrientService",
    "TreatingTypeService",
    "ProductNutrientService",
    "AuditEvent",
    "AuditEventBus",
]
