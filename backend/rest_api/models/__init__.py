"""
SQLAlchemy ORM Models Package.

All models are organized into domain-specific modules:
- base: Base class, TimestampMixin, TitledMixin
- catalog: ProductCategory, ProductSubCategory, Product
- nutrition: NutrientCategory, Nutrient, TreatingType, ProductNutrient
- audit: AuditBase, AuditLog (separate metadata for the audit database)
"""

# Base classes
from .base import Base, TimestampMixin, TitledMixin, utc_now

# Catalog (product hierarchy)
from .catalog import ProductCategory, ProductSubCategory, Product

# Nutrition
from .nutrition import NutrientCategory, Nutrient, TreatingType, ProductNutrient

# Audit trail
from .audit import AuditBase, AuditLog

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    "TitledMixin",
    "utc_now",
    # Catalog
    "ProductCategory",
    "ProductSubCategory",
    "Product",
    # Nutrition
    "NutrientCategory",
    "Nutrient",
    "TreatingType",
    "ProductNutrient",
    # Audit
    "AuditBase",
    "AuditLog",
]
