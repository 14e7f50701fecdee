"""
Shared Pydantic schemas used across the application.

Transfer representations (DTOs) of the catalog entities plus the
pagination request/response envelopes. JSON uses camelCase aliases
(``productCategoryId``, ``sortBy``) and snake_case is accepted on input.
"""

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model with camelCase aliases and ORM attribute loading."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# =============================================================================
# Error Schemas
# =============================================================================


class ErrorResponse(BaseModel):
    """Body returned for ValidationError, NotFoundError and PersistenceError."""

    detail: str
    kind: str
    errors: list[str] | None = None


# =============================================================================
# Pagination Schemas
# =============================================================================


class PaginationRequest(CamelModel):
    """
    Search, sort and window parameters.

    Missing skip/take fall back to 0 and the configured page size.
    """

    query: str | None = None
    sort_by: str | None = None
    ascending: bool = True
    skip: int | None = Field(default=None, ge=0)
    take: int | None = Field(default=None, ge=0)


T = TypeVar("T")


class PaginationResponse(CamelModel, Generic[T]):
    """Filtered total plus the requested page."""

    total: int
    values: list[T]


# =============================================================================
# Catalog DTOs
# =============================================================================


class EntityDTO(CamelModel):
    """Fields shared by every catalog entity."""

    id: int | None = None
    created: datetime | None = None
    updated: datetime | None = None


class ProductCategoryDTO(EntityDTO):
    title: str | None = None


class ProductSubCategoryDTO(EntityDTO):
    title: str | None = None
    product_category_id: int | None = None
    product_category: ProductCategoryDTO | None = None


class ProductDTO(EntityDTO):
    title: str | None = None
    product_sub_category_id: int | None = None
    product_sub_category: ProductSubCategoryDTO | None = None


class NutrientCategoryDTO(EntityDTO):
    title: str | None = None


class NutrientDTO(EntityDTO):
    title: str | None = None
    daily_dose: float | None = None
    nutrient_category_id: int | None = None
    nutrient_category: NutrientCategoryDTO | None = None


class TreatingTypeDTO(EntityDTO):
    title: str | None = None


class ProductNutrientDTO(EntityDTO):
    """Join of one product, one nutrient and one treating type."""

    product_id: int | None = None
    nutrient_id: int | None = None
    treating_type_id: int | None = None
    quality: float | None = None
    product: ProductDTO | None = None
    nutrient: NutrientDTO | None = None
    treating_type: TreatingTypeDTO | None = None
