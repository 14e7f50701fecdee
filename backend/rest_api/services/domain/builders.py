"""
Record mappers for the catalog entities.

Parents are embedded in their children's transfer objects
(product -> sub-category -> category); collections of children are not.
"""

from rest_api.models import (
    Nutrient,
    NutrientCategory,
    Product,
    ProductCategory,
    ProductNutrient,
    ProductSubCategory,
    TreatingType,
)
from rest_api.services.crud.entity_builder import EntityBuilder
from shared.utils.schemas import (
    NutrientCategoryDTO,
    NutrientDTO,
    ProductCategoryDTO,
    ProductDTO,
    ProductNutrientDTO,
    ProductSubCategoryDTO,
    TreatingTypeDTO,
)

product_category_builder = EntityBuilder(ProductCategory, ProductCategoryDTO)

product_sub_category_builder = EntityBuilder(
    ProductSubCategory,
    ProductSubCategoryDTO,
    relations={"product_category": product_category_builder},
)

product_builder = EntityBuilder(
    Product,
    ProductDTO,
    relations={"product_sub_category": product_sub_category_builder},
)

nutrient_category_builder = EntityBuilder(NutrientCategory, NutrientCategoryDTO)

nutrient_builder = EntityBuilder(
    Nutrient,
    NutrientDTO,
    relations={"nutrient_category": nutrient_category_builder},
)

treating_type_builder = EntityBuilder(TreatingType, TreatingTypeDTO)

product_nutrient_builder = EntityBuilder(
    ProductNutrient,
    ProductNutrientDTO,
    relations={
        "product": product_builder,
        "nutrient": nutrient_builder,
        "treating_type": treating_type_builder,
    },
)
