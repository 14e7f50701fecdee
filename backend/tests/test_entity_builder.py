"""
Tests for the record mapper (EntityBuilder).
"""

from datetime import datetime

import pytest

from rest_api.models import Product, ProductCategory, ProductSubCategory
from rest_api.services.crud.entity_builder import EntityBuilder
from rest_api.services.domain.builders import (
    product_builder,
    product_category_builder,
    product_nutrient_builder,
    product_sub_category_builder,
)
from shared.utils.schemas import ProductCategoryDTO, ProductDTO, ProductSubCategoryDTO


class TestToTransfer:
    """Record -> DTO."""

    def test_none_maps_to_none(self):
        assert product_category_builder.to_transfer(None) is None
        assert product_category_builder.to_transfer_many(None) is None

    def test_copies_columns(self):
        stamp = datetime(2024, 3, 1, 12, 0, 0)
        record = ProductCategory(id=4, title="Fruits", created=stamp, updated=stamp)

        dto = product_category_builder.to_transfer(record)

        assert dto == ProductCategoryDTO(id=4, title="Fruits", created=stamp, updated=stamp)

    def test_maps_nested_parents(self):
        category = ProductCategory(id=1, title="Fruits")
        sub_category = ProductSubCategory(
            id=2, title="Citrus", product_category_id=1, product_category=category
        )
        product = Product(
            id=3, title="Orange", product_sub_category_id=2, product_sub_category=sub_category
        )

        dto = product_builder.to_transfer(product)

        assert dto.product_sub_category.title == "Citrus"
        assert dto.product_sub_category.product_category.title == "Fruits"

    def test_absent_relation_stays_none(self):
        record = ProductSubCategory(id=2, title="Citrus", product_category_id=1)

        dto = product_sub_category_builder.to_transfer(record)

        assert dto.product_category_id == 1
        assert dto.product_category is None

    def test_collection_keeps_order(self):
        records = [ProductCategory(id=i, title=t) for i, t in [(3, "C"), (1, "A"), (2, "B")]]

        dtos = product_category_builder.to_transfer_many(records)

        assert [d.id for d in dtos] == [3, 1, 2]

    def test_empty_collection(self):
        assert product_category_builder.to_transfer_many([]) == []


class TestToPersisted:
    """DTO -> record."""

    def test_none_maps_to_none(self):
        assert product_builder.to_persisted(None) is None
        assert product_builder.to_persisted_many(None) is None

    def test_builds_transient_record(self):
        record = product_category_builder.to_persisted(ProductCategoryDTO(title="Fruits"))

        assert isinstance(record, ProductCategory)
        assert record.title == "Fruits"
        assert record.id is None

    def test_nested_relations_are_built(self):
        dto = ProductSubCategoryDTO(
            title="Citrus",
            product_category_id=1,
            product_category=ProductCategoryDTO(id=1, title="Fruits"),
        )

        record = product_sub_category_builder.to_persisted(dto)

        assert isinstance(record.product_category, ProductCategory)
        assert record.product_category.title == "Fruits"

    def test_nested_false_copies_only_foreign_keys(self):
        dto = ProductDTO(
            title="Orange",
            product_sub_category_id=2,
            product_sub_category=ProductSubCategoryDTO(id=2, title="Citrus"),
        )

        record = product_builder.to_persisted(dto, nested=False)

        assert record.product_sub_category_id == 2
        assert record.product_sub_category is None

    def test_collection_keeps_order(self):
        dtos = [ProductCategoryDTO(title=t) for t in ["B", "A", "C"]]

        records = product_category_builder.to_persisted_many(dtos)

        assert [r.title for r in records] == ["B", "A", "C"]


class TestBuilderDefinition:
    def test_field_names_are_shared_columns(self):
        assert set(product_nutrient_builder.field_names) == {
            "id", "created", "updated",
            "product_id", "nutrient_id", "treating_type_id", "quality",
        }

    def test_unknown_relation_rejected(self):
        with pytest.raises(ValueError):
            EntityBuilder(
                ProductCategory,
                ProductCategoryDTO,
                relations={"parent": product_category_builder},
            )
