"""
Tests for the catalog services - the generic CRUD pipeline and its
per-entity configuration.

Tests cover:
- The create/update/delete lifecycle of a category
- Validation and not-found paths (never audited)
- Persistence failures (exactly one failure event, nothing stored)
- Nested parents in returned transfers
- Per-entity pagination (sort keys, search text)
"""

from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from rest_api.models import ProductCategory
from rest_api.services.domain import (
    NutrientService,
    ProductCategoryService,
    ProductNutrientService,
    ProductService,
    ProductSubCategoryService,
    TreatingTypeService,
)
from shared.config.constants import AuditAction, Messages
from shared.utils.exceptions import ErrorKind, NotFoundError, PersistenceError, ValidationError
from shared.utils.schemas import (
    NutrientDTO,
    PaginationRequest,
    ProductCategoryDTO,
    ProductDTO,
    ProductNutrientDTO,
    ProductSubCategoryDTO,
    TreatingTypeDTO,
)


@pytest.fixture
def category_service(db_session, audit_bus):
    return ProductCategoryService(db_session, audit_bus)


@pytest.fixture
def sub_category_service(db_session, audit_bus):
    return ProductSubCategoryService(db_session, audit_bus)


class TestCategoryLifecycle:
    """Create → update → delete of one product category."""

    def test_fruits_scenario(self, category_service):
        created = category_service.create(ProductCategoryDTO(title="Fruits"))

        all_categories = category_service.get_all()
        assert len(all_categories) == 1
        assert all_categories[0].title == "Fruits"
        assert all_categories[0].id == created.id
        assert created.id is not None
        assert created.created == created.updated

        category_service.update(ProductCategoryDTO(id=created.id, title="Fruit"))

        fetched = category_service.get_by_id(created.id)
        assert fetched.title == "Fruit"
        assert fetched.updated > fetched.created

        category_service.delete(created.id)

        assert category_service.get_by_id(created.id) is None

    def test_create_ignores_supplied_id_and_timestamps(self, category_service, seed_product_category):
        created = category_service.create(
            ProductCategoryDTO(id=seed_product_category.id, title="Vegetables")
        )
        assert created.id != seed_product_category.id
        assert len(category_service.get_all()) == 2

    def test_update_is_strictly_increasing(self, category_service, seed_product_category):
        first = category_service.update(
            ProductCategoryDTO(id=seed_product_category.id, title="Berries")
        )
        second = category_service.update(
            ProductCategoryDTO(id=seed_product_category.id, title="Berry")
        )
        assert second.updated > first.updated
        assert second.created == first.created

    def test_update_keeps_created(self, category_service, seed_product_category):
        original_created = seed_product_category.created
        updated = category_service.update(
            ProductCategoryDTO(id=seed_product_category.id, title="Fruit", created=None)
        )
        assert updated.created == original_created

    def test_get_all_ordered_by_id(self, category_service):
        for title in ["Nuts", "Berries", "Grains"]:
            category_service.create(ProductCategoryDTO(title=title))
        ids = [c.id for c in category_service.get_all()]
        assert ids == sorted(ids)

    def test_successful_mutations_publish_nothing_from_service(
        self, category_service, audit_bus, audit_collector
    ):
        """Success events are the router's job."""
        created = category_service.create(ProductCategoryDTO(title="Fruits"))
        category_service.delete(created.id)
        audit_bus.drain()
        assert audit_collector.events == []


class TestValidationAndNotFound:
    def test_invalid_title_rejected(self, category_service, audit_bus, audit_collector):
        with pytest.raises(ValidationError) as exc_info:
            category_service.create(ProductCategoryDTO(title="Fruits 2024"))

        assert exc_info.value.kind == ErrorKind.VALIDATION
        audit_bus.drain()
        assert audit_collector.events == []
        assert category_service.get_all() == []

    def test_get_by_id_requires_id(self, category_service):
        with pytest.raises(ValidationError) as exc_info:
            category_service.get_by_id(None)
        assert exc_info.value.detail == Messages.OBJECT_ID_CANT_BE_NULL

    def test_get_by_id_missing_returns_none(self, category_service):
        assert category_service.get_by_id(999) is None

    def test_update_missing_record(self, category_service, audit_bus, audit_collector):
        with pytest.raises(NotFoundError) as exc_info:
            category_service.update(ProductCategoryDTO(id=999, title="Fruit"))

        assert exc_info.value.detail == Messages.NOT_EXIST_OBJECT_FOR_UPDATING
        audit_bus.drain()
        assert audit_collector.failures == []

    def test_delete_requires_id(self, category_service):
        with pytest.raises(ValidationError) as exc_info:
            category_service.delete(None)
        assert exc_info.value.detail == Messages.INVALID_OBJECT_ID

    def test_delete_missing_record(self, category_service, audit_bus, audit_collector):
        with pytest.raises(NotFoundError) as exc_info:
            category_service.delete(12345)

        assert exc_info.value.kind == ErrorKind.NOT_FOUND
        assert exc_info.value.detail == Messages.NOT_EXIST_OBJECT_FOR_DELETING
        audit_bus.drain()
        assert audit_collector.failures == []


class TestPersistenceFailures:
    def test_create_with_missing_parent(
        self, sub_category_service, audit_bus, audit_collector
    ):
        """Foreign key violation: one failure event, nothing stored."""
        with pytest.raises(PersistenceError) as exc_info:
            sub_category_service.create(
                ProductSubCategoryDTO(title="Citrus", product_category_id=999)
            )

        error = exc_info.value
        assert error.kind == ErrorKind.PERSISTENCE
        assert error.status_code == 500
        assert error.detail == Messages.OBJECT_NOT_CREATED
        assert error.__cause__ is not None

        audit_bus.drain()
        assert len(audit_collector.failures) == 1
        failure = audit_collector.failures[0]
        assert failure.action == AuditAction.CREATE
        assert failure.entity_type == "ProductSubCategory"
        assert failure.payload.startswith("Changes was not saved in data base: ")

        assert sub_category_service.get_all() == []

    def test_create_failure_from_driver(self, category_service, audit_bus, audit_collector):
        with patch.object(
            category_service.repo.session,
            "commit",
            side_effect=OperationalError("INSERT", {}, Exception("database is locked")),
        ):
            with pytest.raises(PersistenceError):
                category_service.create(ProductCategoryDTO(title="Fruits"))

        audit_bus.drain()
        assert len(audit_collector.failures) == 1
        assert "database is locked" in audit_collector.failures[0].payload
        assert category_service.get_all() == []

    def test_delete_parent_with_children(
        self, category_service, seed_product_sub_category, audit_bus, audit_collector
    ):
        category_id = seed_product_sub_category.product_category_id

        with pytest.raises(PersistenceError) as exc_info:
            category_service.delete(category_id)

        assert exc_info.value.detail == Messages.OBJECT_NOT_DELETED
        audit_bus.drain()
        assert [e.action for e in audit_collector.failures] == [AuditAction.DELETE]
        assert category_service.get_by_id(category_id) is not None

    def test_update_with_missing_parent(
        self, sub_category_service, seed_product_sub_category, audit_bus, audit_collector
    ):
        with pytest.raises(PersistenceError):
            sub_category_service.update(
                ProductSubCategoryDTO(
                    id=seed_product_sub_category.id,
                    title="Citrus",
                    product_category_id=999,
                )
            )

        audit_bus.drain()
        assert [e.action for e in audit_collector.failures] == [AuditAction.UPDATE]


class TestNestedTransfers:
    def test_product_embeds_parents(self, db_session, audit_bus, seed_product_sub_category):
        service = ProductService(db_session, audit_bus)

        created = service.create(
            ProductDTO(
                title="Lemon",
                product_sub_category_id=seed_product_sub_category.id,
            )
        )

        assert created.product_sub_category.title == "Citrus"
        assert created.product_sub_category.product_category.title == "Fruits"

    def test_embedded_parent_is_not_inserted(
        self, db_session, audit_bus, seed_product_category, sub_category_service
    ):
        sub_category_service.create(
            ProductSubCategoryDTO(
                title="Citrus",
                product_category_id=seed_product_category.id,
                product_category=ProductCategoryDTO(title="Shadow"),
            )
        )
        titles = [c.title for c in db_session.query(ProductCategory).all()]
        assert titles == ["Fruits"]

    def test_update_ignores_non_whitelisted_fields(
        self, sub_category_service, seed_product_sub_category
    ):
        updated = sub_category_service.update(
            ProductSubCategoryDTO(
                id=seed_product_sub_category.id,
                title="Citrus fruits",
                product_category_id=seed_product_sub_category.product_category_id,
                product_category=ProductCategoryDTO(title="Ignored"),
            )
        )
        assert updated.title == "Citrus fruits"
        assert updated.product_category.title == "Fruits"


class TestEntityConfiguration:
    def test_nutrient_sort_by_daily_dose(self, db_session, audit_bus, seed_nutrient_category):
        service = NutrientService(db_session, audit_bus)
        for title, dose in [("Iron", 18.0), ("Zinc", 11.0), ("Calcium", 1000.0)]:
            service.create(
                NutrientDTO(
                    title=title,
                    daily_dose=dose,
                    nutrient_category_id=seed_nutrient_category.id,
                )
            )

        page = service.get_pagination(PaginationRequest(sort_by="dailyDose"))

        assert page.total == 3
        assert [n.title for n in page.values] == ["Zinc", "Iron", "Calcium"]

    def test_product_nutrient_search_uses_linked_titles(
        self, db_session, audit_bus, seed_product_nutrient
    ):
        service = ProductNutrientService(db_session, audit_bus)

        by_product = service.get_pagination(PaginationRequest(query="orange"))
        by_nutrient = service.get_pagination(PaginationRequest(query="vitamin"))
        no_match = service.get_pagination(PaginationRequest(query="iron"))

        assert by_product.total == 1
        assert by_nutrient.total == 1
        assert no_match.total == 0

    def test_product_nutrient_embeds_links(self, db_session, audit_bus, seed_product_nutrient):
        service = ProductNutrientService(db_session, audit_bus)

        dto = service.get_by_id(seed_product_nutrient.id)

        assert dto.quality == pytest.approx(53.2)
        assert dto.product.title == "Orange"
        assert dto.nutrient.title == "Vitamin C"
        assert dto.treating_type.title == "Raw"

    def test_product_nutrient_rejects_negative_quality(
        self, db_session, audit_bus, seed_product, seed_nutrient, seed_treating_type
    ):
        service = ProductNutrientService(db_session, audit_bus)
        with pytest.raises(ValidationError):
            service.create(
                ProductNutrientDTO(
                    product_id=seed_product.id,
                    nutrient_id=seed_nutrient.id,
                    treating_type_id=seed_treating_type.id,
                    quality=-1,
                )
            )

    def test_product_nutrient_title_sort_ignored(self, db_session, audit_bus, seed_product_nutrient):
        service = ProductNutrientService(db_session, audit_bus)
        page = service.get_pagination(PaginationRequest(sort_by="title"))
        assert [v.id for v in page.values] == [seed_product_nutrient.id]

    def test_treating_type_pagination(self, db_session, audit_bus):
        service = TreatingTypeService(db_session, audit_bus)
        for title in ["Raw", "Boiled", "Fried", "Baked"]:
            service.create(TreatingTypeDTO(title=title))

        page = service.get_pagination(
            PaginationRequest(sort_by="title", skip=1, take=2)
        )

        assert page.total == 4
        assert [t.title for t in page.values] == ["Boiled", "Fried"]
