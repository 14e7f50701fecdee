"""
Pytest configuration and fixtures for backend tests.
"""

import os

# Settings are read at import time: point them at SQLite before importing the app
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUDIT_DATABASE_URL"] = ""
os.environ["AUDIT_SINK_ENABLED"] = "false"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"
os.environ["ENVIRONMENT"] = "test"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from rest_api.main import create_app
from rest_api.models import (
    Base, AuditBase,
    ProductCategory, ProductSubCategory, Product,
    NutrientCategory, Nutrient, TreatingType, ProductNutrient,
)
from rest_api.services.events import AuditEventBus
from shared.config.constants import AuditStatus
from shared.infrastructure.db import enable_sqlite_foreign_keys, get_db


# SQLite in-memory databases for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# The audit sink writes from the bus worker thread: keep it on its own connection
audit_engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingAuditSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=audit_engine)


class CollectingSubscriber:
    """Audit subscriber that keeps every delivered event in memory."""

    def __init__(self):
        self.events = []

    def consume(self, event):
        self.events.append(event)

    @property
    def failures(self):
        return [e for e in self.events if e.status == AuditStatus.FAILURE]

    @property
    def successes(self):
        return [e for e in self.events if e.status == AuditStatus.SUCCESS]


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    Uses SQLite in-memory for isolation.
    """
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def audit_session_factory():
    """Session factory bound to a fresh audit database."""
    AuditBase.metadata.create_all(bind=audit_engine)
    try:
        yield TestingAuditSessionLocal
    finally:
        AuditBase.metadata.drop_all(bind=audit_engine)


@pytest.fixture
def audit_collector():
    return CollectingSubscriber()


@pytest.fixture
def audit_bus(audit_collector):
    """Running audit bus with the collecting subscriber attached."""
    bus = AuditEventBus(name="test-audit-bus")
    bus.subscribe(audit_collector)
    bus.start()
    try:
        yield bus
    finally:
        bus.stop()


@pytest.fixture(scope="function")
def client(db_session, audit_bus):
    """
    Create a test client with database session override and the test audit bus.
    """
    app = create_app(audit_bus=audit_bus)

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# Seed data
# =============================================================================


@pytest.fixture
def seed_product_category(db_session):
    category = ProductCategory(title="Fruits")
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture
def seed_product_sub_category(db_session, seed_product_category):
    sub_category = ProductSubCategory(
        title="Citrus",
        product_category_id=seed_product_category.id,
    )
    db_session.add(sub_category)
    db_session.commit()
    db_session.refresh(sub_category)
    return sub_category


@pytest.fixture
def seed_product(db_session, seed_product_sub_category):
    product = Product(
        title="Orange",
        product_sub_category_id=seed_product_sub_category.id,
    )
    db_session.add(product)
    db_session.commit()
    db_session.refresh(product)
    return product


@pytest.fixture
def seed_nutrient_category(db_session):
    category = NutrientCategory(title="Vitamins")
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture
def seed_nutrient(db_session, seed_nutrient_category):
    nutrient = Nutrient(
        title="Vitamin C",
        daily_dose=90.0,
        nutrient_category_id=seed_nutrient_category.id,
    )
    db_session.add(nutrient)
    db_session.commit()
    db_session.refresh(nutrient)
    return nutrient


@pytest.fixture
def seed_treating_type(db_session):
    treating_type = TreatingType(title="Raw")
    db_session.add(treating_type)
    db_session.commit()
    db_session.refresh(treating_type)
    return treating_type


@pytest.fixture
def seed_product_nutrient(db_session, seed_product, seed_nutrient, seed_treating_type):
    product_nutrient = ProductNutrient(
        product_id=seed_product.id,
        nutrient_id=seed_nutrient.id,
        treating_type_id=seed_treating_type.id,
        quality=53.2,
    )
    db_session.add(product_nutrient)
    db_session.commit()
    db_session.refresh(product_nutrient)
    return product_nutrient
