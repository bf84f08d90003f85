"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides test database, client, repository, service and product fixtures.

==============================================================================
"""

import os

# Keep the application's own engine off the on-disk database
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from decimal import Decimal
from typing import Dict, Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from product_catalog.main import app
from product_catalog.db.database import Base, get_db
from product_catalog.db.models import Product
from product_catalog.repositories.product_repository import ProductRepository
from product_catalog.services.product_service import ProductService


# ============================================================================
# DATABASE FIXTURES
# ============================================================================

# In-memory SQLite for testing
SQLALCHEMY_TEST_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
    bind=engine,
)


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db: Session) -> Generator[TestClient, None, None]:
    """Create test client with database override."""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ============================================================================
# LAYER FIXTURES
# ============================================================================

@pytest.fixture
def repository(db: Session) -> ProductRepository:
    return ProductRepository(db)


@pytest.fixture
def service(repository: ProductRepository) -> ProductService:
    return ProductService(repository)


# ============================================================================
# PRODUCT FIXTURES
# ============================================================================

@pytest.fixture
def product_payload() -> Dict:
    """JSON body for a complete, valid product."""
    return {
        "productKey": 1,
        "retailer": "Test Retailer",
        "brand": "Test Brand",
        "model": "Test Model",
        "productName": "Test Product",
        "price": 99.99,
        "productDescription": "Test Description",
    }


@pytest.fixture
def stored_product(db: Session) -> Product:
    """A product already present in the test database."""
    product = Product(
        product_key=1,
        retailer="Test Retailer",
        brand="Test Brand",
        model="Test Model",
        product_name="Test Product",
        price=Decimal("99.99"),
        product_description="Test Description",
    )
    db.add(product)
    db.commit()
    db.refresh(product)
    return product


@pytest.fixture
def make_product():
    """Factory for transient Products with the required fields."""
    def _make(key: int, name: str, brand=None, price: str = "10.00") -> Product:
        return Product(
            product_key=key,
            product_name=name,
            brand=brand,
            price=Decimal(price),
        )
    return _make
