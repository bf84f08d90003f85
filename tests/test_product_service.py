"""
==============================================================================
Product Service Tests
==============================================================================

Tests for business rules of the catalog service.

==============================================================================
"""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from product_catalog.db.models import Product
from product_catalog.repositories.product_repository import ProductRepository
from product_catalog.schemas.product import BrandSummary, ProductCreate, ProductUpdate
from product_catalog.services.product_service import ProductService
from product_catalog.services.result import ServiceError


@pytest.fixture
def product_data() -> ProductCreate:
    return ProductCreate(
        product_key=1,
        retailer="Test Retailer",
        brand="Test Brand",
        model="Test Model",
        product_name="Test Product",
        price=Decimal("99.99"),
        product_description="Test Description",
    )


class TestProductServiceReads:
    """Tests for read operations."""

    def test_get_all_products(self, service: ProductService, stored_product: Product):
        assert service.get_all_products() == [stored_product]

    def test_get_product_by_id(self, service: ProductService, stored_product: Product):
        assert service.get_product_by_id(1) is stored_product

    def test_get_product_by_id_missing(self, service: ProductService):
        assert service.get_product_by_id(1) is None

    def test_product_exists(self, service: ProductService, stored_product: Product):
        assert service.product_exists(1) is True
        assert service.product_exists(2) is False

    def test_total_product_count(self, service: ProductService, repository: ProductRepository, make_product):
        repository.save(make_product(1, "One"))
        repository.save(make_product(2, "Two"))
        assert service.get_total_product_count() == 2

    def test_brand_summary_projection(self, service: ProductService, repository: ProductRepository, make_product):
        repository.save(make_product(1, "A1", brand="Brand A"))
        repository.save(make_product(2, "A2", brand="Brand A"))
        repository.save(make_product(3, "B1", brand="Brand B"))

        assert service.get_brand_summary() == [
            BrandSummary(brand="Brand A", count=2),
            BrandSummary(brand="Brand B", count=1),
        ]

    def test_filters_delegate_to_repository(self):
        repository = MagicMock(spec=ProductRepository)
        repository.find_by_brand_ignore_case.return_value = []
        repository.find_by_name_containing_ignore_case.return_value = []
        service = ProductService(repository)

        service.get_products_by_brand("Acme")
        service.search_products_by_name("lamp")

        repository.find_by_brand_ignore_case.assert_called_once_with("Acme")
        repository.find_by_name_containing_ignore_case.assert_called_once_with("lamp")


class TestProductServiceWrites:
    """Tests for create, update and delete rules."""

    def test_create_then_get_returns_equal_record(self, service: ProductService, product_data: ProductCreate):
        service.create_product(product_data)

        fetched = service.get_product_by_id(1)
        assert fetched is not None
        assert fetched.to_dict() == product_data.model_dump()

    def test_create_does_not_check_existing_key(self, product_data: ProductCreate):
        repository = MagicMock(spec=ProductRepository)
        repository.save.side_effect = lambda product: product
        service = ProductService(repository)

        service.create_product(product_data)

        repository.exists_by_key.assert_not_called()
        repository.save.assert_called_once()

    def test_update_replaces_all_fields(self, service: ProductService, stored_product: Product):
        data = ProductUpdate(product_key=1, product_name="Renamed", price=Decimal("79.99"))

        result = service.update_product(data)

        assert result.ok
        fetched = service.get_product_by_id(1)
        assert fetched.to_dict() == data.model_dump()
        assert fetched.brand is None
        assert fetched.retailer is None

    def test_update_missing_product(self, service: ProductService, product_data: ProductCreate):
        result = service.update_product(ProductUpdate(**product_data.model_dump()))

        assert not result.ok
        assert result.error is ServiceError.NOT_FOUND
        assert result.value is None
        assert service.get_total_product_count() == 0

    def test_delete_product(self, service: ProductService, stored_product: Product):
        result = service.delete_product(1)

        assert result.ok
        assert service.get_product_by_id(1) is None
        assert service.product_exists(1) is False

    def test_delete_missing_product(self):
        repository = MagicMock(spec=ProductRepository)
        repository.exists_by_key.return_value = False
        service = ProductService(repository)

        result = service.delete_product(7)

        assert result.error is ServiceError.NOT_FOUND
        repository.delete_by_key.assert_not_called()
