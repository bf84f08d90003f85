"""
==============================================================================
Product Service Module
==============================================================================

Business rules for the product catalog.

This module implements:
- ProductService: CRUD, filters and aggregates over the product repository
- Existence checks before update and delete
- Brand summary projection

Error Model:
-----------
A missing key on update/delete is reported as ServiceResult with
ServiceError.NOT_FOUND. Storage failures propagate as exceptions.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import List, Optional

from product_catalog.db.models import Product
from product_catalog.repositories.product_repository import ProductRepository
from product_catalog.schemas.product import BrandSummary, ProductBase
from product_catalog.services.result import ServiceError, ServiceResult


# Module logger
logger = logging.getLogger(__name__)


class ProductService:
    """
    Product catalog service.

    Attributes:
        _repository: ProductRepository bound to the current session

    Example:
        >>> service = ProductService(ProductRepository(db_session))
        >>> product = service.create_product(ProductCreate(
        ...     product_key=1,
        ...     product_name="Test Product",
        ...     price=Decimal("99.99"),
        ... ))
        >>> service.delete_product(1).ok
        True
    """

    def __init__(self, repository: ProductRepository) -> None:
        """
        Initialize the product service.

        Args:
            repository: Storage accessor the service delegates to
        """
        self._repository = repository

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    def get_all_products(self) -> List[Product]:
        return self._repository.find_all()

    def get_product_by_id(self, product_key: int) -> Optional[Product]:
        return self._repository.find_by_key(product_key)

    def get_products_by_brand(self, brand: str) -> List[Product]:
        return self._repository.find_by_brand_ignore_case(brand)

    def search_products_by_name(self, text: str) -> List[Product]:
        return self._repository.find_by_name_containing_ignore_case(text)

    def product_exists(self, product_key: int) -> bool:
        return self._repository.exists_by_key(product_key)

    def get_total_product_count(self) -> int:
        return self._repository.count()

    def get_brand_summary(self) -> List[BrandSummary]:
        """
        Product counts per brand, largest first.

        Rows without a brand are not counted.
        """
        return [
            BrandSummary(brand=brand, count=count)
            for brand, count in self._repository.brand_summary()
        ]

    # =========================================================================
    # WRITE OPERATIONS
    # =========================================================================

    def create_product(self, data: ProductBase) -> Product:
        """
        Store a new product.

        An existing row with the same key is replaced, not rejected.

        Args:
            data: Validated product record

        Returns:
            Persisted Product
        """
        product = self._repository.save(Product(**data.model_dump()))
        logger.info(f"✅ Product created: {product.product_key} ({product.product_name})")
        return product

    def update_product(self, data: ProductBase) -> ServiceResult[Product]:
        """
        Replace every field of an existing product.

        Args:
            data: Validated product record; product_key selects the row

        Returns:
            ServiceResult with the updated Product, or NOT_FOUND
        """
        if not self._repository.exists_by_key(data.product_key):
            logger.warning(f"Update failed: product not found - {data.product_key}")
            return ServiceResult.failure(ServiceError.NOT_FOUND)

        product = self._repository.save(Product(**data.model_dump()))
        logger.info(f"Product updated: {product.product_key}")
        return ServiceResult.success(product)

    def delete_product(self, product_key: int) -> ServiceResult[None]:
        """
        Delete a product by key.

        Returns:
            Empty successful ServiceResult, or NOT_FOUND
        """
        if not self._repository.exists_by_key(product_key):
            logger.warning(f"Delete failed: product not found - {product_key}")
            return ServiceResult.failure(ServiceError.NOT_FOUND)

        self._repository.delete_by_key(product_key)
        logger.info(f"Product deleted: {product_key}")
        return ServiceResult.success()
