"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for the catalog endpoints.

Dependency Hierarchy:
--------------------
            ┌─────────────────────┐
            │      get_db()       │  request-scoped Session
            └──────────┬──────────┘
                       │
            ┌──────────▼──────────┐
            │get_product_repository│
            └──────────┬──────────┘
                       │
            ┌──────────▼──────────┐
            │ get_product_service │
            └─────────────────────┘

Tests override get_db to bind the whole chain to a test session.

Usage:
------
    @router.get("/products")
    def list_products(service: ProductService = Depends(get_product_service)):
        return service.get_all_products()

==============================================================================
"""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from product_catalog.db.database import get_db
from product_catalog.repositories.product_repository import ProductRepository
from product_catalog.services.product_service import ProductService


def get_product_repository(db: Session = Depends(get_db)) -> ProductRepository:
    """Storage accessor bound to the request session."""
    return ProductRepository(db)


def get_product_service(
    repository: ProductRepository = Depends(get_product_repository)
) -> ProductService:
    """Catalog service owning the request's repository."""
    return ProductService(repository)


__all__ = [
    "get_db",
    "get_product_repository",
    "get_product_service",
]
