"""
==============================================================================
Services Package - Business Logic Layer
==============================================================================

Service classes implementing the catalog's business rules.

Architecture Pattern: Service Layer
----------------------------------

    ┌─────────────────┐
    │   API Router    │
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │    Service      │  ← Business Logic
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │   Repository    │  ← Data Access (via ORM)
    └─────────────────┘

Services receive their repository through the constructor and report
business failures as ServiceResult values.

Usage:
------
    from product_catalog.services import ProductService
    from product_catalog.repositories import ProductRepository

    service = ProductService(ProductRepository(db_session))
    result = service.delete_product(42)
    if not result.ok:
        ...

==============================================================================
"""

from .result import ServiceError, ServiceResult
from .product_service import ProductService

__all__ = [
    "ServiceError",
    "ServiceResult",
    "ProductService",
]
