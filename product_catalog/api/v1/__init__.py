"""
==============================================================================
API v1 Endpoints
==============================================================================

Routers:
--------
- health: Health check endpoints
- products: Product catalog CRUD, search and aggregates

==============================================================================
"""

from . import health, products

__all__ = ["health", "products"]
