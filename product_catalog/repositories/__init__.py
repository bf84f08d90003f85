"""
==============================================================================
Repositories Package - Data Access Layer
==============================================================================

Persistence components wrapping a SQLAlchemy session.

==============================================================================
"""

from .product_repository import ProductRepository

__all__ = [
    "ProductRepository",
]
