"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Request and response schemas using Pydantic for validation.

This package provides:
- Common: Error envelope
- Product: Product records and brand summary

==============================================================================
"""

from .common import ErrorBody, ErrorResponse
from .product import (
    ProductBase,
    ProductCreate,
    ProductUpdate,
    ProductDetail,
    BrandSummary,
)

__all__ = [
    # Common
    "ErrorBody",
    "ErrorResponse",
    # Product
    "ProductBase",
    "ProductCreate",
    "ProductUpdate",
    "ProductDetail",
    "BrandSummary",
]
