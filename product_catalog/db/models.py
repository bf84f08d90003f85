"""
==============================================================================
SQLAlchemy ORM Models Module
==============================================================================

ORM model for the product catalog.

Database Schema:
---------------

    ┌─────────────────────────────────────────────────────────────────┐
    │                            product                               │
    ├─────────────────────────────────────────────────────────────────┤
    │ product_key (BIGINT, PK, caller supplied)                       │
    │ retailer (VARCHAR(64), NULLABLE)                                │
    │ brand (VARCHAR(64), NULLABLE)                                   │
    │ model (VARCHAR(32), NULLABLE)                                   │
    │ product_name (VARCHAR(96), NOT NULL)                            │
    │ product_price (NUMERIC(32, 2), NOT NULL)                        │
    │ product_description (TEXT, NULLABLE)                            │
    └─────────────────────────────────────────────────────────────────┘

=============================================================================
"""

from __future__ import annotations

from typing import Any, Dict

from sqlalchemy import BigInteger, Column, Numeric, String, Text

from product_catalog.db.database import Base


# Column sizes shared with the request schemas
RETAILER_MAX_LENGTH = 64
BRAND_MAX_LENGTH = 64
MODEL_MAX_LENGTH = 32
PRODUCT_NAME_MAX_LENGTH = 96
PRICE_PRECISION = 32
PRICE_SCALE = 2

# BIGINT key range
PRODUCT_KEY_MIN = -2 ** 63
PRODUCT_KEY_MAX = 2 ** 63 - 1


class Product(Base):
    """
    Catalog product.

    The primary key is chosen by the caller; the store never generates it.

    Example:
        >>> product = Product(
        ...     product_key=1,
        ...     product_name="Test Product",
        ...     price=Decimal("99.99"),
        ...     brand="Test Brand",
        ... )
        >>> session.merge(product)
        >>> session.commit()
    """

    __tablename__ = "product"

    # =========================================================================
    # COLUMNS
    # =========================================================================

    product_key = Column(
        BigInteger,
        primary_key=True,
        autoincrement=False,
        doc="Caller supplied product identifier"
    )

    retailer = Column(String(RETAILER_MAX_LENGTH), nullable=True)

    brand = Column(
        String(BRAND_MAX_LENGTH),
        nullable=True,
        index=True,
        doc="Brand name, grouped by the brand summary"
    )

    model = Column(String(MODEL_MAX_LENGTH), nullable=True)

    product_name = Column(
        String(PRODUCT_NAME_MAX_LENGTH),
        nullable=False,
        doc="Display name, never blank"
    )

    price = Column(
        "product_price",
        Numeric(PRICE_PRECISION, PRICE_SCALE),
        nullable=False,
        doc="Non-negative price with two fractional digits"
    )

    product_description = Column(Text, nullable=True)

    # =========================================================================
    # METHODS
    # =========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """Column values keyed by attribute name."""
        return {
            "product_key": self.product_key,
            "retailer": self.retailer,
            "brand": self.brand,
            "model": self.model,
            "product_name": self.product_name,
            "price": self.price,
            "product_description": self.product_description,
        }

    def __repr__(self) -> str:
        return (
            f"Product(product_key={self.product_key!r}, "
            f"product_name={self.product_name!r}, "
            f"brand={self.brand!r}, price={self.price!r})"
        )
