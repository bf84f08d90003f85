"""
==============================================================================
Product Schemas Module
==============================================================================

Request and response schemas for the product catalog.

JSON uses camelCase field names (productKey, productName, ...); snake_case
names are accepted on input as well.

==============================================================================
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from product_catalog.db.models import (
    Product,
    BRAND_MAX_LENGTH,
    MODEL_MAX_LENGTH,
    PRICE_PRECISION,
    PRICE_SCALE,
    PRODUCT_KEY_MAX,
    PRODUCT_KEY_MIN,
    PRODUCT_NAME_MAX_LENGTH,
    RETAILER_MAX_LENGTH,
)


PRICE_QUANTUM = Decimal(1).scaleb(-PRICE_SCALE)


class ProductBase(BaseModel):
    """Full product record as exchanged over HTTP."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        protected_namespaces=(),
    )

    product_key: int = Field(
        ...,
        ge=PRODUCT_KEY_MIN,
        le=PRODUCT_KEY_MAX,
        description="Caller supplied product identifier"
    )
    retailer: Optional[str] = Field(default=None, max_length=RETAILER_MAX_LENGTH)
    brand: Optional[str] = Field(default=None, max_length=BRAND_MAX_LENGTH)
    model: Optional[str] = Field(default=None, max_length=MODEL_MAX_LENGTH)
    product_name: str = Field(..., max_length=PRODUCT_NAME_MAX_LENGTH)
    price: Decimal = Field(..., ge=0, max_digits=PRICE_PRECISION)
    product_description: Optional[str] = Field(default=None)

    @field_validator("product_name")
    @classmethod
    def validate_product_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Product name is required")
        return v

    @field_validator("price")
    @classmethod
    def normalize_price(cls, v: Decimal) -> Decimal:
        # Column is NUMERIC(32, 2): at most 30 integer digits after rounding
        with localcontext() as ctx:
            ctx.prec = PRICE_PRECISION
            try:
                return v.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)
            except InvalidOperation:
                raise ValueError(
                    f"Price must have at most {PRICE_PRECISION - PRICE_SCALE} integer digits"
                ) from None


class ProductCreate(ProductBase):
    """Product creation request."""


class ProductUpdate(ProductBase):
    """Product update request (full record replace, key in body)."""


class ProductDetail(ProductBase):
    """Product as returned by the API."""

    @classmethod
    def from_product(cls, product: "Product") -> "ProductDetail":
        """Create response from Product model."""
        return cls.model_validate(product.to_dict())


class BrandSummary(BaseModel):
    """Number of products carrying a brand."""

    model_config = ConfigDict(from_attributes=True)

    brand: str
    count: int = Field(..., ge=0)
