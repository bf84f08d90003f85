"""
==============================================================================
Product Catalog Endpoints
==============================================================================

CRUD, search and aggregate endpoints for catalog products.

Status Mapping:
--------------
- Validation failure        → 400 (before the service is called)
- Unknown key               → 404 (get, update, delete)
- Any failure on create/update → 400

Product bodies are rendered with DecimalJSONResponse so prices keep two
fractional digits (10.50, not 10.5).

==============================================================================
"""

import logging
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Path, Query, Response, status

from product_catalog.core import exceptions
from product_catalog.core.dependencies import get_product_service
from product_catalog.core.responses import DecimalJSONResponse
from product_catalog.db.models import PRODUCT_KEY_MAX, PRODUCT_KEY_MIN
from product_catalog.schemas.common import ErrorResponse
from product_catalog.schemas.product import (
    BrandSummary,
    ProductCreate,
    ProductDetail,
    ProductUpdate,
)
from product_catalog.services.product_service import ProductService
from product_catalog.services.result import ServiceError


# Module logger
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["Products"])

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Product not found"}}
BAD_REQUEST_RESPONSE = {400: {"model": ErrorResponse, "description": "Invalid product"}}

def render_products(
    data: Union[ProductDetail, List[ProductDetail]],
    status_code: int = status.HTTP_200_OK
) -> DecimalJSONResponse:
    """Render product models with prices at their stored scale."""
    if isinstance(data, list):
        content = [item.model_dump(by_alias=True) for item in data]
    else:
        content = data.model_dump(by_alias=True)
    return DecimalJSONResponse(content=content, status_code=status_code)


class ProductController:
    """Controller for product catalog operations."""

    def __init__(self, service: ProductService):
        self._service = service

    def list_all(self) -> List[ProductDetail]:
        """List every product."""
        return [ProductDetail.from_product(p) for p in self._service.get_all_products()]

    def get(self, product_key: int) -> ProductDetail:
        """Get product by key."""
        product = self._service.get_product_by_id(product_key)
        if product is None:
            raise exceptions.product_not_found(product_key)
        return ProductDetail.from_product(product)

    def create(self, data: ProductCreate) -> ProductDetail:
        """Create product; every failure is reported as a bad request."""
        try:
            product = self._service.create_product(data)
        except Exception as exc:
            logger.exception(f"Product creation failed: {data.product_key}")
            raise exceptions.invalid_product() from exc
        return ProductDetail.from_product(product)

    def update(self, data: ProductUpdate) -> ProductDetail:
        """Replace an existing product."""
        try:
            result = self._service.update_product(data)
        except Exception as exc:
            logger.exception(f"Product update failed: {data.product_key}")
            raise exceptions.invalid_product() from exc

        if result.error is ServiceError.NOT_FOUND:
            raise exceptions.product_not_found(data.product_key)
        return ProductDetail.from_product(result.value)

    def delete(self, product_key: int) -> None:
        """Delete product by key."""
        result = self._service.delete_product(product_key)
        if result.error is ServiceError.NOT_FOUND:
            raise exceptions.product_not_found(product_key)

    def brand_summary(self) -> List[BrandSummary]:
        return self._service.get_brand_summary()

    def search(self, name: Optional[str], brand: Optional[str]) -> List[ProductDetail]:
        """Filter by name when given, otherwise by brand, otherwise list all."""
        if name is not None and name.strip():
            products = self._service.search_products_by_name(name)
        elif brand is not None and brand.strip():
            products = self._service.get_products_by_brand(brand)
        else:
            products = self._service.get_all_products()
        return [ProductDetail.from_product(p) for p in products]

    def count(self) -> int:
        return self._service.get_total_product_count()


# Static paths are registered before /{product_key}.

@router.get("", response_model=List[ProductDetail])
def list_products(service: ProductService = Depends(get_product_service)):
    """List all products."""
    return render_products(ProductController(service).list_all())


@router.get("/brand-summary", response_model=List[BrandSummary])
def get_brand_summary(service: ProductService = Depends(get_product_service)):
    """Product counts grouped by brand, largest first."""
    return ProductController(service).brand_summary()


@router.get("/search", response_model=List[ProductDetail])
def search_products(
    name: Optional[str] = Query(None),
    brand: Optional[str] = Query(None),
    service: ProductService = Depends(get_product_service)
):
    """Search products by name (takes precedence) or brand."""
    return render_products(ProductController(service).search(name, brand))


@router.get("/count", response_model=int)
def get_product_count(service: ProductService = Depends(get_product_service)):
    """Total number of products."""
    return ProductController(service).count()


@router.get("/{product_key}", response_model=ProductDetail, responses=NOT_FOUND_RESPONSE)
def get_product(
    product_key: int = Path(..., ge=PRODUCT_KEY_MIN, le=PRODUCT_KEY_MAX),
    service: ProductService = Depends(get_product_service)
):
    """Get full product details."""
    return render_products(ProductController(service).get(product_key))


@router.post(
    "",
    response_model=ProductDetail,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST_RESPONSE,
)
def create_product(
    request: ProductCreate,
    service: ProductService = Depends(get_product_service)
):
    """Add a new product."""
    return render_products(
        ProductController(service).create(request),
        status_code=status.HTTP_201_CREATED
    )


@router.put(
    "",
    response_model=ProductDetail,
    responses={**NOT_FOUND_RESPONSE, **BAD_REQUEST_RESPONSE},
)
def update_product(
    request: ProductUpdate,
    service: ProductService = Depends(get_product_service)
):
    """Replace a product; the key is taken from the body."""
    return render_products(ProductController(service).update(request))


@router.delete(
    "/{product_key}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSE,
)
def delete_product(
    product_key: int = Path(..., ge=PRODUCT_KEY_MIN, le=PRODUCT_KEY_MAX),
    service: ProductService = Depends(get_product_service)
):
    """Remove a product."""
    ProductController(service).delete(product_key)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
