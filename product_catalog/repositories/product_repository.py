"""
==============================================================================
Product Repository Module
==============================================================================

Storage accessor for the product table.

Operations:
----------
- Key lookups: find_by_key, exists_by_key
- Scans and filters: find_all, find_by_brand_ignore_case,
  find_by_name_containing_ignore_case
- Writes: save (upsert), delete_by_key
- Aggregates: brand_summary, count

Failures from the store (SQLAlchemyError) roll back the session and are
re-raised unchanged.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from product_catalog.db.models import Product


# Module logger
logger = logging.getLogger(__name__)


class ProductRepository:
    """
    Data access for Product rows.

    Attributes:
        _db: Database session

    Example:
        >>> repository = ProductRepository(db_session)
        >>> repository.save(Product(product_key=1, product_name="Lamp", price=Decimal("10.00")))
        >>> repository.exists_by_key(1)
        True
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    def find_all(self) -> List[Product]:
        return self._db.query(Product).all()

    def find_by_key(self, key: int) -> Optional[Product]:
        return self._db.get(Product, key)

    def exists_by_key(self, key: int) -> bool:
        return self._db.query(
            self._db.query(Product).filter(Product.product_key == key).exists()
        ).scalar()

    def find_by_brand_ignore_case(self, brand: str) -> List[Product]:
        """Products whose brand equals the given one, ignoring case."""
        return self._db.query(Product).filter(
            func.lower(Product.brand) == brand.lower()
        ).all()

    def find_by_name_containing_ignore_case(self, text: str) -> List[Product]:
        """
        Products whose name contains the given text, ignoring case.

        LIKE wildcards in the text are matched literally.
        """
        return self._db.query(Product).filter(
            Product.product_name.icontains(text, autoescape=True)
        ).all()

    # =========================================================================
    # AGGREGATES
    # =========================================================================

    def brand_summary(self) -> List[Tuple[str, int]]:
        """
        Count products per non-null brand.

        Returns:
            (brand, count) pairs ordered by count descending, then brand
        """
        product_count = func.count(Product.product_key)
        rows = (
            self._db.query(Product.brand, product_count)
            .filter(Product.brand.isnot(None))
            .group_by(Product.brand)
            .order_by(product_count.desc(), Product.brand.asc())
            .all()
        )
        return [(brand, int(count)) for brand, count in rows]

    def count(self) -> int:
        return self._db.query(func.count(Product.product_key)).scalar() or 0

    # =========================================================================
    # WRITE OPERATIONS
    # =========================================================================

    def save(self, product: Product) -> Product:
        """
        Insert the product, or replace every field of the row with its key.

        Args:
            product: Transient Product carrying the full record

        Returns:
            The persistent Product
        """
        try:
            persisted = self._db.merge(product)
            self._db.commit()
            self._db.refresh(persisted)
            logger.debug(f"Saved product {persisted.product_key}")
            return persisted
        except SQLAlchemyError:
            self._db.rollback()
            raise

    def delete_by_key(self, key: int) -> None:
        """Delete the row with the given key; absent keys are ignored."""
        try:
            deleted = self._db.query(Product).filter(
                Product.product_key == key
            ).delete(synchronize_session="fetch")
            self._db.commit()
            logger.debug(f"Deleted {deleted} product row(s) for key {key}")
        except SQLAlchemyError:
            self._db.rollback()
            raise
