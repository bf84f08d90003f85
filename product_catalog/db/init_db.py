"""
==============================================================================
Database Initialization Module
==============================================================================

Database initialization and setup utilities.

Initialization Flow:
-------------------
1. Create all tables from ORM models
2. Seed products from the configured JSON file when the table is empty
3. Verify the connection

Seed File Format:
----------------
A JSON array of product objects using the API field names:

    [
      {"productKey": 1, "productName": "Desk Lamp", "price": 24.5, "brand": "Lumo"},
      ...
    ]

Usage:
------
    from product_catalog.db import init_db
    init_db()

==============================================================================
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from sqlalchemy.orm import Session

from product_catalog.config import Settings, get_settings
from product_catalog.db.database import DatabaseManager, get_database_manager
from product_catalog.db.models import Product
from product_catalog.repositories.product_repository import ProductRepository
from product_catalog.schemas.product import ProductCreate


# Module logger
logger = logging.getLogger(__name__)


class DatabaseInitializer:
    """
    Database initialization manager.

    Attributes:
        _db_manager: DatabaseManager instance
        _settings: Application settings
        _session: Optional externally owned session

    Example:
        >>> initializer = DatabaseInitializer()
        >>> initializer.initialize()
    """

    def __init__(
        self,
        db_manager: Optional[DatabaseManager] = None,
        session: Optional[Session] = None,
        settings: Optional[Settings] = None
    ) -> None:
        """
        Args:
            db_manager: DatabaseManager (process-wide one if None)
            session: Existing session to reuse (new sessions if None)
            settings: Application settings (global settings if None)
        """
        self._db_manager = db_manager or get_database_manager()
        self._settings = settings or get_settings()
        self._session = session

    def _get_session(self) -> Session:
        if self._session is not None:
            return self._session
        return self._db_manager.get_session()

    def _release(self, session: Session) -> None:
        if self._session is None:
            session.close()

    # =========================================================================
    # TABLE OPERATIONS
    # =========================================================================

    def create_tables(self) -> None:
        """Create all tables (idempotent)."""
        logger.info("Creating database tables...")
        self._db_manager.create_tables()

    def verify_tables(self) -> bool:
        """
        Verify that the product table is queryable.

        Returns:
            True if the table exists, False otherwise
        """
        session = self._get_session()
        try:
            session.query(Product).first()
            logger.debug("Database tables verified successfully")
            return True
        except Exception as e:
            logger.error(f"Table verification failed: {e}")
            return False
        finally:
            self._release(session)

    # =========================================================================
    # SEEDING
    # =========================================================================

    def seed_products(self, seed_path: Path) -> int:
        """
        Load products from a JSON file into an empty catalog.

        Nothing is loaded when the table already holds rows. Invalid
        entries are skipped with a warning.

        Args:
            seed_path: JSON array of product objects

        Returns:
            Number of products stored
        """
        session = self._get_session()
        try:
            repository = ProductRepository(session)
            if repository.count() > 0:
                logger.info("Catalog not empty, skipping seed")
                return 0

            with seed_path.open("r", encoding="utf-8") as f:
                items = json.load(f)

            if not isinstance(items, list):
                raise ValueError(f"Seed file must contain a JSON array: {seed_path}")

            loaded = 0
            for item in items:
                try:
                    data = ProductCreate.model_validate(item)
                except ValidationError as e:
                    logger.warning(f"Skipping invalid seed product {item!r}: {e.error_count()} error(s)")
                    continue
                repository.save(Product(**data.model_dump()))
                loaded += 1

            logger.info(f"✅ Seeded {loaded} products from {seed_path}")
            return loaded
        finally:
            self._release(session)

    # =========================================================================
    # INITIALIZATION METHODS
    # =========================================================================

    def initialize(self) -> None:
        """
        Perform full database initialization.

        Creates tables, seeds the catalog when configured and verifies the
        connection.
        """
        logger.info("Initializing database...")

        self.create_tables()

        seed_path = self._settings.seed_path
        if seed_path is not None:
            if seed_path.exists():
                self.seed_products(seed_path)
            else:
                logger.warning(f"⚠️ Seed file not found: {seed_path}")

        if self._db_manager.verify_connection():
            logger.info("✅ Database connection verified")
        else:
            logger.warning("⚠️ Database connection check failed")

        logger.info("Database initialization complete")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def init_db() -> None:
    """Initialize the database at application startup."""
    DatabaseInitializer().initialize()
