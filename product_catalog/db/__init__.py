"""
==============================================================================
Database Package
==============================================================================

SQLAlchemy database infrastructure and ORM models.

Architecture:
------------
├── database.py   - DatabaseManager class, session factory
├── models.py     - SQLAlchemy ORM model classes
└── init_db.py    - DatabaseInitializer for setup and seeding

init_db is imported from its module directly since it depends on the
repository and schema packages, which import this package.

Usage:
------
    from product_catalog.db import get_database_manager, Product
    from product_catalog.db.init_db import init_db

    init_db()
    session = get_database_manager().get_session()
    products = session.query(Product).all()

==============================================================================
"""

from .database import DatabaseManager, Base, get_database_manager, get_db
from .models import Product

__all__ = [
    # Database management
    "DatabaseManager",
    "Base",
    "get_database_manager",
    "get_db",
    # Models
    "Product",
]
