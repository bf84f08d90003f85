"""
==============================================================================
Core Package
==============================================================================

Core infrastructure for the application.

This package provides:
- Custom exception handling with consistent error responses
- FastAPI dependencies wiring session, repository and service
- Exception factory functions for common error scenarios
- A JSON response class that keeps Decimal scale

Modules:
--------
- exceptions: AppException class and error factory functions
- dependencies: FastAPI dependency injection functions
- responses: DecimalJSONResponse

Usage:
------
    from product_catalog.core import AppException, get_product_service

    # Or use exception factory functions via module
    from product_catalog.core import exceptions
    raise exceptions.product_not_found(42)

==============================================================================
"""

from .exceptions import (
    AppException,
    register_exception_handlers,
)
from .dependencies import (
    get_db,
    get_product_repository,
    get_product_service,
)
from .responses import DecimalJSONResponse

__all__ = [
    # Exceptions
    "AppException",
    "register_exception_handlers",
    # Dependencies
    "get_db",
    "get_product_repository",
    "get_product_service",
    # Responses
    "DecimalJSONResponse",
]
