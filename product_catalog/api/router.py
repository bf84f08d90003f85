"""
==============================================================================
Main API Router
==============================================================================

Combines all API routes under the configured prefix (none by default, so
products are served at /products).

==============================================================================
"""

from fastapi import APIRouter

from product_catalog.api.v1 import health, products
from product_catalog.config import get_settings


class MainAPIRouter:
    """
    Main API router combining all routes.

    Provides a single entry point for all API endpoints.
    """

    def __init__(self, prefix: str = ""):
        self._router = APIRouter(prefix=prefix)
        self._include_routers()

    def _include_routers(self) -> None:
        self._router.include_router(health.router)
        self._router.include_router(products.router)

    @property
    def router(self):
        """Get the FastAPI router instance."""
        return self._router


# Create main API router instance
api_router = MainAPIRouter(get_settings().api_prefix).router
