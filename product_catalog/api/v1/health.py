"""
==============================================================================
Health Check Endpoints
==============================================================================

System health status endpoints for monitoring and orchestration.

==============================================================================
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from product_catalog.db.database import get_db
from product_catalog.repositories.product_repository import ProductRepository


# Module logger
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""

    def __init__(self, db: Session):
        self._db = db

    def check_database(self) -> str:
        """Check database connectivity."""
        try:
            self._db.execute(text("SELECT 1"))
            return "healthy"
        except SQLAlchemyError as e:
            logger.error(f"Database health check failed: {e}")
            return "unhealthy"

    def count_products(self) -> int:
        try:
            return ProductRepository(self._db).count()
        except SQLAlchemyError:
            self._db.rollback()
            return 0

    def get_health(self) -> dict:
        """Get full health status."""
        db_status = self.check_database()
        overall = "healthy" if db_status == "healthy" else "degraded"

        return {
            "status": overall,
            "components": {
                "api": "healthy",
                "database": db_status,
            },
            "details": {
                "products": self.count_products() if db_status == "healthy" else 0
            }
        }


@router.get("")
def health_check(db: Session = Depends(get_db)):
    """
    Health check endpoint.

    Returns API and database status.
    """
    return HealthController(db).get_health()


@router.get("/ready")
async def readiness_check():
    """Readiness probe for container orchestration."""
    return {"ready": True}


@router.get("/live")
async def liveness_check():
    """Liveness probe for container orchestration."""
    return {"alive": True}
