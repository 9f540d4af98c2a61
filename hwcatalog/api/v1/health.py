"""
==============================================================================
Health Check Endpoints
==============================================================================

System health status endpoints for monitoring and orchestration.

==============================================================================
"""

from fastapi import APIRouter, Depends

from hwcatalog.catalog import CatalogStore
from hwcatalog.core.dependencies import get_catalog_store


router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""

    def __init__(self, store: CatalogStore):
        self._store = store

    def get_health(self) -> dict:
        """
        Get full health status.

        An empty or failed catalog leaves the API answering queries, so it
        reports "degraded" rather than failing the check.
        """
        catalog_info = self._store.status()
        overall = "healthy" if catalog_info["status"] == "healthy" else "degraded"

        return {
            "status": overall,
            "components": {
                "api": "healthy",
                "catalog": catalog_info["status"]
            },
            "details": {
                "catalog_source": catalog_info["source"],
                "categories_loaded": catalog_info["categories"],
                "products_loaded": catalog_info["products"],
                "load_error": catalog_info["error"]
            }
        }


@router.get("")
async def health_check(store: CatalogStore = Depends(get_catalog_store)):
    """
    Health check endpoint.

    Returns API and catalog status.
    """
    controller = HealthController(store)
    return controller.get_health()


@router.get("/ready")
async def readiness_check():
    """Readiness probe for container orchestration."""
    return {"ready": True}


@router.get("/live")
async def liveness_check():
    """Liveness probe for container orchestration."""
    return {"alive": True}
