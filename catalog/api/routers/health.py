"""Simple health and readiness endpoints."""

from __future__ import annotations

import logging
import os
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from catalog.api.dependencies.manager import get_manager
from catalog.services.product_manager import ProductManager

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])

SERVICE_NAME = "product-catalog-api"


@router.get("/live", summary="Liveness probe")
async def live() -> dict[str, str]:
    """Indicates API process is running."""
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/ready", summary="Readiness probe")
async def ready(manager: ProductManager = Depends(get_manager)) -> dict[str, Any]:
    """Check that the product file can be written and report the catalog size.

    Returns detailed status of:
    - Backing file directory (exists and writable)
    - Loaded catalog (product count and next id)
    """
    checks: dict[str, Any] = {
        "status": "ok",
        "service": SERVICE_NAME,
        "checks": {},
    }
    all_healthy = True

    storage_dir = manager.file_path.parent
    if storage_dir.is_dir() and os.access(storage_dir, os.W_OK):
        checks["checks"]["storage"] = {
            "status": "healthy",
            "message": f"{storage_dir} is writable",
        }
    else:
        logger.error(f"Storage health check failed: {storage_dir} is not writable")
        checks["checks"]["storage"] = {
            "status": "unhealthy",
            "message": f"{storage_dir} is missing or not writable",
        }
        all_healthy = False

    checks["checks"]["catalog"] = {
        "status": "healthy",
        "products": len(manager.get_all()),
        "next_id": manager.next_id,
    }

    if not all_healthy:
        checks["status"] = "unhealthy"
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=checks,
        )

    return checks
