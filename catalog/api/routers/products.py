"""Read-only endpoints over the product catalog."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from catalog.api.dependencies.manager import get_manager
from catalog.api.schemas.product import ProductListResponse, ProductResponse
from catalog.services.product_manager import ProductManager

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    summary="List products, optionally limited",
    response_model=ProductListResponse,
)
async def list_products(
    limit: int | None = Query(
        None, ge=0, description="Return only the first N products"
    ),
    manager: ProductManager = Depends(get_manager),
) -> ProductListResponse:
    """Return the catalog in insertion order.

    When `limit` is given only the first `limit` products are returned.
    """
    try:
        products = manager.get_all()
        if limit is not None:
            products = products[:limit]
        return ProductListResponse(products=products)
    except Exception as e:
        logger.error(f"Unexpected error listing products: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve products",
        ) from e


@router.get(
    "/{product_id}",
    summary="Fetch a single product by id",
    response_model=ProductResponse,
)
async def get_product(
    product_id: int,
    manager: ProductManager = Depends(get_manager),
) -> ProductResponse:
    try:
        product = manager.get_by_id(product_id)
        if product is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Product not found"
            )
        return ProductResponse(product=product)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(
            f"Unexpected error fetching product {product_id}: {e}", exc_info=True
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve product",
        ) from e
