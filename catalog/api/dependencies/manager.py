"""Product manager dependency."""

from fastapi import Request

from catalog.services.product_manager import ProductManager


def get_manager(request: Request) -> ProductManager:
    """FastAPI dependency returning the manager owned by the running app."""
    return request.app.state.product_manager
