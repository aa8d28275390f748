"""FastAPI application bootstrap and product manager wiring."""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog.api.routers import health, products
from catalog.core.config import Settings, get_settings
from catalog.core.logging import setup_logging
from catalog.services.product_manager import ProductManager

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Instantiate the FastAPI app, its product manager and routers."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        manager = ProductManager(
            settings.products_file, on_load_error=settings.on_load_error
        )
        manager.load()
        app.state.product_manager = manager
        logger.info(
            f"Serving {len(manager.get_all())} products from {settings.products_file}"
        )
        yield

    app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=lifespan)

    logger.info(f"[CORS] Allowed origins: {settings.cors_origins}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(products.router, prefix="/products", tags=["products"])

    return app


app = create_app()
