"""Sample pharmacy catalog used to exercise a fresh product manager."""

from __future__ import annotations

import logging

from catalog.api.schemas.product import Product, ProductUpdate
from catalog.services.product_manager import ProductManager

logger = logging.getLogger(__name__)

DEMO_PRODUCTS = [
    {
        "title": "Aspirina",
        "description": "Alivio rapido para el dolor de cabeza y fiebre",
        "price": 5.99,
        "thumbnail": "aspirina.jpg",
        "code": "FARM001",
        "stock": 100,
    },
    {
        "title": "Ibuprofeno",
        "description": "Antiinflamatorio y analgesico",
        "price": 7.49,
        "thumbnail": "Ibuprofeno.jpg",
        "code": "FARM002",
        "stock": 80,
    },
    {
        "title": "Paracetamol",
        "description": "Alivia el dolor y reduce la fiebre",
        "price": 4.99,
        "thumbnail": "Paracetamol.jpg",
        "code": "FARM003",
        "stock": 120,
    },
    {
        "title": "Vitamina C",
        "description": "Suplemento de vitamina C para fortalecer el sistema inmunologico",
        "price": 8.99,
        "thumbnail": "VitaminaC.jpg",
        "code": "FARM004",
        "stock": 60,
    },
    {
        "title": "Antiacido",
        "description": "Alivia la acidez estomacal",
        "price": 6.99,
        "thumbnail": "Antiacido.jpg",
        "code": "FARM005",
        "stock": 50,
    },
]

DEMO_UPDATE_ID = 1
DEMO_UPDATE = ProductUpdate(price=899.99, stock=20)
DEMO_DELETE_ID = 4


def seed_demo(manager: ProductManager) -> list[Product]:
    """Add the demo products, reprice the first and drop the fourth.

    Ids 1 and 4 assume the manager started empty.
    """
    for entry in DEMO_PRODUCTS:
        manager.add(**entry)
    logger.info(f"Seeded {len(DEMO_PRODUCTS)} demo products")

    manager.update(DEMO_UPDATE_ID, DEMO_UPDATE)
    manager.delete(DEMO_DELETE_ID)
    return manager.get_all()
