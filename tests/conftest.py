"""Shared fixtures: managers and apps bound to temporary product files."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from catalog.core.config import Settings
from catalog.main import create_app
from catalog.services.product_manager import ProductManager


@pytest.fixture
def products_file(tmp_path: Path) -> Path:
    return tmp_path / "products.json"


@pytest.fixture
def manager(products_file: Path) -> ProductManager:
    manager = ProductManager(products_file)
    manager.load()
    return manager


@pytest.fixture
def aspirin() -> dict:
    return {
        "title": "Aspirina",
        "description": "Alivio rapido para el dolor de cabeza y fiebre",
        "price": 5.99,
        "thumbnail": "aspirina.jpg",
        "code": "FARM001",
        "stock": 100,
    }


@pytest.fixture
def make_client(products_file: Path):
    """Build a TestClient whose app serves `products_file`."""

    def _make(**overrides) -> TestClient:
        settings = Settings(products_file=str(products_file), **overrides)
        return TestClient(create_app(settings))

    return _make
