#!/usr/bin/env python3
"""Script to seed the configured products file with the demo catalog."""

import sys

from catalog.core.config import get_settings
from catalog.core.logging import setup_logging
from catalog.services.demo_seed import seed_demo
from catalog.services.product_manager import ProductManager
from catalog.utils.exceptions import CatalogError

settings = get_settings()
setup_logging(settings.log_level)

manager = ProductManager(settings.products_file, on_load_error=settings.on_load_error)
manager.load()

if manager.get_all():
    print(f"{settings.products_file} already holds {len(manager.get_all())} products.")
    response = input("Seeding needs an empty catalog. Clear it first? (yes/no): ")
    if response.lower() != "yes":
        print("Cancelled. Products file left untouched.")
        sys.exit(0)
    # A manager that never loaded starts empty; its first save overwrites the file
    manager = ProductManager(settings.products_file)

try:
    products = seed_demo(manager)
except CatalogError as e:
    print(f"Seeding failed: {e}")
    sys.exit(1)

print(f"\nProducts in {settings.products_file}:")
for product in products:
    print(f"  [{product.id}] {product.code} {product.title}: {product.price} ({product.stock} in stock)")

print("\nDone!")
