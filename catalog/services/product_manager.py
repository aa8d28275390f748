"""In-memory product collection backed by a single JSON file."""

from __future__ import annotations

import enum
import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from catalog.api.schemas.product import Product, ProductUpdate
from catalog.utils.exceptions import (
    DuplicateCodeError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_products_adapter = TypeAdapter(list[Product])


class OnLoadError(str, enum.Enum):
    """What `ProductManager.load` does when the backing file is unusable."""

    START_EMPTY = "start_empty"
    PROPAGATE = "propagate"


class ProductManager:
    """Owns the product collection and keeps the backing file in sync.

    Every successful mutation rewrites the whole file. When that write fails
    the in-memory change is kept and `PersistenceError` is raised, so callers
    must assume memory and disk may have diverged. Calls are not safe to
    interleave: there is no lock around id allocation or the file write.
    """

    def __init__(
        self,
        file_path: str | Path,
        on_load_error: OnLoadError = OnLoadError.START_EMPTY,
    ):
        self.file_path = Path(file_path)
        self.on_load_error = OnLoadError(on_load_error)
        self.products: list[Product] = []
        self._next_id = 1

    @property
    def next_id(self) -> int:
        return self._next_id

    def load(self) -> int:
        """Replace the collection with the backing file's contents.

        A missing file is the first-run path and yields an empty collection.
        Any other read or parse failure is handled per `on_load_error`.

        Returns:
            Number of products loaded
        """
        if not self.file_path.exists():
            logger.info(f"No product file at {self.file_path}, starting empty")
            self._reset()
            return 0

        try:
            raw = self.file_path.read_text(encoding="utf-8")
            products = _products_adapter.validate_json(raw)
        except (OSError, ValueError) as e:
            if self.on_load_error is OnLoadError.PROPAGATE:
                logger.error(f"Failed to load products from {self.file_path}: {e}")
                raise PersistenceError(
                    f"Failed to load products from {self.file_path}"
                ) from e
            logger.warning(
                f"Could not load products from {self.file_path} ({e}), starting empty"
            )
            self._reset()
            return 0

        self.products = products
        self._next_id = max((p.id for p in products), default=0) + 1
        logger.info(f"Loaded {len(products)} products from {self.file_path}")
        return len(products)

    def save(self) -> None:
        """Overwrite the backing file with the full collection."""
        payload = json.dumps(
            [product.model_dump() for product in self.products],
            indent=2,
            ensure_ascii=False,
        )
        try:
            self.file_path.write_text(payload, encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to save products to {self.file_path}: {e}")
            raise PersistenceError(
                f"Failed to save products to {self.file_path}"
            ) from e

    def add(
        self,
        title: str,
        description: str,
        price: float,
        thumbnail: str,
        code: str,
        stock: int | None,
    ) -> Product:
        """Create a product with the next id and persist the collection.

        `price` is checked for truthiness like the text fields, so a zero
        price is rejected; `stock` only has to be present, so zero is fine.
        """
        required = {
            "title": title,
            "description": description,
            "price": price,
            "thumbnail": thumbnail,
            "code": code,
        }
        missing = [name for name, value in required.items() if not value]
        if stock is None:
            missing.append("stock")
        if missing:
            logger.error(f"All fields are required, missing: {', '.join(missing)}")
            raise ValidationError(missing)

        if any(product.code == code for product in self.products):
            logger.error(f"Product with code {code} already exists")
            raise DuplicateCodeError(code)

        product = Product(
            id=self._next_id,
            title=title,
            description=description,
            price=price,
            thumbnail=thumbnail,
            code=code,
            stock=stock,
        )
        self._next_id += 1
        self.products.append(product)

        self.save()
        logger.info(f"Added product {product.id} with code {code}")
        return product

    def get_all(self) -> list[Product]:
        return self.products

    def get_by_id(self, product_id: int) -> Product | None:
        for product in self.products:
            if product.id == product_id:
                return product
        logger.debug(f"Product {product_id} not found")
        return None

    def update(
        self, product_id: int, changes: ProductUpdate | Mapping[str, Any]
    ) -> Product:
        """Merge the provided fields over a stored product and persist.

        Fields not set on `changes` keep their stored values. Neither code
        uniqueness nor required-field presence is re-checked.
        """
        index = self._index_of(product_id)
        if not isinstance(changes, ProductUpdate):
            changes = ProductUpdate.model_validate(dict(changes))

        updated = self.products[index].model_copy(
            update=changes.model_dump(exclude_unset=True, exclude_none=True)
        )
        self.products[index] = updated

        self.save()
        logger.info(f"Updated product {product_id}")
        return updated

    def delete(self, product_id: int) -> Product:
        """Remove the first product with `product_id` and persist."""
        index = self._index_of(product_id)
        removed = self.products.pop(index)

        self.save()
        logger.info(f"Deleted product {product_id}")
        return removed

    def _index_of(self, product_id: int) -> int:
        for index, product in enumerate(self.products):
            if product.id == product_id:
                return index
        logger.error(f"Product {product_id} not found")
        raise NotFoundError(product_id)

    def _reset(self) -> None:
        self.products = []
        self._next_id = 1
