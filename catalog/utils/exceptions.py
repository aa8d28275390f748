"""Exception hierarchy raised by the product manager."""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for catalog failures."""


class ValidationError(CatalogError, ValueError):
    """Raised when a product is created without its required fields."""

    def __init__(self, missing_fields: list[str]):
        self.missing_fields = list(missing_fields)
        super().__init__(
            f"All fields are required; missing: {', '.join(self.missing_fields)}"
        )


class DuplicateCodeError(CatalogError):
    """Raised when a product code is already taken."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Product with code {code} already exists")


class NotFoundError(CatalogError, LookupError):
    """Raised when an update or delete targets an unknown product id."""

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found")


class PersistenceError(CatalogError, OSError):
    """Raised when the backing file cannot be read, parsed or written."""

    pass
