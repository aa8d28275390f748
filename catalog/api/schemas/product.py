"""Pydantic models describing Product records and payloads."""

from pydantic import BaseModel, Field


class Product(BaseModel):
    """Stored catalog record; field order is the on-disk order."""

    id: int = Field(..., ge=1, description="Sequential id assigned by the manager")
    title: str
    description: str
    price: float
    thumbnail: str
    code: str = Field(..., description="Unique business key")
    stock: int


class ProductUpdate(BaseModel):
    """Partial update; only explicitly provided fields are merged."""

    title: str | None = None
    description: str | None = None
    price: float | None = None
    thumbnail: str | None = None
    code: str | None = None
    stock: int | None = None

    model_config = {"extra": "ignore"}


class ProductListResponse(BaseModel):
    products: list[Product]


class ProductResponse(BaseModel):
    product: Product
