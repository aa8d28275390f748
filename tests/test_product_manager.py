"""Behaviour of ProductManager: ids, validation, merge semantics, persistence."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from catalog.api.schemas.product import ProductUpdate
from catalog.services.product_manager import OnLoadError, ProductManager
from catalog.utils.exceptions import (
    DuplicateCodeError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)


def test_add_assigns_sequential_ids(manager, aspirin):
    first = manager.add(**aspirin)
    second = manager.add(**{**aspirin, "code": "FARM002"})

    assert first.id == 1
    assert second.id == 2
    assert manager.next_id == 3
    assert [p.id for p in manager.get_all()] == [1, 2]


def test_add_persists_pretty_printed_records(manager, products_file, aspirin):
    manager.add(**aspirin)

    text = products_file.read_text(encoding="utf-8")
    assert text.startswith("[\n  {\n")
    records = json.loads(text)
    assert records == [{"id": 1, **aspirin}]
    assert list(records[0]) == [
        "id",
        "title",
        "description",
        "price",
        "thumbnail",
        "code",
        "stock",
    ]


def test_duplicate_code_is_rejected(manager, aspirin):
    manager.add(**aspirin)

    with pytest.raises(DuplicateCodeError) as excinfo:
        manager.add(**{**aspirin, "title": "Otra aspirina"})

    assert excinfo.value.code == "FARM001"
    assert len(manager.get_all()) == 1
    assert manager.next_id == 2


@pytest.mark.parametrize(
    "field, value",
    [
        ("title", ""),
        ("description", ""),
        ("price", 0),
        ("thumbnail", None),
        ("code", ""),
        ("stock", None),
    ],
)
def test_missing_required_field_is_rejected(manager, products_file, aspirin, field, value):
    with pytest.raises(ValidationError) as excinfo:
        manager.add(**{**aspirin, field: value})

    assert excinfo.value.missing_fields == [field]
    assert manager.get_all() == []
    assert manager.next_id == 1
    assert not products_file.exists()


def test_zero_stock_is_accepted(manager, aspirin):
    product = manager.add(**{**aspirin, "stock": 0})

    assert product.stock == 0
    assert manager.get_by_id(product.id) == product


def test_get_by_id_returns_none_for_unknown_id(manager, aspirin):
    manager.add(**aspirin)

    assert manager.get_by_id(99) is None


def test_update_merges_only_provided_fields(manager, aspirin):
    original = manager.add(**aspirin)

    updated = manager.update(original.id, {"price": 899.99, "stock": 20})

    assert updated.price == 899.99
    assert updated.stock == 20
    for field in ("title", "description", "thumbnail", "code"):
        assert getattr(updated, field) == getattr(original, field)
    assert manager.get_by_id(original.id) == updated


def test_update_accepts_typed_partial_and_skips_code_uniqueness(manager, aspirin):
    manager.add(**aspirin)
    second = manager.add(**{**aspirin, "code": "FARM002"})

    updated = manager.update(second.id, ProductUpdate(code="FARM001"))

    assert updated.code == "FARM001"
    assert updated.id == second.id


def test_update_cannot_change_id(manager, aspirin):
    product = manager.add(**aspirin)

    updated = manager.update(product.id, {"id": 42, "stock": 1})

    assert updated.id == product.id
    assert updated.stock == 1


def test_update_unknown_id_raises_not_found(manager, aspirin):
    manager.add(**aspirin)

    with pytest.raises(NotFoundError) as excinfo:
        manager.update(7, {"price": 1.0})

    assert excinfo.value.product_id == 7
    assert manager.get_by_id(1).price == aspirin["price"]


def test_delete_removes_exactly_one_record(manager, aspirin):
    manager.add(**aspirin)
    manager.add(**{**aspirin, "code": "FARM002"})

    removed = manager.delete(1)

    assert removed.id == 1
    assert manager.get_by_id(1) is None
    assert [p.id for p in manager.get_all()] == [2]


def test_delete_unknown_id_raises_not_found(manager, aspirin):
    manager.add(**aspirin)

    with pytest.raises(NotFoundError):
        manager.delete(5)

    assert len(manager.get_all()) == 1


def test_ids_are_not_reused_after_delete(manager, aspirin):
    manager.add(**aspirin)
    manager.delete(1)

    product = manager.add(**{**aspirin, "code": "FARM002"})

    assert product.id == 2


def test_save_then_load_round_trips(manager, products_file, aspirin):
    manager.add(**aspirin)
    manager.add(**{**aspirin, "code": "FARM002", "stock": 0})
    manager.add(**{**aspirin, "code": "FARM003"})
    manager.delete(2)

    reloaded = ProductManager(products_file)
    count = reloaded.load()

    assert count == 2
    assert reloaded.get_all() == manager.get_all()
    assert reloaded.next_id == 4


def test_load_missing_file_starts_empty(products_file):
    manager = ProductManager(products_file, on_load_error=OnLoadError.PROPAGATE)

    assert manager.load() == 0
    assert manager.get_all() == []
    assert manager.next_id == 1


@pytest.mark.parametrize(
    "content",
    [
        "not json at all",
        '{"id": 1}',
        '[{"id": 1, "title": "sin campos"}]',
    ],
)
def test_load_corrupt_file_starts_empty_by_default(products_file, content):
    products_file.write_text(content, encoding="utf-8")
    manager = ProductManager(products_file)

    assert manager.load() == 0
    assert manager.get_all() == []
    assert manager.next_id == 1


def test_load_corrupt_file_raises_when_propagating(products_file):
    products_file.write_text("[{", encoding="utf-8")
    manager = ProductManager(products_file, on_load_error="propagate")

    with pytest.raises(PersistenceError) as excinfo:
        manager.load()

    assert isinstance(excinfo.value, OSError)
    assert excinfo.value.__cause__ is not None


def test_load_replaces_existing_collection(manager, products_file, aspirin):
    manager.add(**aspirin)
    products_file.write_text(
        json.dumps([{"id": 10, **{**aspirin, "code": "X"}}]), encoding="utf-8"
    )

    manager.load()

    assert [p.code for p in manager.get_all()] == ["X"]
    assert manager.next_id == 11


def test_failed_save_keeps_in_memory_change(tmp_path: Path, aspirin):
    manager = ProductManager(tmp_path / "missing-dir" / "products.json")
    manager.load()

    with pytest.raises(PersistenceError):
        manager.add(**aspirin)

    assert [p.code for p in manager.get_all()] == ["FARM001"]
    assert manager.next_id == 2
