import json

import pytest

from storefront.store import Store
from tests.conftest import make_product


def test_seed_loads_bundled_data():
    store = Store.from_seed()
    assert len(store.products) == 20
    assert [o.id for o in store.orders] == [1, 2, 3]
    assert store.cart == []
    assert store.wishlist == []
    headphones = store.find_product(1)
    assert headphones.original_price == 249.99
    assert headphones.on_sale


def test_reset_restores_seed_state():
    store = Store.from_seed()
    store.cart.append(store.orders[0].items[0])
    store.orders[0].status = "cancelled"
    store.orders.pop()
    store.reset()
    assert store.cart == []
    assert [o.id for o in store.orders] == [1, 2, 3]
    assert store.orders[0].status == "delivered"


def test_duplicate_product_ids_rejected(tmp_path):
    catalog = tmp_path / "products.json"
    orders = tmp_path / "orders.json"
    record = make_product(1).to_dict()
    catalog.write_text(json.dumps([record, record]))
    orders.write_text("[]")
    with pytest.raises(ValueError, match="Duplicate product ids"):
        Store.from_seed(str(catalog), str(orders))


def test_non_list_seed_rejected(tmp_path):
    catalog = tmp_path / "products.json"
    catalog.write_text('{"Id": 1}')
    with pytest.raises(ValueError, match="Expected a list"):
        Store.from_seed(str(catalog))


def test_product_round_trip_uses_wire_names():
    data = make_product(9, originalPrice=20.0, dateAdded="2024-01-01T00:00:00").to_dict()
    assert data["Id"] == 9
    assert data["originalPrice"] == 20.0
    assert data["inStock"] is True
    assert data["dateAdded"].startswith("2024-01-01T00:00:00")
