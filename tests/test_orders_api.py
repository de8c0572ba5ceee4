from storefront.version import API_PREFIX


def test_order_history_newest_first(client):
    resp = client.get(f"{API_PREFIX}/orders")
    assert resp.status_code == 200
    assert [o["Id"] for o in resp.get_json()["data"]["orders"]] == [3, 2, 1]


def test_order_history_filters(client):
    resp = client.get(f"{API_PREFIX}/orders", query_string={"q": "okafor"})
    assert [o["Id"] for o in resp.get_json()["data"]["orders"]] == [2]
    resp = client.get(f"{API_PREFIX}/orders", query_string={"status": "delivered"})
    assert [o["Id"] for o in resp.get_json()["data"]["orders"]] == [1]


def test_get_order_and_timeline(client):
    order = client.get(f"{API_PREFIX}/orders/2").get_json()["data"]["order"]
    assert order["status"] == "shipped"
    assert order["paymentMethod"] == {"type": "card", "last4": "1881"}

    timeline = client.get(f"{API_PREFIX}/orders/2/timeline").get_json()["data"]["timeline"]
    assert [t["status"] for t in timeline] == ["pending", "processing", "shipped"]

    assert client.get(f"{API_PREFIX}/orders/99").status_code == 404
    assert client.get(f"{API_PREFIX}/orders/99/timeline").status_code == 404


def test_status_update_is_idempotent(client):
    for _ in range(2):
        resp = client.post(f"{API_PREFIX}/orders/3/status", json={"status": "shipped"})
        assert resp.status_code == 200
    timeline = resp.get_json()["data"]["order"]["timeline"]
    assert [t["status"] for t in timeline] == ["pending", "processing", "shipped"]


def test_status_update_validation_and_soft_miss(client):
    resp = client.post(f"{API_PREFIX}/orders/3/status", json={"status": "lost"})
    assert resp.status_code == 400
    resp = client.post(f"{API_PREFIX}/orders/99/status", json={"status": "shipped"})
    assert resp.status_code == 404


def test_reorder(client):
    resp = client.post(f"{API_PREFIX}/orders/1/reorder")
    assert resp.status_code == 200
    items = {i["productId"]: i["quantity"] for i in resp.get_json()["data"]["items"]}
    assert items == {3: 1, 7: 2}
    assert client.post(f"{API_PREFIX}/orders/99/reorder").status_code == 404


def test_store_resets_between_tests(client):
    # earlier tests changed order 3 and the cart; the fixture restores the seed
    order = client.get(f"{API_PREFIX}/orders/3").get_json()["data"]["order"]
    assert order["status"] == "processing"
    assert client.get(f"{API_PREFIX}/cart/count").get_json()["data"]["count"] == 0
