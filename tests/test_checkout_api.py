from storefront.version import API_PREFIX

SHIPPING = {
    "firstName": "Jordan",
    "lastName": "Rivera",
    "email": "jordan@example.com",
    "phone": "555-0142",
    "address": "12 Harbor Lane",
    "city": "Portland",
    "state": "OR",
    "zipCode": "97201",
}
PAYMENT = {
    "cardNumber": "4242 4242 4242 4242",
    "expiryDate": "12/29",
    "cvv": "123",
    "cardholderName": "Jordan Rivera",
}


def checkout_payload(**overrides):
    payload = {"shippingAddress": dict(SHIPPING), "payment": dict(PAYMENT), "shippingMethod": "standard"}
    payload.update(overrides)
    return payload


def test_shipping_options(client):
    resp = client.get(f"{API_PREFIX}/checkout/shipping-options")
    assert [o["id"] for o in resp.get_json()["data"]["options"]] == ["standard", "express", "overnight"]


def test_quote(client):
    client.post(f"{API_PREFIX}/cart/add", json={"product_id": 7, "quantity": 2})  # 39.98
    resp = client.post(f"{API_PREFIX}/checkout/quote", json={"shippingMethod": "express"})
    totals = resp.get_json()["data"]["totals"]
    assert totals["subtotal"] == 39.98
    assert totals["shipping"] == 19.99
    assert totals["tax"] == 3.2
    assert totals["total"] == 63.17


def test_place_order_creates_order_and_clears_cart(client):
    client.post(f"{API_PREFIX}/cart/add", json={"product_id": 1, "quantity": 1})
    resp = client.post(f"{API_PREFIX}/checkout", json=checkout_payload())
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["message"] == "Order placed successfully"
    order = body["data"]["order"]
    assert order["Id"] == 4
    assert order["status"] == "processing"
    assert order["paymentMethod"] == {"type": "card", "last4": "4242"}
    assert [t["status"] for t in order["timeline"]] == ["pending", "processing"]
    assert order["total"] == 215.99

    assert client.get(f"{API_PREFIX}/cart/count").get_json()["data"]["count"] == 0
    assert client.get(f"{API_PREFIX}/orders/4").status_code == 200


def test_place_order_with_empty_cart(client):
    resp = client.post(f"{API_PREFIX}/checkout", json=checkout_payload())
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Cart is empty"


def test_checkout_validation(client):
    client.post(f"{API_PREFIX}/cart/add", json={"product_id": 1})
    bad_email = checkout_payload(shippingAddress={**SHIPPING, "email": "not-an-email"})
    bad_card = checkout_payload(payment={**PAYMENT, "cardNumber": "1234"})
    bad_expiry = checkout_payload(payment={**PAYMENT, "expiryDate": "13/29"})
    blank_city = checkout_payload(shippingAddress={**SHIPPING, "city": "  "})
    bad_method = checkout_payload(shippingMethod="drone")
    for payload in (bad_email, bad_card, bad_expiry, blank_city, bad_method):
        resp = client.post(f"{API_PREFIX}/checkout", json=payload)
        assert resp.status_code == 400
        assert resp.get_json()["errors"]
    assert client.get(f"{API_PREFIX}/cart/count").get_json()["data"]["count"] == 1
