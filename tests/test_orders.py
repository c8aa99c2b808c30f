"""Tests for checkout and order lifecycle."""
from __future__ import annotations

import uuid
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from storefront.api import deps

ADDRESS = "42 Harbour Road, Springfield"


@pytest.fixture()
def notifications(client: TestClient) -> list[tuple]:
    sent: list[tuple] = []

    def record(user_id, title, body, url=None) -> None:
        sent.append((user_id, title, body, url))

    client.app.dependency_overrides[deps.get_order_notifier] = lambda: record
    try:
        yield sent
    finally:
        client.app.dependency_overrides.pop(deps.get_order_notifier, None)


def _place_order(client: TestClient, headers, product: dict, quantity: int = 2) -> dict:
    client.post(
        "/api/cart/items", json={"product_id": product["id"], "quantity": quantity}, headers=headers
    )
    response = client.post("/api/orders/", json={"shipping_address": ADDRESS}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_checkout_creates_order_and_reserves_stock(
    client: TestClient, buyer_headers, create_product
) -> None:
    product = create_product(price="10.00", stock=5)

    order = _place_order(client, buyer_headers, product, quantity=2)

    assert order["status"] == "pending"
    assert order["payment_status"] == "unpaid"
    assert Decimal(order["total"]) == Decimal("20.00")
    assert order["items"][0]["product_name"] == "Ceramic Mug"
    assert order["items"][0]["quantity"] == 2
    assert client.get(f"/api/products/{product['id']}").json()["stock"] == 3
    assert client.get("/api/cart/", headers=buyer_headers).json()["items"] == []


def test_checkout_with_empty_cart(client: TestClient, buyer_headers) -> None:
    response = client.post("/api/orders/", json={"shipping_address": ADDRESS}, headers=buyer_headers)

    assert response.status_code == 400
    assert response.json()["error"] == "Cart is empty"


def test_checkout_fails_without_partial_stock_changes(
    client: TestClient, buyer_headers, admin_headers, create_product
) -> None:
    plenty = create_product(name="Plenty", stock=10)
    scarce = create_product(name="Scarce", stock=2)
    client.post("/api/cart/items", json={"product_id": plenty["id"], "quantity": 3}, headers=buyer_headers)
    client.post("/api/cart/items", json={"product_id": scarce["id"], "quantity": 2}, headers=buyer_headers)
    client.patch(f"/api/products/{scarce['id']}", json={"stock": 1}, headers=admin_headers)

    response = client.post("/api/orders/", json={"shipping_address": ADDRESS}, headers=buyer_headers)

    assert response.status_code == 400
    assert response.json()["error"] == "Insufficient stock for Scarce"
    assert client.get(f"/api/products/{plenty['id']}").json()["stock"] == 10
    assert len(client.get("/api/cart/", headers=buyer_headers).json()["items"]) == 2


def test_orders_are_private_to_their_owner(
    client: TestClient, make_user, buyer_headers, admin_headers, create_product
) -> None:
    order = _place_order(client, buyer_headers, create_product())
    other = make_user("other@example.com")

    assert client.get(f"/api/orders/{order['id']}", headers=other).status_code == 404
    assert client.get(f"/api/orders/{order['id']}", headers=admin_headers).status_code == 200
    assert [item["id"] for item in client.get("/api/orders/", headers=buyer_headers).json()] == [
        order["id"]
    ]
    assert client.get("/api/orders/", headers=other).json() == []


def test_cancel_restocks(client: TestClient, buyer_headers, create_product) -> None:
    product = create_product(stock=5)
    order = _place_order(client, buyer_headers, product, quantity=2)

    response = client.post(f"/api/orders/{order['id']}/cancel", headers=buyer_headers)

    assert response.status_code == 200
    assert response.json()["status"] == "cancelled"
    assert client.get(f"/api/products/{product['id']}").json()["stock"] == 5

    again = client.post(f"/api/orders/{order['id']}/cancel", headers=buyer_headers)
    assert again.status_code == 409
    assert again.json()["error"] == "Only pending orders can be cancelled"


def test_admin_status_update_notifies_buyer(
    client: TestClient, buyer_headers, admin_headers, create_product, notifications
) -> None:
    order = _place_order(client, buyer_headers, create_product())

    response = client.patch(
        f"/api/orders/{order['id']}/status", json={"status": "confirmed"}, headers=admin_headers
    )

    assert response.status_code == 200
    assert response.json()["status"] == "confirmed"
    assert len(notifications) == 1
    user_id, title, body, url = notifications[0]
    assert str(user_id) == order["user_id"]
    assert title == "Order update"
    assert body == "Your order is now confirmed."
    assert url == f"/orders/{order['id']}"


def test_status_update_survives_notifier_failure(
    client: TestClient, buyer_headers, admin_headers, create_product
) -> None:
    order = _place_order(client, buyer_headers, create_product())

    def unreachable_broker(user_id, title, body, url=None) -> None:
        raise ConnectionError("Error 111 connecting to redis-broker:6379")

    client.app.dependency_overrides[deps.get_order_notifier] = lambda: unreachable_broker
    try:
        response = client.patch(
            f"/api/orders/{order['id']}/status", json={"status": "confirmed"}, headers=admin_headers
        )
    finally:
        client.app.dependency_overrides.pop(deps.get_order_notifier, None)

    assert response.status_code == 200
    assert response.json()["status"] == "confirmed"
    stored = client.get(f"/api/orders/{order['id']}", headers=buyer_headers)
    assert stored.json()["status"] == "confirmed"


def test_invalid_status_transition(
    client: TestClient, buyer_headers, admin_headers, create_product, notifications
) -> None:
    order = _place_order(client, buyer_headers, create_product())

    response = client.patch(
        f"/api/orders/{order['id']}/status", json={"status": "delivered"}, headers=admin_headers
    )

    assert response.status_code == 409
    assert response.json()["error"] == "Cannot change order status from pending to delivered"
    assert notifications == []


def test_unknown_status_value_is_rejected(
    client: TestClient, buyer_headers, admin_headers, create_product
) -> None:
    order = _place_order(client, buyer_headers, create_product())

    response = client.patch(
        f"/api/orders/{order['id']}/status", json={"status": "lost"}, headers=admin_headers
    )

    assert response.status_code == 422


def test_admin_lists_orders_by_status(
    client: TestClient, buyer_headers, admin_headers, create_product, notifications
) -> None:
    first = _place_order(client, buyer_headers, create_product(name="First"))
    second = _place_order(client, buyer_headers, create_product(name="Second"))
    client.patch(
        f"/api/orders/{second['id']}/status", json={"status": "confirmed"}, headers=admin_headers
    )

    pending = client.get("/api/orders/all", params={"status": "pending"}, headers=admin_headers)

    assert pending.status_code == 200
    assert [item["id"] for item in pending.json()] == [first["id"]]
    assert client.get("/api/orders/all", headers=buyer_headers).status_code == 403


def test_unknown_order(client: TestClient, buyer_headers) -> None:
    response = client.get(f"/api/orders/{uuid.uuid4()}", headers=buyer_headers)

    assert response.status_code == 404
    assert response.json()["error"] == "Order not found"
