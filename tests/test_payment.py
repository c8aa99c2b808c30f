"""Tests for payment status and confirmation."""
from __future__ import annotations

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def order(client: TestClient, buyer_headers, create_product) -> dict:
    product = create_product(price="8.25", stock=4)
    client.post("/api/cart/items", json={"product_id": product["id"], "quantity": 2}, headers=buyer_headers)
    response = client.post(
        "/api/orders/", json={"shipping_address": "7 Orchard Lane"}, headers=buyer_headers
    )
    return response.json()


def test_payment_status_for_new_order(client: TestClient, buyer_headers, order) -> None:
    response = client.get(f"/api/payment/{order['id']}", headers=buyer_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["payment_status"] == "unpaid"
    assert Decimal(data["amount"]) == Decimal("16.50")
    assert data["paid_at"] is None


def test_confirm_payment_marks_order_paid(client: TestClient, buyer_headers, order) -> None:
    response = client.post(
        f"/api/payment/{order['id']}/confirm",
        json={"provider": "stripe", "reference": "pi_123"},
        headers=buyer_headers,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["payment_status"] == "paid"
    assert data["provider"] == "stripe"
    assert data["reference"] == "pi_123"
    assert data["paid_at"] is not None
    assert client.get(f"/api/orders/{order['id']}", headers=buyer_headers).json()["status"] == "confirmed"

    again = client.post(
        f"/api/payment/{order['id']}/confirm",
        json={"provider": "stripe", "reference": "pi_456"},
        headers=buyer_headers,
    )
    assert again.status_code == 409
    assert again.json()["error"] == "Order is already paid"


def test_cancelled_orders_cannot_be_paid(client: TestClient, buyer_headers, order) -> None:
    client.post(f"/api/orders/{order['id']}/cancel", headers=buyer_headers)

    response = client.post(
        f"/api/payment/{order['id']}/confirm",
        json={"provider": "stripe", "reference": "pi_789"},
        headers=buyer_headers,
    )

    assert response.status_code == 409
    assert response.json()["error"] == "Cannot pay for a cancelled order"


def test_payment_status_hidden_from_other_buyers(client: TestClient, make_user, order) -> None:
    other = make_user("someone-else@example.com")

    response = client.get(f"/api/payment/{order['id']}", headers=other)

    assert response.status_code == 404
