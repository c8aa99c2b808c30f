"""Tests for categories and products."""
from __future__ import annotations

from decimal import Decimal

from fastapi.testclient import TestClient

from storefront.services.catalog import slugify


def test_slugify() -> None:
    assert slugify("Home & Garden") == "home-garden"
    assert slugify("!!!") == "category"


def test_category_crud(client: TestClient, admin_headers) -> None:
    created = client.post(
        "/api/categories/", json={"name": "Kitchen Tools"}, headers=admin_headers
    )
    assert created.status_code == 201
    category = created.json()
    assert category["slug"] == "kitchen-tools"

    listing = client.get("/api/categories/")
    assert [item["name"] for item in listing.json()] == ["Kitchen Tools"]

    renamed = client.patch(
        f"/api/categories/{category['id']}", json={"name": "Cookware"}, headers=admin_headers
    )
    assert renamed.status_code == 200
    assert renamed.json()["slug"] == "cookware"

    deleted = client.delete(f"/api/categories/{category['id']}", headers=admin_headers)
    assert deleted.status_code == 204
    assert client.get(f"/api/categories/{category['id']}").status_code == 404


def test_duplicate_category_name_conflicts(client: TestClient, admin_headers) -> None:
    client.post("/api/categories/", json={"name": "Toys"}, headers=admin_headers)

    response = client.post("/api/categories/", json={"name": "toys"}, headers=admin_headers)

    assert response.status_code == 409
    assert response.json()["error"] == "A category with this name already exists"


def test_buyers_cannot_manage_catalog(client: TestClient, buyer_headers) -> None:
    response = client.post("/api/categories/", json={"name": "Books"}, headers=buyer_headers)

    assert response.status_code == 403


def test_product_listing_filters(client: TestClient, admin_headers, create_product) -> None:
    category = client.post(
        "/api/categories/", json={"name": "Mugs"}, headers=admin_headers
    ).json()
    mug = create_product(name="Blue Mug", category_id=category["id"])
    create_product(name="Linen Towel", description="Soft kitchen towel")

    everything = client.get("/api/products/")
    assert everything.status_code == 200
    assert everything.json()["total"] == 2

    by_category = client.get("/api/products/", params={"category_id": category["id"]}).json()
    assert [item["id"] for item in by_category["items"]] == [mug["id"]]

    by_text = client.get("/api/products/", params={"q": "kitchen"}).json()
    assert [item["name"] for item in by_text["items"]] == ["Linen Towel"]

    page = client.get("/api/products/", params={"limit": 1, "offset": 1}).json()
    assert page["total"] == 2
    assert len(page["items"]) == 1
    assert page["limit"] == 1


def test_product_detail_and_update(client: TestClient, admin_headers, create_product) -> None:
    product = create_product(price="19.99", stock=3)
    assert Decimal(product["price"]) == Decimal("19.99")

    updated = client.patch(
        f"/api/products/{product['id']}", json={"stock": 7}, headers=admin_headers
    )
    assert updated.status_code == 200
    assert updated.json()["stock"] == 7

    detail = client.get(f"/api/products/{product['id']}")
    assert detail.status_code == 200
    assert detail.json()["name"] == "Ceramic Mug"


def test_product_with_unknown_category_is_rejected(client: TestClient, admin_headers) -> None:
    response = client.post(
        "/api/products/",
        json={"name": "Orphan", "price": "1.00", "category_id": 999},
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Unknown category"


def test_deleted_products_are_hidden(client: TestClient, admin_headers, create_product) -> None:
    product = create_product()

    response = client.delete(f"/api/products/{product['id']}", headers=admin_headers)

    assert response.status_code == 204
    assert client.get(f"/api/products/{product['id']}").status_code == 404
    assert client.get("/api/products/").json()["total"] == 0


def test_product_creation_is_recorded_in_recent_activity(
    client: TestClient, admin_headers, create_product
) -> None:
    create_product(name="Tea Kettle")

    response = client.get("/api/recent/", headers=admin_headers)

    assert response.status_code == 200
    kinds = [item["kind"] for item in response.json()]
    assert "product_created" in kinds
