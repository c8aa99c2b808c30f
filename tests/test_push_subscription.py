"""Tests for push subscription registration."""
from __future__ import annotations

import uuid
from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.core.security import create_access_token
from storefront.db.models import PushSubscription

SUBSCRIPTION = {
    "endpoint": "https://push.example.com/send/abc",
    "keys": {"p256dh": "client-public-key", "auth": "client-auth-secret"},
}


def _subscriptions(db_session: Session) -> list[PushSubscription]:
    db_session.expire_all()
    return list(db_session.scalars(select(PushSubscription)))


def test_register_push_subscription(client: TestClient, buyer_headers, db_session: Session) -> None:
    response = client.post(
        "/api/push-subscription", json={"subscription": SUBSCRIPTION}, headers=buyer_headers
    )

    assert response.status_code == 201
    assert response.json() == {"success": True}
    records = _subscriptions(db_session)
    assert len(records) == 1
    assert records[0].subscription == SUBSCRIPTION


def test_register_push_subscription_replaces_existing(
    client: TestClient, buyer_headers, db_session: Session
) -> None:
    client.post("/api/push-subscription", json={"subscription": SUBSCRIPTION}, headers=buyer_headers)
    updated = {**SUBSCRIPTION, "endpoint": "https://push.example.com/send/xyz"}

    response = client.post(
        "/api/push-subscription", json={"subscription": updated}, headers=buyer_headers
    )

    assert response.status_code == 201
    records = _subscriptions(db_session)
    assert len(records) == 1
    assert records[0].subscription["endpoint"] == "https://push.example.com/send/xyz"


def test_push_subscriptions_are_kept_per_user(
    client: TestClient, make_user, db_session: Session
) -> None:
    first = make_user("first@example.com")
    second = make_user("second@example.com")

    client.post("/api/push-subscription", json={"subscription": SUBSCRIPTION}, headers=first)
    client.post("/api/push-subscription", json={"subscription": SUBSCRIPTION}, headers=second)

    assert len(_subscriptions(db_session)) == 2


def test_register_push_subscription_requires_authentication(
    client: TestClient, db_session: Session
) -> None:
    response = client.post("/api/push-subscription", json={"subscription": SUBSCRIPTION})

    assert response.status_code == 401
    assert response.json()["error"] == "Could not validate credentials"
    assert _subscriptions(db_session) == []


def test_register_push_subscription_rejects_invalid_token(client: TestClient) -> None:
    response = client.post(
        "/api/push-subscription",
        json={"subscription": SUBSCRIPTION},
        headers={"Authorization": "Bearer not-a-token"},
    )

    assert response.status_code == 401


def test_register_push_subscription_requires_subscription(
    client: TestClient, buyer_headers
) -> None:
    response = client.post("/api/push-subscription", json={}, headers=buyer_headers)

    assert response.status_code == 422
    assert response.json()["error"] == "Validation failed"


def test_register_push_subscription_hides_storage_errors(
    client: TestClient, buyer_headers, db_session: Session
) -> None:
    with patch(
        "storefront.api.endpoints.push_subscription.PushSubscriptionService.upsert",
        side_effect=SQLAlchemyError("password=hunter2 at db.internal"),
    ):
        response = client.post(
            "/api/push-subscription", json={"subscription": SUBSCRIPTION}, headers=buyer_headers
        )

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Error saving subscription"}
    assert "hunter2" not in response.text
    assert _subscriptions(db_session) == []


def test_register_push_subscription_when_database_failed(failed_db_client: TestClient) -> None:
    token = create_access_token(str(uuid.uuid4()))

    response = failed_db_client.post(
        "/api/push-subscription",
        json={"subscription": SUBSCRIPTION},
        headers={"Authorization": f"Bearer {token}"},
    )

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Error saving subscription"}
    assert "sqlite3" not in response.text
    assert "OperationalError" not in response.text


def test_register_push_subscription_when_database_failed_still_requires_token(
    failed_db_client: TestClient,
) -> None:
    response = failed_db_client.post("/api/push-subscription", json={"subscription": SUBSCRIPTION})

    assert response.status_code == 401
    assert response.json()["error"] == "Could not validate credentials"


def test_register_push_subscription_when_database_lost(lost_db_client: TestClient) -> None:
    token = create_access_token(str(uuid.uuid4()))

    response = lost_db_client.post(
        "/api/push-subscription",
        json={"subscription": SUBSCRIPTION},
        headers={"Authorization": f"Bearer {token}"},
    )

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Error saving subscription"}
    assert "unable to open database file" not in response.text


def test_register_push_subscription_for_unknown_user(client: TestClient, db_session: Session) -> None:
    token = create_access_token(str(uuid.uuid4()))

    response = client.post(
        "/api/push-subscription",
        json={"subscription": SUBSCRIPTION},
        headers={"Authorization": f"Bearer {token}"},
    )

    assert response.status_code == 401
    assert _subscriptions(db_session) == []
