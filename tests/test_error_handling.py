"""Tests for the request logging and error translation middleware."""
from __future__ import annotations

import re
import uuid
from datetime import datetime

import pytest
from fastapi import APIRouter
from fastapi.testclient import TestClient
from loguru import logger

from storefront.config import Settings
from storefront.core.logging import LOG_FORMAT
from storefront.core.security import create_access_token
from storefront.lifecycle import StartupSequencer
from storefront.utils.exceptions import ConflictError


class TeapotError(Exception):
    status = 418


class GatewayError(Exception):
    status_code = 502


class OutOfRangeStatusError(Exception):
    status = 200


faulty_router = APIRouter(prefix="/faulty")


@faulty_router.get("/crash")
def crash() -> None:
    raise RuntimeError("kaboom")


@faulty_router.get("/teapot")
def teapot() -> None:
    raise TeapotError("short and stout")


@faulty_router.get("/gateway")
async def gateway() -> None:
    raise GatewayError("upstream timed out")


@faulty_router.get("/bogus-status")
def bogus_status() -> None:
    raise OutOfRangeStatusError("not really an error status")


@faulty_router.get("/conflict")
def conflict() -> None:
    raise ConflictError("Already taken", details={"field": "name"})


@faulty_router.get("/items/{item_id}")
def read_item(item_id: int) -> dict:
    return {"item_id": item_id}


@pytest.fixture()
def faulty_client(db_engine):
    app = StartupSequencer(
        Settings(), engine=db_engine, routers=[("faulty", faulty_router)]
    ).build()
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def log_messages():
    messages: list = []
    handler_id = logger.add(messages.append, format=LOG_FORMAT, level="DEBUG")
    try:
        yield messages
    finally:
        logger.remove(handler_id)


def _assert_error_shape(response, status_code: int, message: str) -> dict:
    assert response.status_code == status_code
    data = response.json()
    assert data["error"] == message
    assert datetime.fromisoformat(data["timestamp"]).tzinfo is not None
    return data


def test_unhandled_exception_becomes_500(faulty_client: TestClient) -> None:
    _assert_error_shape(faulty_client.get("/api/faulty/crash"), 500, "kaboom")


def test_exception_status_attribute_is_used(faulty_client: TestClient) -> None:
    _assert_error_shape(faulty_client.get("/api/faulty/teapot"), 418, "short and stout")


def test_exception_status_code_attribute_is_used(faulty_client: TestClient) -> None:
    _assert_error_shape(faulty_client.get("/api/faulty/gateway"), 502, "upstream timed out")


def test_non_error_status_falls_back_to_500(faulty_client: TestClient) -> None:
    _assert_error_shape(
        faulty_client.get("/api/faulty/bogus-status"), 500, "not really an error status"
    )


def test_application_error_carries_details(faulty_client: TestClient) -> None:
    data = _assert_error_shape(faulty_client.get("/api/faulty/conflict"), 409, "Already taken")
    assert data["details"] == {"field": "name"}


def test_unknown_route_uses_error_shape(faulty_client: TestClient) -> None:
    _assert_error_shape(faulty_client.get("/api/does-not-exist"), 404, "Not Found")


def test_validation_errors_use_error_shape(faulty_client: TestClient) -> None:
    data = _assert_error_shape(
        faulty_client.get("/api/faulty/items/not-a-number"), 422, "Validation failed"
    )
    assert data["details"][0]["loc"] == ["path", "item_id"]


def test_healthy_routes_are_unaffected(faulty_client: TestClient) -> None:
    response = faulty_client.get("/api/faulty/items/7")

    assert response.status_code == 200
    assert response.json() == {"item_id": 7}


def test_database_routes_fail_fast_when_database_failed(failed_db_client: TestClient) -> None:
    data = _assert_error_shape(
        failed_db_client.get("/api/categories/"), 503, "Database is unavailable"
    )
    assert "details" not in data


def test_cors_headers_are_applied(client: TestClient) -> None:
    response = client.get("/", headers={"Origin": "https://shop.example.com"})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] in ("*", "https://shop.example.com")


def test_authenticated_routes_answer_503_when_database_lost(lost_db_client: TestClient) -> None:
    token = create_access_token(str(uuid.uuid4()))

    response = lost_db_client.get(
        "/api/buyers/me", headers={"Authorization": f"Bearer {token}"}
    )

    _assert_error_shape(response, 503, "Database is unavailable")
    assert "sqlite3" not in response.text


def test_each_request_is_logged_with_timestamp(
    faulty_client: TestClient, log_messages: list
) -> None:
    response = faulty_client.get("/api/faulty/items/7")

    assert response.status_code == 200
    request_lines = [
        message for message in log_messages if message.record["message"] == "GET /api/faulty/items/7"
    ]
    assert len(request_lines) == 1
    assert re.match(
        r"\[\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z\] INFO ", str(request_lines[0])
    )


def test_unhandled_exception_is_logged_with_traceback(
    faulty_client: TestClient, log_messages: list
) -> None:
    faulty_client.get("/api/faulty/crash")

    request_lines = [
        message for message in log_messages if message.record["message"] == "GET /api/faulty/crash"
    ]
    errors = [
        message
        for message in log_messages
        if message.record["level"].name == "ERROR"
        and message.record["extra"].get("path") == "/api/faulty/crash"
    ]
    assert len(request_lines) == 1
    assert len(errors) == 1
    assert errors[0].record["exception"] is not None
    assert "Traceback" in str(errors[0])
    assert "RuntimeError: kaboom" in str(errors[0])
