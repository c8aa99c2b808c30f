"""Pytest fixtures for API tests."""

import os
import time
from collections.abc import Callable, Generator

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("VAPID_SUBJECT", "mailto:ops@example.com")
os.environ.setdefault("VAPID_PUBLIC_KEY", "test-public-key")
os.environ.setdefault("VAPID_PRIVATE_KEY", "test-private-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.api.deps import get_db
from storefront.db import models  # noqa: F401  # Imported for side effects
from storefront.db.base import Base
from storefront.db.models.user import ROLE_ADMIN, ROLE_BUYER
from storefront.main import create_app
from storefront.schemas import UserCreate
from storefront.services.auth import AuthService

DEFAULT_PASSWORD = "supersecure"

AuthHeaders = dict[str, str]


@pytest.fixture()
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(db_engine) -> Generator[Session, None, None]:
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


def _override_db(app, db_session: Session) -> None:
    def override_get_db() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db


@pytest.fixture()
def client(db_engine, db_session: Session) -> Generator[TestClient, None, None]:
    app = create_app(engine=db_engine)
    _override_db(app, db_session)
    with TestClient(app) as test_client:
        wait_for_database(app)
        yield test_client


def wait_for_database(app, timeout: float = 2.0) -> None:
    """Block until the background connection attempt has settled."""

    deadline = time.monotonic() + timeout
    while app.state.database.state.status.value == "pending":
        if time.monotonic() > deadline:
            raise AssertionError("database connection attempt did not settle")
        time.sleep(0.01)


@pytest.fixture()
def broken_engine():
    engine = create_engine("sqlite:////nonexistent-storefront-dir/storefront.db")
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture()
def failed_db_client(broken_engine) -> Generator[TestClient, None, None]:
    """Client whose database never connects; request sessions use the same engine."""

    app = create_app(engine=broken_engine)
    broken_session = sessionmaker(autocommit=False, autoflush=False, bind=broken_engine)()
    _override_db(app, broken_session)
    with TestClient(app) as test_client:
        wait_for_database(app)
        yield test_client
    broken_session.close()


@pytest.fixture()
def lost_db_client(db_engine, broken_engine) -> Generator[TestClient, None, None]:
    """Client that connected at startup but whose request sessions can no longer reach the database."""

    app = create_app(engine=db_engine)
    broken_session = sessionmaker(autocommit=False, autoflush=False, bind=broken_engine)()
    _override_db(app, broken_session)
    with TestClient(app) as test_client:
        wait_for_database(app)
        yield test_client
    broken_session.close()


def login(client: TestClient, email: str, password: str = DEFAULT_PASSWORD) -> AuthHeaders:
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture()
def make_user(client: TestClient, db_session: Session) -> Callable[..., AuthHeaders]:
    """Create an account with the given role and return its auth headers."""

    def factory(email: str, role: str = ROLE_BUYER) -> AuthHeaders:
        AuthService(db_session).register_user(
            UserCreate(email=email, password=DEFAULT_PASSWORD), role=role
        )
        return login(client, email)

    return factory


@pytest.fixture()
def buyer_headers(make_user) -> AuthHeaders:
    return make_user("buyer@example.com")


@pytest.fixture()
def admin_headers(make_user) -> AuthHeaders:
    return make_user("admin@example.com", role=ROLE_ADMIN)


@pytest.fixture()
def create_product(client: TestClient, admin_headers: AuthHeaders) -> Callable[..., dict]:
    def factory(name: str = "Ceramic Mug", price: str = "12.50", stock: int = 10, **extra) -> dict:
        payload = {"name": name, "price": price, "stock": stock, **extra}
        response = client.post("/api/products/", json=payload, headers=admin_headers)
        assert response.status_code == 201, response.text
        return response.json()

    return factory
