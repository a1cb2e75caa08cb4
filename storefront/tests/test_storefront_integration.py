from __future__ import annotations

from datetime import timedelta

import pytest
from flask import Flask
from flask.testing import FlaskClient
from sqlalchemy import func, select, update

from storefront.app import create_app
from storefront.infrastructure.auth.jwt_codec import JwtTokenCodec
from storefront.infrastructure.db import SessionLocal
from storefront.infrastructure.db.models import AuditLog, CartItem, Product, TokenPair, User
from conftest import TEST_SECRET

CREDENTIALS = {"username": "alice", "password": "secret123"}


@pytest.fixture()
def app(reset_database) -> Flask:
    return create_app()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as client:
        yield client


def _count(model) -> int:
    session = SessionLocal()
    try:
        return session.scalar(select(func.count()).select_from(model))
    finally:
        session.close()


def _seed_product(product_id: int, name: str = "Widget", price: float = 9.5) -> int:
    session = SessionLocal()
    try:
        product = Product(id=product_id, name=name, price=price)
        session.add(product)
        session.commit()
        return product.id
    finally:
        session.close()


def _login(client: FlaskClient) -> dict[str, str]:
    client.post("/register", json=CREDENTIALS)
    response = client.post("/login", json=CREDENTIALS)
    assert response.status_code == 200
    return response.get_json()


def test_register_login_and_cart_flow(client: FlaskClient) -> None:
    product_id = _seed_product(7)

    register = client.post("/register", json=CREDENTIALS)
    assert register.status_code == 201
    assert register.get_json() == {"message": "User registered successfully"}

    login = client.post("/login", json=CREDENTIALS)
    assert login.status_code == 200
    tokens = login.get_json()
    assert set(tokens) == {"access_token", "refresh_token"}

    headers = {"Authorization": tokens["access_token"]}
    empty = client.get("/cart", headers=headers)
    assert empty.status_code == 200
    assert empty.get_json() == []

    added = client.post(
        "/cart/add", json={"product_id": product_id, "quantity": 2}, headers=headers
    )
    assert added.status_code == 200
    assert added.get_json() == {"message": "Item added to cart successfully"}

    cart = client.get("/cart", headers=headers)
    assert cart.status_code == 200
    [line] = cart.get_json()
    assert line["id"] == product_id
    assert line["name"] == "Widget"
    assert line["price"] == 9.5
    assert line["quantity"] == 2


def test_duplicate_registration_is_rejected(client: FlaskClient) -> None:
    assert client.post("/register", json=CREDENTIALS).status_code == 201

    again = client.post("/register", json={"username": "alice", "password": "other"})

    assert again.status_code == 400
    assert again.get_json() == {"error": "user_already_exists"}
    assert _count(User) == 1


def test_wrong_password_issues_no_session(client: FlaskClient) -> None:
    client.post("/register", json=CREDENTIALS)

    response = client.post("/login", json={"username": "alice", "password": "wrong"})

    assert response.status_code == 401
    assert _count(TokenPair) == 0


def test_password_is_stored_hashed(client: FlaskClient) -> None:
    client.post("/register", json=CREDENTIALS)

    session = SessionLocal()
    try:
        stored = session.scalars(select(User)).one()
    finally:
        session.close()
    assert stored.password_hash != CREDENTIALS["password"]


def test_repeated_adds_accumulate_in_one_row(client: FlaskClient) -> None:
    headers = {"Authorization": _login(client)["access_token"]}

    client.post("/cart/add", json={"product_id": 7, "quantity": 2}, headers=headers)
    client.post("/cart/add", json={"product_id": 7, "quantity": 3}, headers=headers)

    session = SessionLocal()
    try:
        rows = session.scalars(select(CartItem).where(CartItem.product_id == 7)).all()
    finally:
        session.close()
    assert [row.quantity for row in rows] == [5]


def test_cart_skips_unknown_products(client: FlaskClient) -> None:
    headers = {"Authorization": _login(client)["access_token"]}

    client.post("/cart/add", json={"product_id": 404, "quantity": 1}, headers=headers)

    assert client.get("/cart", headers=headers).get_json() == []


def test_cart_add_rejects_negative_quantity(client: FlaskClient) -> None:
    headers = {"Authorization": _login(client)["access_token"]}

    response = client.post(
        "/cart/add", json={"product_id": 1, "quantity": -1}, headers=headers
    )

    assert response.status_code == 400
    assert _count(CartItem) == 0


def test_cart_requires_token(client: FlaskClient) -> None:
    response = client.get("/cart")

    assert response.status_code == 401
    assert response.get_json() == {"error": "Unauthorized"}


def test_expired_session_row_is_rejected(client: FlaskClient) -> None:
    access_token = _login(client)["access_token"]
    session = SessionLocal()
    try:
        session.execute(
            update(TokenPair)
            .where(TokenPair.access_token == access_token)
            .values(expires_at=0)
        )
        session.commit()
    finally:
        session.close()

    response = client.get("/cart", headers={"Authorization": access_token})

    assert response.status_code == 401


def test_validly_signed_but_unregistered_token_is_rejected(client: FlaskClient) -> None:
    _login(client)
    forged = JwtTokenCodec(TEST_SECRET).issue(1, timedelta(minutes=15))

    response = client.get("/cart", headers={"Authorization": forged})

    assert response.status_code == 401


def test_refresh_token_does_not_open_the_gate(client: FlaskClient) -> None:
    refresh_token = _login(client)["refresh_token"]

    response = client.get("/cart", headers={"Authorization": refresh_token})

    assert response.status_code == 401


def test_bearer_prefixed_header_is_rejected(client: FlaskClient) -> None:
    access_token = _login(client)["access_token"]

    response = client.get("/cart", headers={"Authorization": f"Bearer {access_token}"})

    assert response.status_code == 401


def test_logout_revokes_access_token(client: FlaskClient) -> None:
    headers = {"Authorization": _login(client)["access_token"]}

    assert client.post("/logout", headers=headers).status_code == 200

    assert client.get("/cart", headers=headers).status_code == 401
    assert _count(TokenPair) == 0


def test_second_login_keeps_first_session(client: FlaskClient) -> None:
    first = _login(client)["access_token"]
    second = client.post("/login", json=CREDENTIALS).get_json()["access_token"]

    assert first != second
    assert client.get("/cart", headers={"Authorization": first}).status_code == 200
    assert client.get("/cart", headers={"Authorization": second}).status_code == 200


def test_products_listing_and_creation(client: FlaskClient) -> None:
    headers = {"Authorization": _login(client)["access_token"]}

    created = client.post("/products", json={"name": "Lamp", "price": 12.0}, headers=headers)
    assert created.status_code == 201
    assert created.get_json()["name"] == "Lamp"

    listing = client.get("/products")
    assert [item["name"] for item in listing.get_json()] == ["Lamp"]


def test_health_reports_database(client: FlaskClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json()["database"] == "ok"
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_reset_endpoint_absent_by_default(client: FlaskClient) -> None:
    assert client.post("/reset-database").status_code == 404


def test_unknown_route_answers_with_json(client: FlaskClient) -> None:
    missing = client.get("/nowhere")
    wrong_method = client.get("/login")

    assert missing.status_code == 404
    assert missing.get_json() == {"error": "not_found"}
    assert wrong_method.status_code == 405
    assert wrong_method.get_json() == {"error": "method_not_allowed"}


def test_gate_rejection_writes_nothing_to_the_database(client: FlaskClient) -> None:
    _login(client)
    audit_before = _count(AuditLog)
    tokens_before = _count(TokenPair)

    response = client.get("/cart", headers={"Authorization": "garbage"})

    assert response.status_code == 401
    assert _count(AuditLog) == audit_before
    assert _count(TokenPair) == tokens_before
    assert audit_before >= 2


def test_response_keys_keep_insertion_order(client: FlaskClient) -> None:
    body = client.get("/health").data.decode()

    assert body.index('"ok"') < body.index('"database"') < body.index('"dialect"')
