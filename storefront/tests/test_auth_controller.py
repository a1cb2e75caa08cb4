from __future__ import annotations

from datetime import UTC, datetime
from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from storefront.application.use_cases.sessions.authenticate_request import \
    AuthenticateRequestUseCase
from storefront.application.use_cases.users.login_user import LoginUserUseCase
from storefront.application.use_cases.users.register_user import RegisterUserUseCase
from storefront.domain.users.entities import SessionTokens, User
from storefront.domain.users.exceptions import (AuthRejectReason, InvalidCredentialsError,
                                                UnauthorizedError, UserAlreadyExistsError)
from storefront.interfaces.http.controllers.auth_controller import AuthController
from storefront.interfaces.http.controllers.cart_controller import CartController
from storefront.shared.middleware.error_handler import configure_error_handling


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def _controller(**overrides) -> AuthController:
    kwargs = {
        "register_use_case": MagicMock(),
        "login_use_case": MagicMock(),
        "logout_use_case": MagicMock(),
        "authenticate": MagicMock(),
    }
    kwargs.update(overrides)
    return AuthController(**kwargs)


def test_register_endpoint_returns_201(flask_app: Flask) -> None:
    register_called: dict[str, tuple[str, str]] = {}

    class StubRegister:
        def execute(self, username: str, password: str) -> User:
            register_called["args"] = (username, password)
            return User(id=1, username=username, password_hash="hash", created_at=datetime.now(UTC))

    controller = _controller(register_use_case=cast(RegisterUserUseCase, StubRegister()))
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/register", json={"username": "alice", "password": "pw"})

    assert response.status_code == 201
    assert response.get_json() == {"message": "User registered successfully"}
    assert register_called["args"] == ("alice", "pw")


def test_register_duplicate_returns_400(flask_app: Flask) -> None:
    register = MagicMock()
    register.execute.side_effect = UserAlreadyExistsError()
    flask_app.register_blueprint(_controller(register_use_case=register).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/register", json={"username": "alice", "password": "pw"})

    assert response.status_code == 400
    assert response.get_json() == {"error": "user_already_exists"}


def test_login_returns_token_pair(flask_app: Flask) -> None:
    login = MagicMock(spec=LoginUserUseCase)
    login.execute.return_value = (1, SessionTokens("access", "refresh", 0))
    flask_app.register_blueprint(_controller(login_use_case=login).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/login", json={"username": "alice", "password": "pw"})

    assert response.status_code == 200
    assert response.get_json() == {"access_token": "access", "refresh_token": "refresh"}
    login.execute.assert_called_once_with("alice", "pw")


def test_login_bad_credentials_returns_401(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    flask_app.register_blueprint(_controller(login_use_case=login).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/login", json={"username": "alice", "password": "nope"})

    assert response.status_code == 401
    assert response.get_json() == {"error": "invalid_credentials"}


@pytest.mark.parametrize(
    "body", [{"username": "a"}, {"password": "pw"}, {"username": "", "password": "pw"}, None]
)
def test_login_missing_fields_returns_400(flask_app: Flask, body) -> None:
    login = MagicMock()
    flask_app.register_blueprint(_controller(login_use_case=login).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/login", json=body)

    assert response.status_code == 400
    assert response.get_json()["error"] == "bad_request"
    login.execute.assert_not_called()


def test_gate_failure_payload_hides_reason(flask_app: Flask) -> None:
    authenticate = MagicMock(spec=AuthenticateRequestUseCase)
    authenticate.execute.side_effect = UnauthorizedError(AuthRejectReason.TOKEN_EXPIRED)
    get_cart = MagicMock()
    controller = CartController(
        get_cart=get_cart, add_to_cart=MagicMock(), authenticate=authenticate
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.get("/cart", headers={"Authorization": "some-token"})

    assert response.status_code == 401
    assert response.get_json() == {"error": "Unauthorized"}
    authenticate.execute.assert_called_once_with("some-token")
    get_cart.execute.assert_not_called()


def test_gate_passes_raw_header_and_attaches_identity(flask_app: Flask) -> None:
    authenticate = MagicMock(spec=AuthenticateRequestUseCase)
    authenticate.execute.return_value = 11
    get_cart = MagicMock()
    get_cart.execute.return_value = []
    controller = CartController(
        get_cart=get_cart, add_to_cart=MagicMock(), authenticate=authenticate
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.get("/cart", headers={"Authorization": "Bearer abc"})

    assert response.status_code == 200
    authenticate.execute.assert_called_once_with("Bearer abc")
    get_cart.execute.assert_called_once_with(11)


def test_unexpected_error_is_masked(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = RuntimeError("connection refused to db at 10.0.0.1")
    flask_app.register_blueprint(_controller(login_use_case=login).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/login", json={"username": "alice", "password": "pw"})

    assert response.status_code == 500
    assert response.get_json() == {"error": "internal_error"}
