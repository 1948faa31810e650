"""End-to-end tests for the authentication endpoints.

Each test runs against a fresh application over its own SQLite file, so
rate-limit windows and stored accounts never leak between tests. Every
request comes from the same TestClient address, and registration shares the
login limiter.
"""

import jwt
import pytest
from fastapi.testclient import TestClient

from src.core.application import create_application

REGISTER_URL = "/api/v1/auth/register"
LOGIN_URL = "/api/v1/auth/login"
FORGOT_PASSWORD_URL = "/api/v1/auth/forgot-password"

LOGIN_LIMIT_MESSAGE = "Too many request, please try again later."
RESET_LIMIT_MESSAGE = "Too many requests. Try again later."


def _registration(**overrides):
    payload = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@example.com",
        "phone": "+2348012345678",
        "password": "Str0ngP@ss",
    }
    payload.update(overrides)
    return payload


class TestRegister:
    def test_register_returns_created_user(self, client):
        response = client.post(REGISTER_URL, json=_registration())

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "User registered successfully"
        user = body["user"]
        assert user["email"] == "ada@example.com"
        assert user["role"] == "student"
        assert user["user_id"].startswith("AL")
        assert "hashed_password" not in user
        assert "password" not in user

    def test_register_landlord(self, client):
        response = client.post(REGISTER_URL, json=_registration(role="landlord"))

        assert response.status_code == 201
        assert response.json()["user"]["role"] == "landlord"

    def test_duplicate_email_returns_conflict(self, client):
        client.post(REGISTER_URL, json=_registration())

        response = client.post(REGISTER_URL, json=_registration(first_name="Other"))

        assert response.status_code == 409
        assert response.json() == {"detail": "Email already exist"}

    def test_weak_password_is_rejected(self, client):
        response = client.post(REGISTER_URL, json=_registration(password="weakpass"))

        assert response.status_code == 422
        assert response.json() == {"detail": "Must include an uppercase letter"}

    def test_invalid_email_is_rejected(self, client):
        response = client.post(REGISTER_URL, json=_registration(email="not-an-email"))

        assert response.status_code == 422


class TestLogin:
    def test_login_with_generated_user_id(self, client, test_settings):
        registered = client.post(REGISTER_URL, json=_registration()).json()["user"]

        response = client.post(
            LOGIN_URL, json={"user_id": registered["user_id"], "password": "Str0ngP@ss"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["token_type"] == "bearer"
        assert body["user"]["id"] == registered["id"]
        claims = jwt.decode(
            body["access_token"], test_settings.SECRET_KEY, algorithms=["HS256"]
        )
        assert claims["sub"] == registered["id"]
        assert claims["role"] == "student"

    @pytest.mark.parametrize(
        "user_id, password",
        [("ZZ00000000", "Str0ngP@ss"), (None, "Wr0ngP@ss!")],
    )
    def test_bad_credentials_are_unauthorized(self, client, user_id, password):
        registered = client.post(REGISTER_URL, json=_registration()).json()["user"]

        response = client.post(
            LOGIN_URL, json={"user_id": user_id or registered["user_id"], "password": password}
        )

        assert response.status_code == 401
        assert response.json() == {"detail": "Invalid credentials"}

    def test_sixth_attempt_in_window_is_throttled(self, client):
        for _ in range(5):
            response = client.post(LOGIN_URL, json={"user_id": "ZZ00000000", "password": "x"})
            assert response.status_code == 401

        response = client.post(LOGIN_URL, json={"user_id": "ZZ00000000", "password": "x"})

        assert response.status_code == 429
        assert response.json() == {"detail": LOGIN_LIMIT_MESSAGE}
        assert 0 < int(response.headers["Retry-After"]) <= 900

    def test_registration_counts_against_login_window(self, client):
        client.post(REGISTER_URL, json=_registration())
        for _ in range(4):
            client.post(LOGIN_URL, json={"user_id": "ZZ00000000", "password": "x"})

        response = client.post(LOGIN_URL, json={"user_id": "ZZ00000000", "password": "x"})

        assert response.status_code == 429


class TestForgotPassword:
    def test_known_email_is_acknowledged(self, client):
        client.post(REGISTER_URL, json=_registration())

        response = client.post(FORGOT_PASSWORD_URL, json={"email": "ada@example.com"})

        assert response.status_code == 200
        assert "message" in response.json()

    def test_unknown_email_gets_identical_response(self, client):
        client.post(REGISTER_URL, json=_registration())
        known = client.post(FORGOT_PASSWORD_URL, json={"email": "ada@example.com"})

        unknown = client.post(FORGOT_PASSWORD_URL, json={"email": "nobody@example.com"})

        assert unknown.status_code == known.status_code
        assert unknown.json() == known.json()

    def test_sixth_request_in_window_is_throttled(self, client):
        for _ in range(5):
            assert client.post(FORGOT_PASSWORD_URL, json={"email": "a@example.com"}).status_code == 200

        response = client.post(FORGOT_PASSWORD_URL, json={"email": "a@example.com"})

        assert response.status_code == 429
        assert response.json() == {"detail": RESET_LIMIT_MESSAGE}

    def test_limiter_is_independent_of_login(self, client):
        for _ in range(6):
            client.post(LOGIN_URL, json={"user_id": "ZZ00000000", "password": "x"})

        response = client.post(FORGOT_PASSWORD_URL, json={"email": "ada@example.com"})

        assert response.status_code == 200


class TestRateLimitingDisabled:
    def test_no_throttling_when_disabled(self, test_settings):
        settings = test_settings.model_copy(update={"RATE_LIMIT_ENABLED": False})
        with TestClient(create_application(settings)) as client:
            codes = [
                client.post(LOGIN_URL, json={"user_id": "ZZ00000000", "password": "x"}).status_code
                for _ in range(7)
            ]

        assert set(codes) == {401}
