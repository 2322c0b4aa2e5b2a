"""Tests for auth API endpoints."""

from datetime import timedelta

from fastapi import status
from fastapi.testclient import TestClient

from flashdeck import models
from flashdeck.infrastructure.identity.services import TokenService
from tests.conftest import TEST_USER_EMAIL, TEST_USER_PASSWORD


class TestLogin:
    """Test suite for POST /auth/login endpoint."""

    def test_login_sets_http_only_cookie(
        self, client: TestClient, test_user: models.User
    ) -> None:
        response = client.post(
            "/api/v1/auth/login",
            json={"email": TEST_USER_EMAIL, "password": TEST_USER_PASSWORD},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"success": True, "message": "Login successful"}
        set_cookie = response.headers["set-cookie"]
        assert set_cookie.startswith("token=")
        assert "HttpOnly" in set_cookie
        assert "samesite=strict" in set_cookie.lower()
        assert "token" in client.cookies

    def test_login_normalizes_email(self, client: TestClient, test_user: models.User) -> None:
        response = client.post(
            "/api/v1/auth/login",
            json={"email": f"  {TEST_USER_EMAIL.upper()} ", "password": TEST_USER_PASSWORD},
        )

        assert response.status_code == status.HTTP_200_OK

    def test_wrong_password_and_unknown_user_look_the_same(
        self, client: TestClient, test_user: models.User
    ) -> None:
        wrong_password = client.post(
            "/api/v1/auth/login", json={"email": TEST_USER_EMAIL, "password": "nope"}
        )
        unknown_user = client.post(
            "/api/v1/auth/login", json={"email": "ghost@example.com", "password": "nope"}
        )

        assert wrong_password.status_code == status.HTTP_401_UNAUTHORIZED
        assert unknown_user.status_code == status.HTTP_401_UNAUTHORIZED
        assert wrong_password.json() == unknown_user.json()
        assert wrong_password.json()["error"] == "Invalid email or password"

    def test_missing_credentials_rejected(self, client: TestClient) -> None:
        response = client.post("/api/v1/auth/login", json={"email": TEST_USER_EMAIL})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "Email and password are required"

    def test_login_cookie_authorizes_writes(
        self, client: TestClient, test_user: models.User
    ) -> None:
        client.post(
            "/api/v1/auth/login",
            json={"email": TEST_USER_EMAIL, "password": TEST_USER_PASSWORD},
        )

        response = client.post(
            "/api/v1/flashcards", json={"question": "Q", "answer": "A", "tech": "Node"}
        )

        assert response.status_code == status.HTTP_201_CREATED


class TestLogout:
    """Test suite for POST /auth/logout endpoint."""

    def test_logout_clears_cookie(self, client: TestClient, test_user: models.User) -> None:
        client.post(
            "/api/v1/auth/login",
            json={"email": TEST_USER_EMAIL, "password": TEST_USER_PASSWORD},
        )
        assert "token" in client.cookies

        response = client.post("/api/v1/auth/logout")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["success"] is True
        assert "token" not in client.cookies
        assert client.get("/api/v1/auth/me").status_code == status.HTTP_401_UNAUTHORIZED


class TestMe:
    """Test suite for GET /auth/me endpoint."""

    def test_me_returns_public_user_fields(
        self, auth_client: TestClient, test_user: models.User
    ) -> None:
        response = auth_client.get("/api/v1/auth/me")

        assert response.status_code == status.HTTP_200_OK
        user = response.json()["user"]
        assert user["id"] == test_user.id
        assert user["email"] == TEST_USER_EMAIL
        assert "createdAt" in user
        assert "hashedPassword" not in user

    def test_me_without_token(self, client: TestClient) -> None:
        response = client.get("/api/v1/auth/me")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {
            "error": "Unauthorized - No token provided",
            "code": "AUTH_ERROR",
        }

    def test_me_with_expired_token(self, client: TestClient, test_user: models.User) -> None:
        expired = TokenService().create_access_token(test_user.id, timedelta(minutes=-1))
        client.cookies.set("token", expired)

        response = client.get("/api/v1/auth/me")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_me_for_deleted_user(self, client: TestClient) -> None:
        client.cookies.set("token", TokenService().create_access_token(424242))

        response = client.get("/api/v1/auth/me")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
