"""Tests for /api/auth endpoints."""

from uuid import UUID

import bcrypt
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool

from nexaboard_identity import User
from nexaboard_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

PASSWORD = "correct-horse-battery"


class TestRegister:
    def test_register_sets_cookie_and_hides_password(self, client, token_service):
        response = client.post(
            "/api/auth/register",
            json={
                "name": "Ada Lovelace",
                "email": "Ada@Example.com",
                "password": PASSWORD,
                "role": "Manager",
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["email"] == "ada@example.com"
        assert body["role"] == "manager"
        assert "password" not in body
        assert "password_hash" not in body

        token = response.cookies.get("nexaboard_token")
        assert token
        assert token_service.validate(token) == "ada@example.com"
        assert "httponly" in response.headers["set-cookie"].lower()

    def test_unknown_role_defaults_to_member(self, client, register_user):
        user = register_user(client, "wiz@example.com", role="wizard")

        assert user["role"] == "member"

    def test_duplicate_email(self, client, client_factory, register_user):
        register_user(client, "dup@example.com")

        response = client_factory().post(
            "/api/auth/register",
            json={"name": "Again", "email": "DUP@example.com", "password": PASSWORD},
        )

        assert response.status_code == 409
        assert response.json()["code"] == "EMAIL_ALREADY_EXISTS"

    def test_weak_password(self, client):
        response = client.post(
            "/api/auth/register",
            json={"name": "Weak", "email": "weak@example.com", "password": "short"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "WEAK_PASSWORD"
        assert "nexaboard_token" not in response.cookies

    def test_malformed_email_is_rejected(self, client):
        response = client.post(
            "/api/auth/register",
            json={"name": "Bad", "email": "not-an-email", "password": PASSWORD},
        )

        assert response.status_code == 422

    @pytest.mark.parametrize(
        "email",
        ["josé@example.com", "user@example.xn--p1ai"],
    )
    def test_email_the_user_store_cannot_hold_is_rejected(self, client, email):
        response = client.post(
            "/api/auth/register",
            json={"name": "Intl", "email": email, "password": PASSWORD},
        )

        assert response.status_code == 422
        assert "nexaboard_token" not in response.cookies


class TestLogin:
    def test_login_sets_cookie(self, client, client_factory, register_user):
        register_user(client, "lin@example.com")
        fresh = client_factory()

        response = fresh.post(
            "/api/auth/login",
            json={"email": "lin@example.com", "password": PASSWORD},
        )

        assert response.status_code == 200
        assert response.json()["email"] == "lin@example.com"
        assert fresh.get("/api/auth/me").status_code == 200

    def test_unknown_email_and_wrong_password_look_identical(
        self,
        client,
        register_user,
    ):
        register_user(client, "lin@example.com")

        wrong_password = client.post(
            "/api/auth/login",
            json={"email": "lin@example.com", "password": "wrong-password"},
        )
        unknown_email = client.post(
            "/api/auth/login",
            json={"email": "nobody@example.com", "password": PASSWORD},
        )

        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json()
        assert wrong_password.json()["code"] == "INVALID_CREDENTIALS"

    def test_failed_logins_do_not_hash(
        self,
        app,
        client,
        register_user,
        monkeypatch,
    ):
        """Failed logins only verify; the unknown-email dummy hash is reused."""
        register_user(client, "lin@example.com")
        hashpw_calls = []
        real_hashpw = bcrypt.hashpw

        def counting_hashpw(password, salt):
            hashpw_calls.append(password)
            return real_hashpw(password, salt)

        monkeypatch.setattr(bcrypt, "hashpw", counting_hashpw)
        attempts = [
            {"email": "lin@example.com", "password": "wrong-password"},
            {"email": "nobody@example.com", "password": PASSWORD},
            {"email": "nobody-else@example.com", "password": PASSWORD},
        ]

        for attempt in attempts:
            response = client.post("/api/auth/login", json=attempt)
            assert response.status_code == 401

        assert hashpw_calls == []
        assert "dummy_hash" in vars(app.state.password_service)

    def test_unparseable_email_is_invalid_credentials(self, client):
        response = client.post(
            "/api/auth/login",
            json={"email": "nonsense", "password": PASSWORD},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_CREDENTIALS"


class TestSession:
    def test_me_without_cookie(self, client):
        response = client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json() == {
            "detail": "Authentication required",
            "code": "UNAUTHENTICATED",
        }

    def test_me_returns_principal(self, member_client):
        response = member_client.get("/api/auth/me")

        assert response.status_code == 200
        body = response.json()
        assert body["email"] == "mel@example.com"
        assert body["name"] == "Mel Member"
        assert set(body) == {"id", "email", "name", "role"}

    def test_me_with_token_for_unknown_user(self, client, token_service):
        ghost = User.create("ghost@example.com", name="Ghost", password_hash="x")
        client.cookies.set("nexaboard_token", token_service.issue(ghost))

        response = client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json()["code"] == "UNAUTHENTICATED"

    async def test_me_after_user_deleted(self, member_client, api_settings):
        """A still-valid cookie for a removed account is not a session."""
        engine = create_async_engine(api_settings.database_url, poolclass=NullPool)
        async with AsyncSession(engine) as session:
            repo = UserRepositorySQLAlchemy(session)
            await repo.delete(UUID(member_client.user["id"]))
            await session.commit()
        await engine.dispose()

        response = member_client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json()["code"] == "UNAUTHENTICATED"

    def test_me_with_tampered_token(self, member_client: TestClient):
        token = member_client.cookies.get("nexaboard_token")
        header, payload, signature = token.split(".")
        middle = len(signature) // 2
        flipped = "B" if signature[middle] == "A" else "A"
        signature = signature[:middle] + flipped + signature[middle + 1 :]
        member_client.cookies.clear()
        member_client.cookies.set("nexaboard_token", f"{header}.{payload}.{signature}")

        response = member_client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json()["code"] == "UNAUTHENTICATED"

    def test_logout_clears_session(self, member_client):
        response = member_client.post("/api/auth/logout")

        assert response.status_code == 200
        assert response.json() == {"message": "Logged out successfully"}
        assert member_client.get("/api/auth/me").status_code == 401

    def test_logout_when_anonymous(self, client):
        assert client.post("/api/auth/logout").status_code == 200
