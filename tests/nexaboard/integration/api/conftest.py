"""
Fixtures for HTTP API tests.

Each test gets a fresh SQLite file. Tables are created with a synchronous
engine up front; the app talks to the same file through aiosqlite with
NullPool, so no connection outlives the event loop that opened it.
"""

from datetime import timedelta
from typing import Callable

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from nexaboard.infrastructure.persistence.sqlalchemy.models import Base
from nexaboard.presentation.api import create_app
from nexaboard.presentation.api.dependencies import get_db_session
from nexaboard_config.settings import Settings
from nexaboard_identity import TokenService

API_SECRET = "api-test-secret-key-with-enough-length"
FRONTEND_ORIGIN = "http://localhost:5173"
PASSWORD = "correct-horse-battery"


@pytest.fixture
def database_path(tmp_path):
    path = tmp_path / "nexaboard.db"
    sync_engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()
    return path


@pytest.fixture
def api_settings(database_path) -> Settings:
    return Settings(
        jwt_secret_key=SecretStr(API_SECRET),
        database_url=f"sqlite+aiosqlite:///{database_path}",
        api_debug=True,
        api_cors_origins=FRONTEND_ORIGIN,
        api_cookie_secure=False,
        password_hash_rounds=4,
        log_level="WARNING",
    )


@pytest.fixture
def app(api_settings) -> FastAPI:
    engine = create_async_engine(api_settings.database_url, poolclass=NullPool)
    session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db_session():
        async with session_maker() as session:
            yield session

    application = create_app(api_settings)
    application.dependency_overrides[get_db_session] = override_get_db_session
    return application


@pytest.fixture
def client_factory(app) -> Callable[[], TestClient]:
    """Build independent clients; each keeps its own cookie jar."""

    def make_client(**kwargs) -> TestClient:
        return TestClient(app, **kwargs)

    return make_client


@pytest.fixture
def client(client_factory) -> TestClient:
    return client_factory()


@pytest.fixture
def token_service(api_settings) -> TokenService:
    """Token service sharing the app's signing key."""
    return TokenService(
        secret_key=API_SECRET,
        ttl=timedelta(hours=api_settings.jwt_token_expire_hours),
        cookie_name=api_settings.api_cookie_name,
        cookie_secure=False,
    )


def register(
    client: TestClient,
    email: str,
    role: str | None = None,
    name: str | None = None,
) -> dict:
    """Register through the API; the client ends up signed in."""
    payload = {
        "name": name or email.split("@")[0].title(),
        "email": email,
        "password": PASSWORD,
    }
    if role is not None:
        payload["role"] = role
    response = client.post("/api/auth/register", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def register_user() -> Callable[..., dict]:
    return register


@pytest.fixture
def member_client(client_factory) -> TestClient:
    client = client_factory()
    client.user = register(client, "mel@example.com", name="Mel Member")
    return client


@pytest.fixture
def manager_client(client_factory) -> TestClient:
    client = client_factory()
    client.user = register(client, "mona@example.com", "manager", "Mona Manager")
    return client
