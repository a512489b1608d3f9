"""
Registration against a real PostgreSQL server.

Uses Testcontainers for an ephemeral database. Marked as integration and
skipped unless enabled with --run-integration or RUN_INTEGRATION=1.
"""

import asyncio

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool
from testcontainers.postgres import PostgresContainer

import nexaboard.infrastructure.persistence.sqlalchemy.models  # noqa: F401
import nexaboard_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from nexaboard.infrastructure.persistence.sqlalchemy.models import Base
from nexaboard_identity import (
    AuthenticationService,
    EmailAlreadyExistsError,
    PasswordHashingService,
    TokenService,
    User,
)
from nexaboard_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

POSTGRES_IMAGE = "postgres:16-alpine"
PASSWORD = "correct-horse-battery"


@pytest.fixture(scope="module")
def postgres_container():
    with PostgresContainer(POSTGRES_IMAGE) as postgres:
        yield postgres


@pytest_asyncio.fixture
async def pg_engine(postgres_container):
    connection_url = postgres_container.get_connection_url()
    async_url = connection_url.replace(
        "postgresql+psycopg2://", "postgresql+asyncpg://"
    )
    async_url = async_url.replace("postgresql://", "postgresql+asyncpg://")

    engine = create_async_engine(async_url, poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(pg_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(pg_engine, class_=AsyncSession, expire_on_commit=False)


def _auth_service(session: AsyncSession) -> AuthenticationService:
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=PasswordHashingService(rounds=4),
        token_service=TokenService(secret_key="race-test-secret"),
    )


@pytest.mark.integration
class TestUniqueEmailOnPostgres:
    @pytest.mark.asyncio
    async def test_index_rejects_late_duplicate(self, session_maker):
        async with session_maker() as first:
            await UserRepositorySQLAlchemy(first).save(
                User.create("race@example.com", name="First", password_hash="x"),
            )
            await first.commit()

        # Skips the exists_by_email fast path, as a request that lost the race
        async with session_maker() as second:
            with pytest.raises(EmailAlreadyExistsError):
                await UserRepositorySQLAlchemy(second).save(
                    User.create("RACE@example.com", name="Second", password_hash="y"),
                )

    @pytest.mark.asyncio
    async def test_concurrent_registrations(self, session_maker):
        async def register_and_commit(name: str):
            async with session_maker() as session:
                result = await _auth_service(session).register(
                    email="same@example.com",
                    password=PASSWORD,
                    name=name,
                )
                await session.commit()
                return result

        results = await asyncio.gather(
            register_and_commit("One"),
            register_and_commit("Two"),
            return_exceptions=True,
        )

        failures = [r for r in results if isinstance(r, BaseException)]
        assert len(failures) == 1
        assert isinstance(failures[0], EmailAlreadyExistsError)

        async with session_maker() as session:
            assert await UserRepositorySQLAlchemy(session).count() == 1
