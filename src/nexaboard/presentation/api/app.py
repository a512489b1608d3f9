"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

All API endpoints are mounted under the /api prefix. The health check
endpoint stays at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nexaboard.infrastructure.persistence.sqlalchemy.init_db import create_tables
from nexaboard.presentation.api.config import get_api_settings
from nexaboard.presentation.api.dependencies import (
    build_engine,
    build_session_maker,
)
from nexaboard.presentation.api.exception_handlers import setup_exception_handlers
from nexaboard.presentation.api.routers import (
    auth_router,
    messages_router,
    projects_router,
    stats_router,
    tasks_router,
    users_router,
)
from nexaboard_config.settings import Settings, get_settings
from nexaboard_identity import PasswordHashingService


@lru_cache(maxsize=1)
def _configure_logging(level_name: str) -> None:
    """Configure application logging.

    Sets up console logging with timestamps and module names, the
    configured level for nexaboard modules and WARNING for noisy
    third-party libraries.
    """
    log_level = getattr(logging, level_name.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("nexaboard").setLevel(log_level)
    logging.getLogger("nexaboard_identity").setLevel(log_level)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_PREFIX = "/api"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Registration, login and the auth cookie.

- Passwords are hashed with bcrypt
- A signed JWT is carried in an HttpOnly cookie
- Logout clears the cookie; tokens are not revoked server-side
""",
    },
    {"name": "Users", "description": "Directory of registered users."},
    {
        "name": "Projects",
        "description": "Projects, their manager and team. Managers and admins "
        "create and delete projects.",
    },
    {
        "name": "Tasks",
        "description": """Task board.

**Statuses:** `TODO`, `IN_PROGRESS`, `REVIEW`, `DONE`

**Priorities:** `LOW`, `MEDIUM`, `HIGH`, `URGENT`
""",
    },
    {"name": "Messages", "description": "Team feed, newest first."},
    {"name": "Stats", "description": "Headline counts for the dashboard."},
    {"name": "Health", "description": "Service health monitoring endpoints."},
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting Nexaboard API v%s...", API_VERSION)
    engine = app.state.db_engine
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None
    yield

    # Shutdown - dispose the shared engine and its connection pool
    logger.info("Shutting down Nexaboard API...")
    await engine.dispose()
    logger.info("Database connections closed")


def create_api_router() -> APIRouter:
    """Create the API router with all endpoints mounted."""
    api_router = APIRouter()

    api_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    api_router.include_router(users_router, prefix="/users", tags=["Users"])
    api_router.include_router(projects_router, prefix="/projects", tags=["Projects"])
    api_router.include_router(tasks_router, prefix="/tasks", tags=["Tasks"])
    api_router.include_router(messages_router, prefix="/messages", tags=["Messages"])
    api_router.include_router(stats_router, prefix="/stats", tags=["Stats"])

    return api_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing. When given, it is also what
        every request-scoped dependency sees.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Configure logging on first app creation (not on module import)
    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Project management board: projects, tasks and a team feed.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )
    app.dependency_overrides[get_api_settings] = lambda: settings

    # Per-app resources, built from the settings this app was created with
    app.state.db_engine = build_engine(settings.database_url)
    app.state.session_maker = build_session_maker(app.state.db_engine)
    app.state.password_service = PasswordHashingService(
        rounds=settings.password_hash_rounds,
    )
    # Compute the login dummy hash now rather than on the first failed login
    _ = app.state.password_service.dummy_hash

    # Preflight requests are answered here, before any route policy runs
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=settings.cors_methods,
        allow_headers=settings.cors_headers,
    )

    setup_exception_handlers(app)

    app.include_router(create_api_router(), prefix=API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint.

        Returns service status and version info.
        """
        return {
            "status": "healthy",
            "version": API_VERSION,
        }

    return app
