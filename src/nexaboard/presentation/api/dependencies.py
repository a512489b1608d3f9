"""FastAPI dependency injection for the Nexaboard API.

Provides dependencies for:
- Database sessions
- Identity services (tokens, password hashing, authentication)
- The request principal and per-route access policies
- Repositories and application services
"""

import logging
from datetime import timedelta
from typing import Annotated, AsyncGenerator, Awaitable, Callable

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from nexaboard.application.queries import ListUsersQuery, StatsQuery
from nexaboard.application.services import (
    MessageService,
    ProjectService,
    TaskService,
)
from nexaboard.infrastructure.persistence.sqlalchemy.repositories import (
    MessageRepositorySQLAlchemy,
    ProjectRepositorySQLAlchemy,
    TaskRepositorySQLAlchemy,
)
from nexaboard.presentation.api.config import get_api_settings
from nexaboard_config.settings import Settings
from nexaboard_identity import (
    AccessPolicy,
    AuthenticatedOnly,
    AuthenticationService,
    InvalidEmailError,
    InvalidTokenError,
    PasswordHashingService,
    Public,
    RoleIn,
    TokenService,
    User,
    UserRole,
    authorize,
)
from nexaboard_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Engine & Session (one per app, see create_app)
# -----------------------------------------------------------------------------


def build_engine(database_url: str) -> AsyncEngine:
    """
    Create the async database engine for one application instance.

    The engine manages the connection pool and is reused across all requests.

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        database_url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


def build_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    One session per request. Routers commit explicitly; anything left
    uncommitted is rolled back when the session closes.

    Yields
    ------
    AsyncSession for database operations
    """
    async with request.app.state.session_maker() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Identity Services
# -----------------------------------------------------------------------------


def get_token_service(settings: SettingsDep) -> TokenService:
    """Get token service configured with API settings."""
    return TokenService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        ttl=timedelta(hours=settings.jwt_token_expire_hours),
        algorithm=settings.jwt_algorithm,
        cookie_name=settings.api_cookie_name,
        cookie_secure=settings.api_cookie_secure,
        cookie_samesite=settings.api_cookie_samesite,
        cookie_domain=settings.api_cookie_domain,
    )


TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]


def get_password_service(request: Request) -> PasswordHashingService:
    """Get the app-wide password hashing service.

    Shared across requests so its dummy hash is computed once, not on every
    login for an unknown email.
    """
    return request.app.state.password_service


def get_user_repository(session: DBSession) -> UserRepositorySQLAlchemy:
    return UserRepositorySQLAlchemy(session)


UserRepo = Annotated[UserRepositorySQLAlchemy, Depends(get_user_repository)]


async def get_authentication_service(
    user_repo: UserRepo,
    token_service: TokenServiceDep,
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    """
    Get authentication service with all dependencies.

    This service orchestrates user registration and login.
    """
    return AuthenticationService(
        user_repository=user_repo,
        password_service=password_service,
        token_service=token_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Principal & Access Policies
# -----------------------------------------------------------------------------


async def resolve_principal(
    request: Request,
    user_repo: UserRepo,
    token_service: TokenServiceDep,
) -> User | None:
    """
    Resolve the authenticated user for this request, if any.

    Reads the auth cookie, validates the token and loads the user named by
    its subject. Missing cookies, invalid tokens and unknown subjects all
    yield ``None``; deciding whether that is acceptable is left to the
    route's access policy. Store failures propagate.

    Returns
    -------
    The principal, or None for an anonymous request
    """
    token = request.cookies.get(token_service.cookie_name)
    if not token:
        return None

    try:
        subject = token_service.validate(token)
    except InvalidTokenError as e:
        logger.debug("Ignoring auth cookie: %s", e.reason)
        return None

    try:
        user = await user_repo.find_by_email(subject)
    except InvalidEmailError:
        return None

    if user is None:
        logger.debug("No user for token subject: %s", subject)
    return user


Principal = Annotated[User | None, Depends(resolve_principal)]


def require(policy: AccessPolicy) -> Callable[..., Awaitable[User | None]]:
    """Turn an access policy into a route dependency.

    The dependency evaluates ``policy`` against the resolved principal and
    returns that principal, so handlers receive it as a plain parameter.
    """

    async def dependency(request: Request, principal: Principal) -> User | None:
        authorize(policy, principal, request.method)
        return principal

    return dependency


# Type aliases for route principals
CurrentUser = Annotated[User, Depends(require(AuthenticatedOnly()))]
ManagerUser = Annotated[
    User,
    Depends(require(RoleIn.of(UserRole.MANAGER, UserRole.ADMIN))),
]
OptionalUser = Annotated[User | None, Depends(require(Public()))]


# -----------------------------------------------------------------------------
# Application Services & Queries
# -----------------------------------------------------------------------------


def get_project_service(session: DBSession, user_repo: UserRepo) -> ProjectService:
    return ProjectService(
        project_repository=ProjectRepositorySQLAlchemy(session),
        user_repository=user_repo,
    )


def get_task_service(session: DBSession, user_repo: UserRepo) -> TaskService:
    return TaskService(
        task_repository=TaskRepositorySQLAlchemy(session),
        user_repository=user_repo,
    )


def get_message_service(session: DBSession) -> MessageService:
    return MessageService(message_repository=MessageRepositorySQLAlchemy(session))


def get_stats_query(session: DBSession, user_repo: UserRepo) -> StatsQuery:
    return StatsQuery(
        project_repository=ProjectRepositorySQLAlchemy(session),
        user_repository=user_repo,
        message_repository=MessageRepositorySQLAlchemy(session),
    )


def get_list_users_query(user_repo: UserRepo) -> ListUsersQuery:
    return ListUsersQuery(user_repository=user_repo)


ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
TaskServiceDep = Annotated[TaskService, Depends(get_task_service)]
MessageServiceDep = Annotated[MessageService, Depends(get_message_service)]
StatsQueryDep = Annotated[StatsQuery, Depends(get_stats_query)]
ListUsersQueryDep = Annotated[ListUsersQuery, Depends(get_list_users_query)]
