"""Authentication router for registration, login, session lookup and logout."""

import logging

from fastapi import APIRouter, Response, status

from nexaboard.presentation.api.dependencies import (
    AuthService,
    CurrentUser,
    DBSession,
    OptionalUser,
    TokenServiceDep,
)
from nexaboard.presentation.api.schemas.auth import (
    LoginRequest,
    LogoutResponse,
    RegisterRequest,
    UserResponse,
    to_user_response,
)
from nexaboard_identity import AuthCookie

logger = logging.getLogger(__name__)

router = APIRouter()


def _apply_cookie(response: Response, cookie: AuthCookie) -> None:
    """Copy an auth cookie description onto the response.

    The cookie is:
    - HttpOnly: Not accessible to JavaScript (XSS protection)
    - Secure: Only sent over HTTPS (when cookie_secure=True)
    - SameSite: Limits cross-site sending (CSRF protection)
    """
    response.set_cookie(
        key=cookie.key,
        value=cookie.value,
        max_age=cookie.max_age,
        expires=cookie.expires,
        path=cookie.path,
        domain=cookie.domain,
        secure=cookie.secure,
        httponly=cookie.httponly,
        samesite=cookie.samesite,
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered, auth cookie set"},
        400: {"description": "Weak password"},
        409: {"description": "Email already registered"},
    },
)
async def register(
    request: RegisterRequest,
    response: Response,
    auth_service: AuthService,
    token_service: TokenServiceDep,
    session: DBSession,
    _: OptionalUser,
) -> UserResponse:
    """
    Create an account and sign it in.

    The role defaults to member when omitted or unrecognized.
    """
    user, token = await auth_service.register(
        email=request.email,
        password=request.password,
        name=request.name,
        role=request.role,
    )
    await session.commit()

    _apply_cookie(response, token_service.wrap_in_cookie(token))
    return to_user_response(user)


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful, auth cookie set"},
        401: {"description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    response: Response,
    auth_service: AuthService,
    token_service: TokenServiceDep,
    _: OptionalUser,
) -> UserResponse:
    """
    Authenticate with email and password.

    Unknown email and wrong password produce the same response.
    """
    user, token = await auth_service.login(
        email=request.email,
        password=request.password,
    )

    _apply_cookie(response, token_service.wrap_in_cookie(token))
    return to_user_response(user)


@router.get(
    "/me",
    summary="Get the signed-in user",
    responses={401: {"description": "Not authenticated"}},
)
async def me(current_user: CurrentUser) -> UserResponse:
    return to_user_response(current_user)


@router.post("/logout", summary="Sign out")
async def logout(
    response: Response,
    token_service: TokenServiceDep,
    principal: OptionalUser,
) -> LogoutResponse:
    """
    Clear the auth cookie.

    Tokens are stateless, so a copy of the token kept elsewhere stays valid
    until it expires.
    """
    _apply_cookie(response, token_service.clear_cookie())
    if principal is not None:
        logger.info("User logged out: %s", principal.email)
    return LogoutResponse(message="Logged out successfully")
