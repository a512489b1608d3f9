"""JWT token service.

Issues and validates the signed, time-limited identity tokens carried in the
auth cookie, and describes that cookie.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Callable, Literal

import jwt

from nexaboard.domain.shared.time import utc_now
from nexaboard_identity.exceptions import InvalidTokenError
from nexaboard_identity.schemas import AuthCookie, TokenPayload

if TYPE_CHECKING:
    from nexaboard_identity.domain.user import User


class TokenService:
    """Service for JWT token creation and verification.

    Tokens are stateless: nothing is stored server-side, so a token stays
    valid until its ``exp`` claim even after the cookie is cleared.

    Examples
    --------
    >>> service = TokenService(secret_key="your-secret-key")
    >>> token = service.issue(user)
    >>> service.validate(token)
    'user@example.com'
    """

    DEFAULT_TTL = timedelta(hours=24)
    DEFAULT_COOKIE_NAME = "nexaboard_token"
    ALGORITHM = "HS256"

    def __init__(  # NOQA: PLR0913
        self,
        secret_key: str,
        ttl: timedelta = DEFAULT_TTL,
        algorithm: str = ALGORITHM,
        cookie_name: str = DEFAULT_COOKIE_NAME,
        cookie_secure: bool = True,
        cookie_samesite: Literal["lax", "strict", "none"] = "lax",
        cookie_domain: str | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize the token service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        ttl
            Lifetime of issued tokens (and max-age of the cookie)
        algorithm
            HMAC algorithm used for signing
        cookie_name, cookie_secure, cookie_samesite, cookie_domain
            Attributes of the auth cookie
        clock
            Returns the current aware UTC datetime; injectable for tests
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)
        if ttl <= timedelta(0):
            msg = "Token TTL must be positive"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._ttl = ttl
        self._algorithm = algorithm
        self._cookie_name = cookie_name
        self._cookie_secure = cookie_secure
        self._cookie_samesite = cookie_samesite
        self._cookie_domain = cookie_domain
        self._clock = clock

    @property
    def cookie_name(self) -> str:
        return self._cookie_name

    @property
    def ttl_seconds(self) -> int:
        return int(self._ttl.total_seconds())

    def issue(self, user: User) -> str:
        """Create a signed token whose subject is the user's email.

        Returns
        -------
        The encoded JWT token string
        """
        now = self._clock()
        payload = {
            "sub": user.email,
            "iat": now,
            "exp": now + self._ttl,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def decode(self, token: str) -> TokenPayload:
        """Verify and decode a token.

        Expiry is checked against the service clock and is strict: a token
        is already invalid at the exact second of its ``exp`` claim.

        Raises
        ------
        InvalidTokenError
            If token is malformed, wrongly signed, expired, or has no subject
        """
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={
                    "require": ["sub", "exp", "iat"],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(reason=f"decode: {e}") from e

        subject = claims.get("sub")
        if not isinstance(subject, str) or not subject:
            raise InvalidTokenError(reason="missing subject")

        try:
            issued_at = datetime.fromtimestamp(claims["iat"], tz=timezone.utc)
            expires_at = datetime.fromtimestamp(claims["exp"], tz=timezone.utc)
        except (TypeError, ValueError, OverflowError) as e:
            raise InvalidTokenError(reason=f"malformed timestamps: {e}") from e

        if self._clock() >= expires_at:
            raise InvalidTokenError(reason="expired")

        return TokenPayload(
            subject=subject,
            issued_at=issued_at,
            expires_at=expires_at,
        )

    def validate(self, token: str) -> str:
        """Validate a token and return its subject claim."""
        return self.decode(token).subject

    def wrap_in_cookie(self, token: str) -> AuthCookie:
        """Describe the cookie that carries a freshly issued token."""
        return AuthCookie(
            key=self._cookie_name,
            value=token,
            max_age=self.ttl_seconds,
            path="/",
            httponly=True,
            secure=self._cookie_secure,
            samesite=self._cookie_samesite,
            domain=self._cookie_domain,
        )

    def clear_cookie(self) -> AuthCookie:
        """Describe a cookie that makes the client drop the token."""
        return AuthCookie(
            key=self._cookie_name,
            value="",
            max_age=0,
            path="/",
            httponly=True,
            secure=self._cookie_secure,
            samesite=self._cookie_samesite,
            domain=self._cookie_domain,
            expires=0,
        )
