"""Identity and authentication exceptions.

These exceptions are raised by the nexaboard_identity package. They carry a
stable error code so the presentation layer can map them to HTTP responses
without inspecting messages.
"""

from nexaboard.domain.shared.exceptions import DomainException, ErrorCode


class AuthError(DomainException):
    """Base exception for all authentication errors."""

    def __init__(
        self,
        message: str = "Authentication error",
        code: ErrorCode = ErrorCode.UNAUTHENTICATED,
    ):
        super().__init__(message, code)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed.

    The message is the same for every cause. ``reason`` records which check
    failed and is only meant for debug logging.
    """

    def __init__(
        self,
        message: str = "Invalid or expired token",
        reason: str = "invalid",
    ):
        self.reason = reason
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message, ErrorCode.WEAK_PASSWORD)


class InvalidCredentialsError(AuthError):
    """Raised when email or password is incorrect during login."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, ErrorCode.INVALID_CREDENTIALS)


class UnauthenticatedError(AuthError):
    """Raised when a route requires a principal and the request has none."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, ErrorCode.UNAUTHENTICATED)


class ForbiddenError(AuthError):
    """Raised when the principal's role is not allowed on a route."""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message, ErrorCode.FORBIDDEN)
