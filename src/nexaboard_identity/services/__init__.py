"""Identity services (pure logic, no persistence)."""

from nexaboard_identity.services.password_service import PasswordHashingService
from nexaboard_identity.services.token_service import TokenService

__all__ = [
    "PasswordHashingService",
    "TokenService",
]
