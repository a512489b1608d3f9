from nexaboard_identity.application.access_policy import (
    AccessPolicy,
    AuthenticatedOnly,
    Public,
    RoleIn,
    authorize,
)
from nexaboard_identity.application.services import AuthenticationService

__all__ = [
    "AccessPolicy",
    "AuthenticatedOnly",
    "AuthenticationService",
    "Public",
    "RoleIn",
    "authorize",
]
