from nexaboard_identity.domain.user.value_objects.email import Email
from nexaboard_identity.domain.user.value_objects.user_role import UserRole

__all__ = ["Email", "UserRole"]
