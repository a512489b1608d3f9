from enum import Enum


class UserRole(str, Enum):
    """Roles a user can hold, lowest privilege first."""

    MEMBER = "member"
    MANAGER = "manager"
    ADMIN = "admin"

    @classmethod
    def parse(cls, value: "str | UserRole | None") -> "UserRole":
        """Normalize free-form role input.

        Matching is case-insensitive. Missing, empty, or unrecognized input
        falls back to MEMBER instead of failing.
        """
        if isinstance(value, UserRole):
            return value
        if not value:
            return cls.MEMBER
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.MEMBER
