"""Authentication schemas for request/response models."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from nexaboard_identity import Email, InvalidEmailError, User


class RegisterRequest(BaseModel):
    """Request schema for user registration.

    Password strength is checked by the hashing service so that a weak
    password is reported as ``WEAK_PASSWORD`` rather than a schema error.
    """

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., description="Password (8-72 bytes)")
    role: str | None = Field(
        default=None,
        description="member, manager or admin (case-insensitive, default member)",
    )

    @field_validator("email")
    @classmethod
    def _validate_stored_email(cls, v: str) -> str:
        """Reject addresses the user store would not accept."""
        try:
            return Email(v).value
        except InvalidEmailError as e:
            raise ValueError(e.message) from e

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ada Lovelace",
                "email": "ada@example.com",
                "password": "securepassword123",
                "role": "manager",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for user login.

    ``email`` is a plain string: an unparseable address fails the same way
    as a wrong password.
    """

    email: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "ada@example.com",
                "password": "securepassword123",
            },
        },
    )


class UserResponse(BaseModel):
    """Public view of a user. Carries no credential fields."""

    id: UUID
    email: str
    name: str
    role: str


class LogoutResponse(BaseModel):
    message: str


def to_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        email=user.email,
        name=user.name,
        role=user.role.value,
    )
