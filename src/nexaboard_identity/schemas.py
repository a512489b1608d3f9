"""Identity schemas and data structures.

These are simple data classes used for transferring identity
data between components.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    Attributes
    ----------
    subject
        The user's login identifier (email)
    issued_at
        Token issue timestamp
    expires_at
        Token expiration timestamp
    """

    subject: str
    issued_at: datetime
    expires_at: datetime


@dataclass(frozen=True)
class AuthCookie:
    """Framework-neutral description of the auth cookie.

    The API layer copies these attributes onto the response; a cleared
    cookie has an empty value and ``max_age == 0``.
    """

    key: str
    value: str
    max_age: int
    path: str = "/"
    httponly: bool = True
    secure: bool = True
    samesite: Literal["lax", "strict", "none"] = "lax"
    domain: str | None = None
    expires: int | None = None

    @property
    def is_cleared(self) -> bool:
        return self.max_age == 0
