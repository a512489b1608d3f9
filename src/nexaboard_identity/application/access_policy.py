"""Per-route access policies.

A route declares one policy when it is registered. After the request's
principal has been resolved (or not), ``authorize`` evaluates that policy.
It is the only place where requests are rejected for auth reasons.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from nexaboard_identity.domain.user import UserRole
from nexaboard_identity.exceptions import ForbiddenError, UnauthenticatedError

if TYPE_CHECKING:
    from nexaboard_identity.domain.user import User

PREFLIGHT_METHOD = "OPTIONS"


class AccessPolicy(ABC):
    """Rule deciding whether a principal may invoke a route."""

    @abstractmethod
    def check(self, principal: User | None) -> None:
        """Return silently when allowed.

        Raises
        ------
        UnauthenticatedError
            If a principal is required and absent
        ForbiddenError
            If the principal lacks a required role
        """


@dataclass(frozen=True)
class Public(AccessPolicy):
    """Allowed for everyone, authenticated or not."""

    def check(self, principal: User | None) -> None:
        return None


@dataclass(frozen=True)
class AuthenticatedOnly(AccessPolicy):
    """Allowed for any authenticated principal."""

    def check(self, principal: User | None) -> None:
        if principal is None:
            raise UnauthenticatedError


@dataclass(frozen=True)
class RoleIn(AccessPolicy):
    """Allowed for authenticated principals holding one of ``roles``."""

    roles: frozenset[UserRole]

    @classmethod
    def of(cls, *roles: UserRole) -> RoleIn:
        return cls(roles=frozenset(roles))

    def check(self, principal: User | None) -> None:
        if principal is None:
            raise UnauthenticatedError
        if principal.role not in self.roles:
            allowed = ", ".join(sorted(role.value for role in self.roles))
            raise ForbiddenError(f"Requires one of the roles: {allowed}")


def authorize(
    policy: AccessPolicy,
    principal: User | None,
    method: str | None = None,
) -> None:
    """Evaluate ``policy`` for the current request.

    Cross-origin preflight requests are always let through, whatever policy
    the target route declares.
    """
    if method is not None and method.upper() == PREFLIGHT_METHOD:
        return
    policy.check(principal)
