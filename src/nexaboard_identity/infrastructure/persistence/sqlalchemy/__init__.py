"""SQLAlchemy persistence for identity data."""

from nexaboard_identity.infrastructure.persistence.sqlalchemy.models import UserModel
from nexaboard_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = ["UserModel", "UserRepositorySQLAlchemy"]
