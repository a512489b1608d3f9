from nexaboard.infrastructure.persistence.sqlalchemy.repositories.message_repository import (  # NOQA: E501
    MessageRepositorySQLAlchemy,
)
from nexaboard.infrastructure.persistence.sqlalchemy.repositories.project_repository import (  # NOQA: E501
    ProjectRepositorySQLAlchemy,
)
from nexaboard.infrastructure.persistence.sqlalchemy.repositories.task_repository import (  # NOQA: E501
    TaskRepositorySQLAlchemy,
)

__all__ = [
    "MessageRepositorySQLAlchemy",
    "ProjectRepositorySQLAlchemy",
    "TaskRepositorySQLAlchemy",
]
