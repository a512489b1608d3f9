from nexaboard.domain.project.repositories.project_repository import (
    ProjectRepository,
)

__all__ = ["ProjectRepository"]
