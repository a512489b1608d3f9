"""Repository interface for Project aggregate."""

from abc import ABC, abstractmethod
from uuid import UUID

from nexaboard.domain.project.aggregates import Project


class ProjectRepository(ABC):
    """Repository interface for Project persistence."""

    @abstractmethod
    async def find_by_id(self, project_id: UUID) -> Project | None:
        """Find project by ID, None if not found."""

    @abstractmethod
    async def find_all(self) -> list[Project]:
        """Return all projects, oldest first."""

    @abstractmethod
    async def find_by_manager(self, manager_id: UUID) -> list[Project]:
        """Return projects managed by the given user."""

    @abstractmethod
    async def find_by_team_member(self, user_id: UUID) -> list[Project]:
        """Return projects whose team includes the given user."""

    @abstractmethod
    async def save(self, project: Project) -> None:
        """Save project (create or update)."""

    @abstractmethod
    async def delete(self, project_id: UUID) -> bool:
        """Delete project. Returns True if a row was removed."""

    @abstractmethod
    async def count(self) -> int:
        """Count all projects."""
