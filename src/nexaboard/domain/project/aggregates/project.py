"""Project aggregate."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID, uuid4

from nexaboard.domain.shared.time import utc_now

DEFAULT_DESCRIPTION = "New project Nexaboard"
DEFAULT_STATUS = "In Progress"


@dataclass
class Project:
    """A project led by one manager and worked on by a team of users.

    ``manager_name`` is a snapshot of the manager's display name taken when
    the project is created.
    """

    name: str
    manager_id: UUID
    manager_name: str | None = None
    description: str = DEFAULT_DESCRIPTION
    total_progress: int = 0
    status: str = DEFAULT_STATUS
    team_ids: list[UUID] = field(default_factory=list)
    deadline: date | None = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utc_now)

    @classmethod
    def create(
        cls,
        name: str,
        manager_id: UUID,
        manager_name: str | None = None,
        deadline: date | None = None,
    ) -> "Project":
        """Start a new project with the default description and status."""
        return cls(
            name=name,
            manager_id=manager_id,
            manager_name=manager_name,
            deadline=deadline,
        )

    def involves(self, user_id: UUID) -> bool:
        return self.manager_id == user_id or user_id in self.team_ids
