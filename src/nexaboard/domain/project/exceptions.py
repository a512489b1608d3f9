"""Project domain exceptions."""

from nexaboard.domain.shared.exceptions import EntityNotFoundError, ErrorCode


class ProjectNotFoundError(EntityNotFoundError):
    """Project not found."""

    def __init__(self, project_id: str) -> None:
        self.project_id = project_id
        super().__init__(
            "Project not found",
            ErrorCode.PROJECT_NOT_FOUND,
            details={"project_id": project_id},
        )
