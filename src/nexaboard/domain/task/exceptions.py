"""Task domain exceptions."""

from nexaboard.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class TaskNotFoundError(EntityNotFoundError):
    """Task not found."""

    def __init__(self, task_id: str) -> None:
        self.task_id = task_id
        super().__init__(
            "Task not found",
            ErrorCode.TASK_NOT_FOUND,
            details={"task_id": task_id},
        )


class InvalidTaskStatusError(ValidationError):
    """Raised when a status string is not one of the board columns."""

    def __init__(self, status: str) -> None:
        self.status = status
        super().__init__(
            f"Invalid task status: {status}",
            details={"status": status},
        )
