"""Pydantic request/response models and their domain mappers."""

from nexaboard.presentation.api.schemas.auth import (
    LoginRequest,
    LogoutResponse,
    RegisterRequest,
    UserResponse,
    to_user_response,
)
from nexaboard.presentation.api.schemas.messages import (
    MessageCreateRequest,
    MessageResponse,
    to_message_response,
)
from nexaboard.presentation.api.schemas.projects import (
    ProjectCreateRequest,
    ProjectResponse,
    to_project_response,
)
from nexaboard.presentation.api.schemas.stats import StatsResponse, to_stats_response
from nexaboard.presentation.api.schemas.tasks import (
    TaskCreateRequest,
    TaskResponse,
    TaskUpdateRequest,
    to_task_response,
)

__all__ = [
    "LoginRequest",
    "LogoutResponse",
    "MessageCreateRequest",
    "MessageResponse",
    "ProjectCreateRequest",
    "ProjectResponse",
    "RegisterRequest",
    "StatsResponse",
    "TaskCreateRequest",
    "TaskResponse",
    "TaskUpdateRequest",
    "UserResponse",
    "to_message_response",
    "to_project_response",
    "to_stats_response",
    "to_task_response",
    "to_user_response",
]
