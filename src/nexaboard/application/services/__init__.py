"""Application services for the project board."""

from nexaboard.application.services.message_service import MessageService
from nexaboard.application.services.project_service import ProjectService
from nexaboard.application.services.task_service import TaskService

__all__ = ["MessageService", "ProjectService", "TaskService"]
