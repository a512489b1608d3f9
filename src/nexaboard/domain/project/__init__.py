"""Project domain - projects, their manager and team."""

from nexaboard.domain.project.aggregates import (
    DEFAULT_DESCRIPTION,
    DEFAULT_STATUS,
    Project,
)
from nexaboard.domain.project.exceptions import ProjectNotFoundError
from nexaboard.domain.project.repositories import ProjectRepository

__all__ = [
    "DEFAULT_DESCRIPTION",
    "DEFAULT_STATUS",
    "Project",
    "ProjectNotFoundError",
    "ProjectRepository",
]
