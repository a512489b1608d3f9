from nexaboard.domain.project.aggregates.project import (
    DEFAULT_DESCRIPTION,
    DEFAULT_STATUS,
    Project,
)

__all__ = ["DEFAULT_DESCRIPTION", "DEFAULT_STATUS", "Project"]
